"""
Pytest Configuration

프로젝트 루트를 sys.path에 추가하고, 실행 환경의 NAMEFOLD_* 변수가 테스트에 섞이지 않도록 비웁니다.
"""
import sys
import os

import pytest

_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from config.fold_config import ENV_PREFIX


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """NAMEFOLD_* 환경 변수 제거"""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
