"""
FoldConfig 설정 관리 모듈

이름 정리 실행에 필요한 설정을 관리합니다.
JSON 파일과 환경 변수(NAMEFOLD_*, .env 포함)에서 로드하고, 잘못된 값은 기본값으로 대체합니다.

우선순위: 기본값 < 설정 파일 < 환경 변수 < CLI 인자
"""
import os
import json
from pathlib import Path
from dataclasses import dataclass
from typing import Set, Dict, Any, Optional, Mapping

from dotenv import load_dotenv


# 출력 방식
OUTPUT_DEFAULT = "default"
OUTPUT_QUIET = "quiet"
OUTPUT_JSON = "json"
VALID_OUTPUTS: Set[str] = {OUTPUT_DEFAULT, OUTPUT_QUIET, OUTPUT_JSON}

# 유효한 로그 레벨
VALID_LOG_LEVELS: Set[str] = {"DEBUG", "INFO", "WARNING", "ERROR"}

# 환경 변수 접두사
ENV_PREFIX = "NAMEFOLD_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> Optional[bool]:
    """환경 변수 문자열을 bool로 변환 (알 수 없는 값은 None)"""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


@dataclass
class FoldConfig:
    """이름 정리 설정 데이터클래스"""

    dry_run: bool = True
    output: str = OUTPUT_DEFAULT
    json_only_errors: bool = False
    json_pretty: bool = False
    max_workers: int = 1
    log_level: str = "WARNING"
    log_dir: str = ""

    def __post_init__(self):
        """초기화 후 유효성 검증 및 기본값 적용"""
        self._validate_and_fix()

    def validate(self) -> 'FoldConfig':
        """필드를 직접 바꾼 뒤 다시 검증 (잘못된 값은 기본값으로 대체)"""
        self._validate_and_fix()
        return self

    def _validate_and_fix(self):
        """잘못된 값을 기본값으로 대체"""
        if not isinstance(self.dry_run, bool):
            self.dry_run = True

        if self.output not in VALID_OUTPUTS:
            self.output = OUTPUT_DEFAULT

        if not isinstance(self.json_only_errors, bool):
            self.json_only_errors = False

        if not isinstance(self.json_pretty, bool):
            self.json_pretty = False

        # max_workers 검증 (1 이상의 정수, bool 제외)
        if (not isinstance(self.max_workers, int) or isinstance(self.max_workers, bool)
                or self.max_workers < 1):
            self.max_workers = 1

        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            self.log_level = "WARNING"
        else:
            self.log_level = self.log_level.upper()

        if not isinstance(self.log_dir, str):
            self.log_dir = ""

    @property
    def is_verbose(self) -> bool:
        """기본(상세) 출력 여부"""
        return self.output == OUTPUT_DEFAULT

    @property
    def is_concurrent(self) -> bool:
        """스레드 풀 사용 여부"""
        return self.max_workers > 1

    @property
    def log_path(self) -> Optional[Path]:
        """log_dir을 Path 객체로 반환"""
        return Path(self.log_dir) if self.log_dir else None

    def describe(self) -> str:
        """실행 배너용 요약 (출력 방식은 포함하지 않음)"""
        return f"FoldConfig {{ dry_run: {str(self.dry_run).lower()} }}"

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return {
            'dry_run': self.dry_run,
            'output': self.output,
            'json_only_errors': self.json_only_errors,
            'json_pretty': self.json_pretty,
            'max_workers': self.max_workers,
            'log_level': self.log_level,
            'log_dir': self.log_dir
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FoldConfig':
        """딕셔너리에서 FoldConfig 복원 (안전한 기본값 적용)"""
        return cls(
            dry_run=data.get('dry_run', True),
            output=data.get('output', OUTPUT_DEFAULT),
            json_only_errors=data.get('json_only_errors', False),
            json_pretty=data.get('json_pretty', False),
            max_workers=data.get('max_workers', 1),
            log_level=data.get('log_level', 'WARNING'),
            log_dir=data.get('log_dir', '')
        )

    def to_json(self, indent: int = 2) -> str:
        """JSON 문자열로 직렬화"""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> 'FoldConfig':
        """JSON 문자열에서 FoldConfig 복원"""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError:
            # JSON 파싱 실패 시 기본 설정 반환
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls.from_dict(data)

    def save(self, file_path: Path) -> None:
        """설정을 JSON 파일로 저장"""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(self.to_json())

    @classmethod
    def load(cls, file_path: Path) -> 'FoldConfig':
        """JSON 파일에서 설정 로드 (파일 없으면 기본값)"""
        file_path = Path(file_path)
        if not file_path.exists():
            return cls()

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return cls.from_json(f.read())
        except (IOError, UnicodeDecodeError):
            return cls()

    def with_env(self, environ: Optional[Mapping[str, str]] = None) -> 'FoldConfig':
        """
        환경 변수로 덮어쓴 새 설정 반환

        Args:
            environ: 환경 변수 매핑 (None이면 .env 로드 후 os.environ 사용)

        Returns:
            환경 변수가 반영된 FoldConfig
        """
        if environ is None:
            # .env 파일 로드 (시스템 변수보다 우선)
            load_dotenv(override=True)
            environ = os.environ

        data = self.to_dict()
        for key in ('dry_run', 'json_only_errors', 'json_pretty'):
            raw = environ.get(ENV_PREFIX + key.upper())
            if raw is not None:
                parsed = _parse_bool(raw)
                if parsed is not None:
                    data[key] = parsed

        raw_workers = environ.get(ENV_PREFIX + 'MAX_WORKERS')
        if raw_workers is not None:
            try:
                data['max_workers'] = int(raw_workers)
            except ValueError:
                pass

        for key in ('output', 'log_level', 'log_dir'):
            raw = environ.get(ENV_PREFIX + key.upper())
            if raw is not None:
                data[key] = raw.strip()

        return FoldConfig.from_dict(data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'FoldConfig':
        """기본값 위에 환경 변수를 반영한 설정 생성"""
        return cls().with_env(environ)
