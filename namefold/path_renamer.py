"""
Path Renamer

경로 하나의 마지막 구성요소를 정규화하고, 필요하면 실제 rename을 수행합니다(dry-run이면 시뮬레이션만).
모든 실패는 PathChange로 돌려주며 예외를 밖으로 던지지 않습니다.
경로는 입력된 텍스트를 그대로 유지하고(예: "./a b" → "./a_b") 마지막 구성요소만 바꿉니다.

결과:
    - 이름 구성요소가 없음(/, ., ..) 또는 정규화 결과가 원본과 같음 → unchanged
    - dry-run → error_rename(error="dry-run")
    - rename 성공 → changed
    - rename 실패 (권한, 없음, 대상 존재, 사용할 수 없는 이름, NUL 바이트 등) → error_rename(error=에러 메시지)
"""
import os
from typing import Optional, Tuple, Union

from config.fold_config import FoldConfig
from namefold.fold_logger import FoldLogger
from namefold.name_builder import normalize_name, to_raw_name
from namefold.path_change import PathChange, DRY_RUN_ERROR


# 폴딩 결과가 이 이름들이면 rename 대상이 될 수 없음
UNUSABLE_NAMES = ("", ".", "..")


def split_name(path: str) -> Tuple[str, str]:
    """
    (부모 경로, 마지막 구성요소) 분리

    끝의 경로 구분자는 무시합니다 ("a/b/" → ("a", "b")).
    """
    stripped = path.rstrip(os.sep)
    if os.altsep:
        stripped = stripped.rstrip(os.altsep)
    if not stripped:
        return path, ""
    return os.path.split(stripped)


def modified_path_for(path: Union[str, os.PathLike], new_name: str) -> str:
    """마지막 구성요소만 바꾼 경로 (부모 경로는 문자열 그대로 유지)"""
    parent, _ = split_name(os.fspath(path))
    return os.path.join(parent, new_name)


class PathRenamer:
    """경로 하나에 대한 정규화 + rename"""

    def __init__(self, config: FoldConfig, logger: Optional[FoldLogger] = None):
        """
        Args:
            config: 실행 설정 (dry_run만 사용)
            logger: 로거 (없으면 콘솔 출력 없는 로거 생성)
        """
        self.dry_run = config.dry_run
        self.logger = logger or FoldLogger(console_output=False)

    def process(self, path: Union[str, os.PathLike]) -> PathChange:
        """
        경로 하나 처리

        Args:
            path: 대상 경로

        Returns:
            PathChange
        """
        path = os.fspath(path)
        _, name = split_name(path)
        if name in UNUSABLE_NAMES:
            return PathChange.unchanged(path)

        raw_name = to_raw_name(name)
        normalized = normalize_name(raw_name)
        if normalized.encode('ascii') == raw_name:
            return PathChange.unchanged(path)

        modified = modified_path_for(path, normalized)

        if self.dry_run:
            change = PathChange.error_rename(path, modified, DRY_RUN_ERROR)
        else:
            change = self._rename(path, modified, normalized)

        self.logger.log_change(change)
        return change

    def _rename(self, path: str, modified: str, normalized: str) -> PathChange:
        """실제 rename 수행"""
        if normalized in UNUSABLE_NAMES:
            return PathChange.error_rename(
                path, modified, f"folded name {normalized!r} is not a usable file name"
            )

        # os.rename은 POSIX에서 기존 파일을 덮어쓰므로 먼저 확인
        if os.path.lexists(modified):
            return PathChange.error_rename(path, modified, f"target already exists: {modified}")

        try:
            os.rename(path, modified)
        except (OSError, ValueError) as e:
            # ValueError: 경로에 NUL 바이트 포함
            return PathChange.error_rename(path, modified, str(e))

        return PathChange.changed(path, modified)


def clean_path(path: Union[str, os.PathLike], config: FoldConfig, logger: Optional[FoldLogger] = None) -> PathChange:
    """PathRenamer 한 번 실행 헬퍼 함수"""
    return PathRenamer(config, logger).process(path)
