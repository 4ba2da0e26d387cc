"""
PathChange 데이터 모델

방문한 파일시스템 항목 하나에 대한 처리 결과입니다.
한 번 생성되면 변경되지 않으며(frozen), 외부에는 {path, modified, error} 레코드로 직렬화됩니다.
경로는 입력된 텍스트 그대로(예: "./a b") 보관합니다.

상태별 직렬화 규칙:
    unchanged     → modified: null, error: null
    changed       → modified: 경로, error: null
    error_rename  → modified: 경로, error: 메시지 (dry-run 포함)
    error         → modified: null, error: 메시지
"""
import os
import json
from dataclasses import dataclass
from typing import Optional, Dict, Any, Union


STATUS_UNCHANGED = "unchanged"
STATUS_CHANGED = "changed"
STATUS_ERROR_RENAME = "error_rename"
STATUS_ERROR = "error"

# dry-run 시 error_rename에 담기는 표식 (실제 실패가 아님)
DRY_RUN_ERROR = "dry-run"

PathLike = Union[str, os.PathLike]


def display_path(path: PathLike) -> str:
    """출력용 경로 문자열 (디코딩 불가 바이트는 U+FFFD로 대체)"""
    return os.fsencode(path).decode('utf-8', errors='replace')


@dataclass(frozen=True)
class PathChange:
    """항목 하나의 처리 결과"""

    status: str                     # unchanged, changed, error_rename, error
    path: str                       # 원본 경로
    modified: Optional[str] = None  # 변경(예정) 경로
    error: Optional[str] = None     # 에러 메시지

    @classmethod
    def unchanged(cls, path: PathLike) -> 'PathChange':
        return cls(STATUS_UNCHANGED, os.fspath(path))

    @classmethod
    def changed(cls, path: PathLike, modified: PathLike) -> 'PathChange':
        return cls(STATUS_CHANGED, os.fspath(path), os.fspath(modified))

    @classmethod
    def error_rename(cls, path: PathLike, modified: PathLike, error: str) -> 'PathChange':
        return cls(STATUS_ERROR_RENAME, os.fspath(path), os.fspath(modified), error)

    @classmethod
    def path_error(cls, path: PathLike, error: str) -> 'PathChange':
        return cls(STATUS_ERROR, os.fspath(path), None, error)

    @property
    def is_unchanged(self) -> bool:
        return self.status == STATUS_UNCHANGED

    @property
    def is_changed(self) -> bool:
        return self.status == STATUS_CHANGED

    @property
    def is_error(self) -> bool:
        """error_rename(dry-run 포함) 또는 error 여부"""
        return self.status in (STATUS_ERROR_RENAME, STATUS_ERROR)

    @property
    def is_pending(self) -> bool:
        """dry-run으로 보류된 변경인지 여부"""
        return self.status == STATUS_ERROR_RENAME and self.error == DRY_RUN_ERROR

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return {
            'path': self.path,
            'modified': self.modified,
            'error': self.error
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PathChange':
        """딕셔너리에서 PathChange 복원 (modified/error 존재 여부로 상태 결정)"""
        path = data['path']
        modified = data.get('modified')
        error = data.get('error')

        if modified is None and error is None:
            return cls.unchanged(path)
        if error is None:
            return cls.changed(path, modified)
        if modified is None:
            return cls.path_error(path, error)
        return cls.error_rename(path, modified, error)

    def to_json(self) -> str:
        """JSON 문자열로 직렬화"""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> 'PathChange':
        """JSON 문자열에서 PathChange 복원"""
        return cls.from_dict(json.loads(json_str))

    def describe(self) -> str:
        """사람이 읽는 한 줄 요약 (unchanged는 경로만)"""
        if self.status == STATUS_CHANGED:
            return f"{display_path(self.path)} -> {display_path(self.modified)}"
        if self.status == STATUS_ERROR_RENAME:
            return f"{display_path(self.path)} -> {display_path(self.modified)} : {self.error}"
        if self.status == STATUS_ERROR:
            return f"{display_path(self.path)} : {self.error}"
        return display_path(self.path)
