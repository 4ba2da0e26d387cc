"""
Result Collector

항목별 PathChange를 하나의 컬렉션으로 모읍니다.
순서는 의미가 없으며(동시 실행 시 달라질 수 있음), 호출 측은 결과를 집합처럼 다뤄야 합니다.
"""
from dataclasses import dataclass, field
from typing import Iterable, List

from namefold.path_change import PathChange


@dataclass
class FoldSummary:
    """실행 결과 집계"""
    total: int = 0
    unchanged: int = 0
    changed: int = 0
    pending: int = 0       # dry-run으로 보류된 변경
    failed: int = 0        # 실제 rename 실패 + 구조적 에러
    errors: List[str] = field(default_factory=list)

    def to_dict(self):
        """결과를 딕셔너리로 변환"""
        return {
            'total': self.total,
            'unchanged': self.unchanged,
            'changed': self.changed,
            'pending': self.pending,
            'failed': self.failed,
            'errors': self.errors
        }


class ResultCollector:
    """PathChange 누적기"""

    def __init__(self, changes: Iterable[PathChange] = ()):
        self._changes: List[PathChange] = list(changes)

    def extend(self, changes: Iterable[PathChange]):
        self._changes.extend(changes)

    @property
    def changes(self) -> List[PathChange]:
        """수집된 결과 (복사본)"""
        return list(self._changes)

    def only_errors(self) -> List[PathChange]:
        """error / error_rename 결과만 반환"""
        return [change for change in self._changes if change.is_error]

    def summary(self) -> FoldSummary:
        """상태별 개수 집계"""
        summary = FoldSummary(total=len(self._changes))
        for change in self._changes:
            if change.is_unchanged:
                summary.unchanged += 1
            elif change.is_changed:
                summary.changed += 1
            elif change.is_pending:
                summary.pending += 1
            else:
                summary.failed += 1
                summary.errors.append(change.describe())
        return summary
