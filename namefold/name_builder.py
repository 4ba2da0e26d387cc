"""
Name Builder

파일명 하나(경로의 마지막 구성요소)를 ASCII 안전 이름으로 접는 누산기입니다.
128 미만 바이트는 ASCII 규칙으로, 그 이상은 Scalar Decoder + Fold Classifier로 처리합니다.

ASCII 규칙:
    - 구분자 [0-44], 47, [58-64], [91-96], [123-127] → 직전이 content일 때만 '_' 하나
    - 하이픈(45) → 직전이 content일 때만 유지, content를 다시 열지 않음
    - 마침표(46) → 항상 유지, content 해제
    - 영숫자 → 그대로 유지, content 설정

예:
    "my file.ext"  → "my_file.ext"
    "my??file.ext" → "my_file.ext"
    "my?..file"    → "my_..file"
    "Ⓜｙ–fïle"     → "My-file"
"""
import os
from typing import List, Optional, Union

from namefold.fold_table import FoldOutcome, KEEP, COLLAPSE, LITERAL, classify
from namefold.scalar_decoder import ScalarDecoder


HYPHEN = 45
PERIOD = 46
SEPARATOR_BYTES = frozenset(
    list(range(0, 45)) + [47] + list(range(58, 65)) + list(range(91, 97)) + list(range(123, 128))
)


class NameBuilder:
    """파일명 하나를 접는 동안의 상태 (호출 단위로 생성, 공유 금지)"""

    def __init__(self):
        self._output: List[str] = []
        self._last_was_content = False
        self._decoder = ScalarDecoder()

    @property
    def last_was_content(self) -> bool:
        """마지막 출력이 content 구간에 속하는지 여부"""
        return self._last_was_content

    def feed(self, byte: int):
        """
        바이트 하나 처리

        Args:
            byte: 0~255 바이트 값
        """
        if byte < 128 and not self._decoder.is_pending:
            self._apply_ascii(byte)
            return

        done, scalar = self._decoder.feed(byte)
        if done:
            self._apply_outcome(classify(scalar))

    def feed_all(self, raw: bytes) -> 'NameBuilder':
        """바이트열 전체 처리"""
        for byte in raw:
            self.feed(byte)
        return self

    def result(self) -> str:
        """누적된 정규화 이름 반환 (끝에 남은 미완성 시퀀스는 버림)"""
        return "".join(self._output)

    def _emit_separator(self):
        if self._last_was_content:
            self._output.append('_')
        self._last_was_content = False

    def _apply_ascii(self, byte: int):
        if byte == PERIOD:
            self._output.append('.')
            self._last_was_content = False
        elif byte == HYPHEN:
            # TODO: confirm with product whether a hyphen should reopen content
            if self._last_was_content:
                self._output.append('-')
            self._last_was_content = False
        elif byte in SEPARATOR_BYTES:
            self._emit_separator()
        else:
            self._output.append(chr(byte))
            self._last_was_content = True

    def _apply_outcome(self, outcome: Optional[FoldOutcome]):
        # 디코딩 실패: 출력도 플래그도 그대로
        if outcome is None:
            return
        if outcome.kind == COLLAPSE:
            self._emit_separator()
            return
        if outcome.kind in (KEEP, LITERAL):
            self._output.append(outcome.text)
        self._last_was_content = outcome.marks_content


def to_raw_name(name: Union[str, bytes, os.PathLike]) -> bytes:
    """
    이름을 원시 바이트열로 변환

    str은 os.fsencode(surrogateescape)를 거치므로 디코딩 불가 바이트도 그대로 복원됩니다.
    """
    if isinstance(name, bytes):
        return name
    return os.fsencode(name)


def normalize_name(name: Union[str, bytes, os.PathLike]) -> str:
    """
    파일명 하나를 정규화

    Args:
        name: 경로의 마지막 구성요소 (str 또는 bytes)

    Returns:
        ASCII 안전 이름. 어떤 입력에도 예외를 던지지 않음
    """
    return NameBuilder().feed_all(to_raw_name(name)).result()
