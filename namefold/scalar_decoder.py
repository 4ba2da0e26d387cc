"""
Scalar Decoder

파일명 바이트열을 UTF-8 규칙에 따라 유니코드 스칼라로 조립합니다.
유효한 UTF-8이 보장되지 않는 입력을 다루므로, 표준 디코더처럼 예외를 던지지 않고
조립에 실패한 시퀀스는 "스칼라 없음(None)"으로 돌려줍니다.

동작 규칙:
    - 선두 바이트 >= 0xF0 → 4바이트, 0xE0~0xEF → 3바이트, 그 외(0x80~0xDF) → 2바이트
    - 선언된 길이만큼 바이트를 모은 뒤 페이로드 비트를 조합
    - 서로게이트(U+D800~DFFF) 또는 U+10FFFF 초과 값은 None
    - 연속 바이트 형식은 검증하지 않음 (재동기화 없음)
"""
from typing import Optional, Tuple


MAX_SCALAR = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)


def sequence_length(lead_byte: int) -> int:
    """
    선두 바이트가 선언하는 시퀀스 길이 반환

    Args:
        lead_byte: 128 이상의 선두 바이트

    Returns:
        2, 3 또는 4
    """
    if lead_byte >= 0xF0:
        return 4
    if lead_byte >= 0xE0:
        return 3
    return 2


def combine_two(first: int, second: int) -> int:
    """2바이트 시퀀스의 페이로드 비트 조합"""
    return ((first & 0x1F) << 6) | (second & 0x3F)


def combine_three(first: int, second: int, third: int) -> int:
    """3바이트 시퀀스의 페이로드 비트 조합"""
    return ((first & 0x1F) << 12) | ((second & 0x3F) << 6) | (third & 0x3F)


def combine_four(first: int, second: int, third: int, fourth: int) -> int:
    """4바이트 시퀀스의 페이로드 비트 조합"""
    return (
        ((first & 0x07) << 18)
        | ((second & 0x3F) << 12)
        | ((third & 0x3F) << 6)
        | (fourth & 0x3F)
    )


def to_scalar(value: int) -> Optional[str]:
    """
    코드 포인트 값을 유니코드 스칼라(1글자 str)로 변환

    Args:
        value: 조합된 코드 포인트 값

    Returns:
        유효한 스칼라면 해당 문자, 서로게이트/범위 초과면 None
    """
    if value > MAX_SCALAR or value in SURROGATE_RANGE:
        return None
    return chr(value)


def decode_sequence(sequence: bytes) -> Optional[str]:
    """
    완성된 2~4바이트 시퀀스를 스칼라로 디코딩

    Args:
        sequence: 선두 바이트를 포함한 바이트열

    Returns:
        디코딩된 문자 또는 None
    """
    if len(sequence) == 4:
        return to_scalar(combine_four(*sequence))
    if len(sequence) == 3:
        return to_scalar(combine_three(*sequence))
    if len(sequence) == 2:
        return to_scalar(combine_two(*sequence))
    return None


class ScalarDecoder:
    """
    바이트 단위로 먹이는 UTF-8 스칼라 조립기

    Name Builder 한 번의 호출 동안만 사용되며 스레드 간에 공유하지 않습니다.
    """

    def __init__(self):
        self._pending = bytearray()
        self._expected = 0

    @property
    def is_pending(self) -> bool:
        """멀티바이트 시퀀스를 조립 중인지 여부"""
        return self._expected > 0

    @property
    def pending_bytes(self) -> bytes:
        """아직 스칼라로 완성되지 않은 바이트"""
        return bytes(self._pending)

    def feed(self, byte: int) -> Tuple[bool, Optional[str]]:
        """
        바이트 하나를 조립 버퍼에 추가

        Args:
            byte: 0~255 바이트 값

        Returns:
            (완료 여부, 스칼라) 튜플.
            완료 전이면 (False, None), 완료 시 (True, 문자 또는 None)
        """
        if not self._expected:
            self._expected = sequence_length(byte)
        self._pending.append(byte)

        if len(self._pending) < self._expected:
            return False, None

        scalar = decode_sequence(bytes(self._pending))
        self.reset()
        return True, scalar

    def reset(self):
        """조립 버퍼 초기화"""
        self._pending.clear()
        self._expected = 0
