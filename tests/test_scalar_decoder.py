"""
Scalar Decoder 테스트

UTF-8 바이트 시퀀스 조립, 서로게이트/범위 초과 거부, 과잉 길이 인코딩 처리를 검증합니다.
"""
import sys
from pathlib import Path

import pytest

# 프로젝트 루트 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from namefold.scalar_decoder import (
    ScalarDecoder, sequence_length, decode_sequence, to_scalar,
    combine_two, combine_three, combine_four
)


class TestSequenceLength:
    """선두 바이트 → 시퀀스 길이"""

    @pytest.mark.parametrize("lead, expected", [
        (0xC3, 2),
        (0xDF, 2),
        (0x80, 2),   # 연속 바이트가 선두에 오면 2바이트로 취급
        (0xBF, 2),
        (0xE0, 3),
        (0xEF, 3),
        (0xF0, 4),
        (0xFF, 4),
    ])
    def test_lengths(self, lead, expected):
        assert sequence_length(lead) == expected


class TestCombine:
    """페이로드 비트 조합"""

    @pytest.mark.parametrize("char", ["é", "ß", "ǈ", "ÿ"])
    def test_two_byte_chars(self, char):
        assert combine_two(*char.encode('utf-8')) == ord(char)

    @pytest.mark.parametrize("char", ["Ⓜ", "ｙ", "–", "Ꜳ"])
    def test_three_byte_chars(self, char):
        assert combine_three(*char.encode('utf-8')) == ord(char)

    @pytest.mark.parametrize("char", ["😀", "𝔸", "\U0010FFFF"])
    def test_four_byte_chars(self, char):
        assert combine_four(*char.encode('utf-8')) == ord(char)


class TestToScalar:
    """코드 포인트 → 스칼라 변환"""

    def test_valid_value(self):
        assert to_scalar(0x41) == "A"

    def test_surrogate_rejected(self):
        assert to_scalar(0xD800) is None
        assert to_scalar(0xDFFF) is None

    def test_above_max_rejected(self):
        assert to_scalar(0x110000) is None

    def test_max_accepted(self):
        assert to_scalar(0x10FFFF) == "\U0010FFFF"


class TestDecodeSequence:
    """완성된 시퀀스 디코딩"""

    def test_encoded_surrogate_is_none(self):
        # ED A0 80 = U+D800
        assert decode_sequence(b"\xed\xa0\x80") is None

    def test_overlong_ascii_decodes(self):
        # C1 81 = 과잉 길이로 인코딩된 'A'
        assert decode_sequence(b"\xc1\x81") == "A"

    def test_continuation_format_not_checked(self):
        # 두 번째 바이트가 ASCII여도 하위 6비트만 사용
        assert decode_sequence(b"\xc3\x29") == chr((0x03 << 6) | 0x29)

    def test_four_byte_above_max_is_none(self):
        # F7 BF BF BF = 0x1FFFFF
        assert decode_sequence(b"\xf7\xbf\xbf\xbf") is None

    def test_unsupported_length_is_none(self):
        assert decode_sequence(b"\xc3") is None


class TestScalarDecoder:
    """바이트 단위 조립기"""

    def test_feed_until_complete(self):
        decoder = ScalarDecoder()
        assert decoder.feed(0xE2) == (False, None)
        assert decoder.is_pending
        assert decoder.feed(0x80) == (False, None)
        assert decoder.pending_bytes == b"\xe2\x80"
        assert decoder.feed(0x93) == (True, "–")
        assert not decoder.is_pending
        assert decoder.pending_bytes == b""

    def test_ascii_byte_is_buffered_while_pending(self):
        decoder = ScalarDecoder()
        decoder.feed(0xC3)
        done, scalar = decoder.feed(ord("a"))
        assert done
        assert scalar == chr((0x03 << 6) | (ord("a") & 0x3F))

    def test_invalid_sequence_completes_with_none(self):
        decoder = ScalarDecoder()
        results = [decoder.feed(b) for b in b"\xed\xa0\x80"]
        assert results[-1] == (True, None)
        assert not decoder.is_pending

    def test_reset_discards_partial(self):
        decoder = ScalarDecoder()
        decoder.feed(0xF0)
        decoder.feed(0x9F)
        decoder.reset()
        assert not decoder.is_pending
        assert decoder.feed(0xC3) == (False, None)
        assert decoder.feed(0xA9) == (True, "é")
