"""
Fold Classifier 테스트

라틴 문자 변형 → 기본 글자, 결합 기호 → 삭제, 엔 대시 → '-', 나머지 → 축약 규칙을 검증합니다.
"""
import sys
import unicodedata
from pathlib import Path

import pytest

# 프로젝트 루트 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from namefold.fold_table import (
    FoldOutcome, FOLD_TABLE, LETTER_FOLDS, KEEP, COLLAPSE, LITERAL, IGNORE,
    classify, is_combining_mark
)
from namefold.name_builder import normalize_name


class TestLetterFolds:
    """라틴 문자 계열 접기"""

    @pytest.mark.parametrize("scalar, expected", [
        ("Ⓐ", "A"),
        ("ｂ", "b"),
        ("é", "e"),
        ("ï", "i"),
        ("Ⓜ", "M"),
        ("ｙ", "y"),
        ("Æ", "AE"),
        ("ǈ", "Lj"),
        ("Ꜳ", "AA"),
        ("\u008C", "OE"),
    ])
    def test_fold_to_base(self, scalar, expected):
        assert classify(scalar) == FoldOutcome(KEEP, expected)

    def test_ascii_letters_fold_to_themselves(self):
        assert classify("A") == FoldOutcome(KEEP, "A")
        assert classify("z").text == "z"

    def test_every_entry_is_ascii_keep(self):
        for output, scalars in LETTER_FOLDS:
            assert output.isascii()
            for scalar in scalars:
                outcome = FOLD_TABLE[scalar]
                assert outcome.kind == KEEP
                assert outcome.text.isascii()

    def test_keep_marks_content(self):
        assert classify("é").marks_content


class TestCombiningMarks:
    """결합 발음 구별 기호"""

    @pytest.mark.parametrize("code_point", [0x0300, 0x0301, 0x036F, 0x1AB0, 0x1AFF, 0x1DC0, 0x1DFF])
    def test_ranges_are_ignored(self, code_point):
        scalar = chr(code_point)
        assert is_combining_mark(scalar)
        outcome = classify(scalar)
        assert outcome.kind == IGNORE
        assert outcome.text == ""
        assert outcome.marks_content

    @pytest.mark.parametrize("code_point", [0x02FF, 0x0370, 0x1AAF, 0x1B00, 0x1DBF, 0x1E00])
    def test_outside_ranges(self, code_point):
        assert not is_combining_mark(chr(code_point))


class TestEnDashAndDefault:
    """엔 대시 및 기본 축약"""

    def test_en_dash_is_literal_hyphen(self):
        outcome = classify("–")
        assert outcome.kind == LITERAL
        assert outcome.text == "-"
        assert not outcome.marks_content

    @pytest.mark.parametrize("scalar", ["😀", "한", "中", "—", " "])
    def test_unknown_scalar_collapses(self, scalar):
        outcome = classify(scalar)
        assert outcome.kind == COLLAPSE
        assert not outcome.marks_content

    def test_none_passes_through(self):
        assert classify(None) is None


def all_non_ascii_scalars():
    """U+0080 ~ U+10FFFF 중 서로게이트를 제외한 모든 스칼라"""
    for code_point in range(0x80, 0x110000):
        if 0xD800 <= code_point <= 0xDFFF:
            continue
        yield chr(code_point)


class TestEveryScalar:
    """모든 스칼라를 "my{c}file.ext"에 넣어 이름 전체로 검증"""

    def test_name_matches_outcome(self):
        mismatches = []
        for scalar in all_non_ascii_scalars():
            raw = b"my" + scalar.encode('utf-8') + b"file.ext"
            outcome = classify(scalar)
            if outcome.kind == KEEP:
                expected = f"my{outcome.text}file.ext"
            elif outcome.kind == IGNORE:
                expected = "myfile.ext"
            elif outcome.kind == LITERAL:
                expected = "my-file.ext"
            else:
                expected = "my_file.ext"
            if normalize_name(raw) != expected:
                mismatches.append(scalar)
        assert mismatches == []

    def test_outcome_kinds(self):
        for scalar in all_non_ascii_scalars():
            kind = classify(scalar).kind
            code_point = ord(scalar)
            combining = any(start <= code_point <= end for start, end in (
                (0x0300, 0x036F), (0x1AB0, 0x1AFF), (0x1DC0, 0x1DFF)
            ))
            assert (kind == IGNORE) == combining, hex(code_point)
            assert (kind == LITERAL) == (code_point == 0x2013), hex(code_point)

    def test_case_preserved(self):
        for scalar in all_non_ascii_scalars():
            outcome = classify(scalar)
            if outcome.kind != KEEP:
                continue
            assert outcome.text.isascii() and outcome.text.isalpha(), hex(ord(scalar))
            name = unicodedata.name(scalar, "")
            if "CAPITAL" in name and "SMALL CAPITAL" not in name:
                assert outcome.text[0].isupper(), name
            elif "SMALL" in name:
                assert outcome.text.islower(), name
