"""
Fold Classifier

디코딩된 유니코드 스칼라 하나를 ASCII 출력 규칙(FoldOutcome)으로 분류하는 정적 테이블입니다.

분류 규칙:
    - 라틴 문자와 그 장식/합자/전각/원문자 변형 → 기본 글자 (Keep)
      예: Ⓐ → A, ｂ → b, Æ → AE, ǈ → Lj
    - 결합 발음 구별 기호 (U+0300~036F, U+1AB0~1AFF, U+1DC0~1DFF) → 삭제 (Ignore)
    - 엔 대시 (U+2013) → '-' (Literal)
    - 그 외 모든 스칼라 → 구분자 축약 (Collapse)

테이블은 전역(total)입니다. 어떤 스칼라든 정확히 하나의 결과로 귀결되며 기본값은 Collapse입니다.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


KEEP = "keep"
COLLAPSE = "collapse"
LITERAL = "literal"
IGNORE = "ignore"


@dataclass(frozen=True)
class FoldOutcome:
    """스칼라 하나의 접기(fold) 결과"""
    kind: str           # keep, collapse, literal, ignore
    text: str = ""      # keep/literal 시 출력할 ASCII 문자열

    @property
    def marks_content(self) -> bool:
        """출력 후 content 플래그를 세우는지 여부"""
        return self.kind in (KEEP, IGNORE)


COLLAPSE_OUTCOME = FoldOutcome(COLLAPSE)
IGNORE_OUTCOME = FoldOutcome(IGNORE)
EN_DASH_OUTCOME = FoldOutcome(LITERAL, "-")

EN_DASH = "–"

# 결합 발음 구별 기호 범위 (양 끝 포함)
COMBINING_MARK_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x0300, 0x036F),
    (0x1AB0, 0x1AFF),
    (0x1DC0, 0x1DFF),
)

# (출력, 해당 스칼라 목록)
# ASCII 글자 자체도 포함: 과잉 길이(overlong) 인코딩으로 들어온 경우 그대로 복원됨
LETTER_FOLDS: Tuple[Tuple[str, str], ...] = (
    ("A", "AⒶＡÀÁÂẦẤẪẨÃĀĂẰẮẴẲȦǠÄǞẢÅǺǍȀȂẠẬẶḀĄȺⱯ"),
    ("AA", "Ꜳ"),
    ("AE", "ÆǼǢ"),
    ("AO", "Ꜵ"),
    ("AU", "Ꜷ"),
    ("AV", "ꜸꜺ"),
    ("AY", "Ꜽ"),
    ("B", "BⒷＢḂḄḆɃƂƁ"),
    ("C", "CⒸＣĆĈĊČÇḈƇȻꜾ"),
    ("D", "DⒹＤḊĎḌḐḒḎĐƋƊƉꝹ"),
    ("DZ", "ǱǄ"),
    ("Dz", "ǲǅ"),
    ("E", "EⒺＥÈÉÊỀẾỄỂẼĒḔḖĔĖËẺĚȄȆẸỆȨḜĘḘḚƐƎ"),
    ("F", "FⒻＦḞƑꝻ"),
    ("G", "GⒼＧǴĜḠĞĠǦĢǤƓꞠꝽꝾ"),
    ("H", "HⒽＨĤḢḦȞḤḨḪĦⱧⱵꞍ"),
    ("I", "IⒾＩÌÍÎĨĪĬİÏḮỈǏȈȊỊĮḬƗ"),
    ("J", "JⒿＪĴɈ"),
    ("K", "KⓀＫḰǨḲĶḴƘⱩꝀꝂꝄꞢ"),
    ("L", "LⓁＬĿĹĽḶḸĻḼḺŁȽⱢⱠꝈꝆꞀ"),
    ("LJ", "Ǉ"),
    ("Lj", "ǈ"),
    ("M", "MⓂＭḾṀṂⱮƜ"),
    ("N", "NⓃＮǸŃÑṄŇṆŅṊṈȠƝꞐꞤ"),
    ("NJ", "Ǌ"),
    ("Nj", "ǋ"),
    ("O", "OⓄＯÒÓÔỒỐỖỔÕṌȬṎŌṐṒŎȮȰÖȪỎŐǑȌȎƠỜỚỠỞỢỌỘǪǬØǾƆƟꝊꝌ"),
    ("OI", "Ƣ"),
    ("OO", "Ꝏ"),
    ("OU", "Ȣ"),
    ("OE", "\u008CŒ"),
    ("oe", "\u009Cœ"),
    ("P", "PⓅＰṔṖƤⱣꝐꝒꝔ"),
    ("Q", "QⓆＱꝖꝘɊ"),
    ("R", "RⓇＲŔṘŘȐȒṚṜŖṞɌⱤꝚꞦꞂ"),
    ("S", "SⓈＳẞŚṤŜṠŠṦṢṨȘŞⱾꞨꞄ"),
    ("T", "TⓉＴṪŤṬȚŢṰṮŦƬƮȾꞆ"),
    ("TZ", "Ꜩ"),
    ("U", "UⓊＵÙÚÛŨṸŪṺŬÜǛǗǕǙỦŮŰǓȔȖƯỪỨỮỬỰỤṲŲṶṴɄ"),
    ("V", "VⓋＶṼṾƲꝞɅ"),
    ("VY", "Ꝡ"),
    ("W", "WⓌＷẀẂŴẆẄẈⱲ"),
    ("X", "XⓍＸẊẌ"),
    ("Y", "YⓎＹỲÝŶỸȲẎŸỶỴƳɎỾ"),
    ("Z", "ZⓏＺŹẐŻŽẒẔƵȤⱿⱫꝢ"),
    ("a", "aⓐａẚàáâầấẫẩãāăằắẵẳȧǡäǟảåǻǎȁȃạậặḁąⱥɐ"),
    ("aa", "ꜳ"),
    ("ae", "æǽǣ"),
    ("ao", "ꜵ"),
    ("au", "ꜷ"),
    ("av", "ꜹꜻ"),
    ("ay", "ꜽ"),
    ("b", "bⓑｂḃḅḇƀƃɓþ"),
    ("c", "cⓒｃćĉċčçḉƈȼꜿↄ"),
    ("d", "dⓓｄḋďḍḑḓḏđƌɖɗꝺ"),
    ("dz", "ǳǆ"),
    ("e", "eⓔｅèéêềếễểẽēḕḗĕėëẻěȅȇẹệȩḝęḙḛɇɛǝ"),
    ("f", "fⓕｆḟƒꝼ"),
    ("g", "gⓖｇǵĝḡğġǧģǥɠꞡᵹꝿ"),
    ("h", "hⓗｈĥḣḧȟḥḩḫẖħⱨⱶɥ"),
    ("hv", "ƕ"),
    ("i", "iⓘｉìíîĩīĭïḯỉǐȉȋịįḭɨı"),
    ("j", "jⓙｊĵǰɉ"),
    ("k", "kⓚｋḱǩḳķḵƙⱪꝁꝃꝅꞣ"),
    ("l", "lⓛｌŀĺľḷḹļḽḻſłƚɫⱡꝉꞁꝇ"),
    ("lj", "ǉ"),
    ("m", "mⓜｍḿṁṃɱɯ"),
    ("n", "nⓝｎǹńñṅňṇņṋṉƞɲŉꞑꞥ"),
    ("nj", "ǌ"),
    ("o", "oⓞｏòóôồốỗổõṍȭṏōṑṓŏȯȱöȫỏőǒȍȏơờớỡởợọộǫǭøǿɔꝋꝍɵ"),
    ("oi", "ƣ"),
    ("ou", "ȣ"),
    ("oo", "ꝏ"),
    ("p", "pⓟｐṕṗƥᵽꝑꝓꝕ"),
    ("q", "qⓠｑɋꝗꝙ"),
    ("r", "rⓡｒŕṙřȑȓṛṝŗṟɍɽꝛꞧꞃ"),
    ("s", "sⓢｓßśṥŝṡšṧṣṩșşȿꞩꞅẛ"),
    ("t", "tⓣｔṫẗťṭțţṱṯŧƭʈⱦꞇ"),
    ("tz", "ꜩ"),
    ("u", "uⓤｕùúûũṹūṻŭüǜǘǖǚủůűǔȕȗưừứữửựụṳųṷṵʉ"),
    ("v", "vⓥｖṽṿʋꝟʌ"),
    ("vy", "ꝡ"),
    ("w", "wⓦｗẁẃŵẇẅẘẉⱳ"),
    ("x", "xⓧｘẋẍ"),
    ("y", "yⓨｙỳýŷỹȳẏÿỷẙỵƴɏỿ"),
    ("z", "zⓩｚźẑżžẓẕƶȥɀⱬꝣ"),
)


def _build_table() -> Dict[str, FoldOutcome]:
    """LETTER_FOLDS를 스칼라 → FoldOutcome 사전으로 펼침 (먼저 나온 항목 우선)"""
    table: Dict[str, FoldOutcome] = {}
    for output, scalars in LETTER_FOLDS:
        outcome = FoldOutcome(KEEP, output)
        for scalar in scalars:
            table.setdefault(scalar, outcome)
    table[EN_DASH] = EN_DASH_OUTCOME
    return table


FOLD_TABLE: Dict[str, FoldOutcome] = _build_table()


def is_combining_mark(scalar: str) -> bool:
    """결합 발음 구별 기호 범위에 속하는지 확인"""
    code_point = ord(scalar)
    return any(start <= code_point <= end for start, end in COMBINING_MARK_RANGES)


def classify(scalar: Optional[str]) -> Optional[FoldOutcome]:
    """
    스칼라 하나를 분류

    Args:
        scalar: 디코딩된 문자 (디코딩 실패 시 None)

    Returns:
        FoldOutcome. 입력이 None이면 None (호출 측 상태를 그대로 둠)
    """
    if scalar is None:
        return None
    outcome = FOLD_TABLE.get(scalar)
    if outcome is not None:
        return outcome
    if is_combining_mark(scalar):
        return IGNORE_OUTCOME
    return COLLAPSE_OUTCOME
