"""Enumerations for webchardet."""

import enum


class Tld(enum.Enum):
    """Language family implied by a top-level domain.

    Only used to break ties between equally scored candidates.
    """

    GENERIC = "generic"
    WESTERN = "western"
    CENTRAL_EUROPEAN = "central-european"
    BALTIC = "baltic"
    CYRILLIC = "cyrillic"
    GREEK = "greek"
    TURKISH = "turkish"
    HEBREW = "hebrew"
    ARABIC = "arabic"
    THAI = "thai"
    VIETNAMESE = "vietnamese"
    SIMPLIFIED = "simplified-chinese"
    TRADITIONAL = "traditional-chinese"
    JAPANESE = "japanese"
    KOREAN = "korean"


class Family(enum.Enum):
    """Detector family used to score an encoding."""

    LATIN = "latin"
    NON_LATIN_CASED = "non-latin-cased"
    CASELESS = "caseless"
    ARABIC_FRENCH = "arabic-french"
    LOGICAL_HEBREW = "logical-hebrew"
    VISUAL_HEBREW = "visual-hebrew"
    SHIFT_JIS = "shift_jis"
    EUC_JP = "euc-jp"
    EUC_KR = "euc-kr"
    BIG5 = "big5"
    GBK = "gbk"
    ISO_2022_JP = "iso-2022-jp"


#: Families whose candidates decode multi-byte CJK sequences.
CJK_FAMILIES: frozenset[Family] = frozenset(
    {Family.SHIFT_JIS, Family.EUC_JP, Family.EUC_KR, Family.BIG5, Family.GBK}
)

#: Families scored from a single-byte pair table.
SINGLE_BYTE_FAMILIES: frozenset[Family] = frozenset(
    {
        Family.LATIN,
        Family.NON_LATIN_CASED,
        Family.CASELESS,
        Family.ARABIC_FRENCH,
        Family.LOGICAL_HEBREW,
        Family.VISUAL_HEBREW,
    }
)
