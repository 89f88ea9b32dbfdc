"""Multi-byte CJK candidates.

Each candidate runs the lead/trail byte state machine of its encoding,
maps every completed sequence with the matching Python codec and scores the
resulting character.  A byte that cannot continue the current sequence, or
a completed sequence the codec rejects, disqualifies the candidate.
"""

from __future__ import annotations

import enum

from webchardet.candidates import Candidate
from webchardet.models import cjk_extra_score, frequent_characters

CJK_BASE_SCORE = 41
CJK_SECONDARY_BASE_SCORE = 20

SHIFT_JIS_SCORE_PER_KANA = 20
SHIFT_JIS_SCORE_PER_LEVEL_1_KANJI = CJK_BASE_SCORE
SHIFT_JIS_SCORE_PER_LEVEL_2_KANJI = CJK_SECONDARY_BASE_SCORE
HALF_WIDTH_KATAKANA_PENALTY = -(CJK_BASE_SCORE * 3)
SHIFT_JIS_PUA_PENALTY = -(CJK_BASE_SCORE * 10)

EUC_JP_SCORE_PER_KANA = CJK_BASE_SCORE + (CJK_BASE_SCORE // 3)
EUC_JP_SCORE_PER_NEAR_OBSOLETE_KANA = CJK_BASE_SCORE - 1
EUC_JP_SCORE_PER_LEVEL_1_KANJI = CJK_BASE_SCORE
EUC_JP_SCORE_PER_LEVEL_2_KANJI = CJK_SECONDARY_BASE_SCORE
EUC_JP_SCORE_PER_OTHER_KANJI = CJK_SECONDARY_BASE_SCORE // 4
EUC_JP_INITIAL_KANA_PENALTY = -((CJK_BASE_SCORE // 3) + 1)

BIG5_SCORE_PER_LEVEL_1_HANZI = CJK_BASE_SCORE
BIG5_SCORE_PER_OTHER_HANZI = CJK_SECONDARY_BASE_SCORE

EUC_KR_SCORE_PER_EUC_HANGUL = CJK_BASE_SCORE + 1
EUC_KR_SCORE_PER_NON_EUC_HANGUL = CJK_SECONDARY_BASE_SCORE // 5
EUC_KR_SCORE_PER_HANJA = CJK_SECONDARY_BASE_SCORE // 2
EUC_KR_HANJA_AFTER_HANGUL_PENALTY = -(CJK_BASE_SCORE * 10)
EUC_KR_LONG_WORD_PENALTY = -6
EUC_KR_LONG_WORD = 5

GBK_SCORE_PER_LEVEL_1 = CJK_BASE_SCORE
GBK_SCORE_PER_LEVEL_2 = CJK_SECONDARY_BASE_SCORE
GBK_SCORE_PER_NON_EUC = CJK_SECONDARY_BASE_SCORE // 4
GBK_PUA_PENALTY = -(CJK_BASE_SCORE * 10)

CJK_LATIN_ADJACENCY_PENALTY = -40
CJ_PUNCTUATION = CJK_BASE_SCORE // 2
CJK_OTHER = CJK_SECONDARY_BASE_SCORE // 4

#: Shift_JIS lead byte that is also the windows-1252 right single quote.
_PROBLEMATIC_LEAD = 0x92

_JAPANESE_PUNCTUATION = frozenset({0x3000, 0x3001, 0x3002, 0xFF08, 0xFF09})
_CHINESE_PUNCTUATION = _JAPANESE_PUNCTUATION | {0xFF01, 0xFF0C, 0xFF1B, 0xFF1F}
_NEAR_OBSOLETE_KANA = frozenset({0x3090, 0x3091, 0x30F0, 0x30F1})

# Private-use code points that GB18030 requires for ideographs.
_GB18030_PUA_IDEOGRAPHS = frozenset(
    [*range(0xE78D, 0xE797), 0xE816, 0xE817, 0xE818, 0xE81E, 0xE826, 0xE82B]
    + [0xE82C, 0xE831, 0xE832, 0xE83B, 0xE843, 0xE854, 0xE855, 0xE864]
)


class Script(enum.Enum):
    """What the previous character was, for adjacency penalties."""

    ASCII_LETTER = enum.auto()
    CJ = enum.auto()
    HANGUL = enum.auto()
    HANJA = enum.auto()
    OTHER = enum.auto()


def _is_ascii_letter(u: int) -> bool:
    return 0x41 <= u <= 0x5A or 0x61 <= u <= 0x7A


def _is_ideograph(u: int) -> bool:
    return 0x3400 <= u < 0xA000 or 0xF900 <= u < 0xFB00


def _is_half_width_katakana(u: int) -> bool:
    return 0xFF61 <= u <= 0xFF9F


def _map_sequence(sequence: bytes, codec: str) -> str | None:
    try:
        return sequence.decode(codec)
    except UnicodeDecodeError:
        return None


class MultiByteCandidate(Candidate):
    """Base for the multi-byte CJK candidates.

    Subclasses implement :meth:`_decode`, which consumes one byte and
    returns the completed text (``""`` mid-sequence, ``None`` on an
    invalid byte), and :meth:`_score_char`, which scores one completed
    character given the byte that completed it.
    """

    def __init__(self, encoding: str) -> None:
        super().__init__(encoding)
        self.prev = Script.OTHER
        self.prev_byte = 0

    def _feed(self, data: bytes) -> int | None:
        score = 0
        for byte in data:
            text = self._decode(byte)
            if text is None:
                return None
            if text:
                delta = self._score_char(text, byte)
                if delta is None:
                    return None
                score += delta
            self._advance(byte)
        return score

    def _finish(self) -> int | None:
        return None if self._mid_sequence() else 0

    def _advance(self, byte: int) -> None:
        self.prev_byte = byte

    def _decode(self, byte: int) -> str | None:
        raise NotImplementedError

    def _mid_sequence(self) -> bool:
        raise NotImplementedError

    def _score_char(self, text: str, byte: int) -> int | None:
        raise NotImplementedError

    def _adjacent_to_ascii(self) -> int:
        return CJK_LATIN_ADJACENCY_PENALTY if self.prev is Script.ASCII_LETTER else 0


class ShiftJisCandidate(MultiByteCandidate):
    """Shift_JIS, decoded as the Windows superset (cp932)."""

    python_codec = "cp932"

    def __init__(self, encoding: str) -> None:
        super().__init__(encoding)
        self._lead = 0
        self.non_ascii_seen = False
        self.pending_score: int | None = None
        self._frequent = frequent_characters("kanji")

    def _mid_sequence(self) -> bool:
        return self._lead != 0

    def _decode(self, byte: int) -> str | None:
        lead = self._lead
        if lead:
            self._lead = 0
            if 0x40 <= byte <= 0x7E or 0x80 <= byte <= 0xFC:
                return _map_sequence(bytes((lead, byte)), self.python_codec)
            return None
        if byte <= 0x80:
            return chr(byte)
        if 0xA1 <= byte <= 0xDF:
            return chr(0xFF61 - 0xA1 + byte)
        if 0x81 <= byte <= 0x9F or 0xE0 <= byte <= 0xFC:
            self._lead = byte
            return ""
        return None

    def _maybe_set_as_pending(self, score: int) -> int:
        # 0x92 followed by a trail byte may be a curly quote in windows-1252;
        # only credit the kanji once Japanese text follows it.
        if self.prev is Script.CJ or self.prev_byte != _PROBLEMATIC_LEAD:
            return score
        self.pending_score = score
        return 0

    def _take_pending(self) -> int:
        pending = self.pending_score or 0
        self.pending_score = None
        return pending

    def _score_char(self, text: str, byte: int) -> int | None:  # noqa: PLR0911
        u = ord(text[0])
        if not self.non_ascii_seen and u >= 0x80:
            self.non_ascii_seen = True
            if _is_half_width_katakana(u):
                return None
        if _is_ascii_letter(u):
            self.pending_score = None
            score = CJK_LATIN_ADJACENCY_PENALTY if self.prev is Script.CJ else 0
            self.prev = Script.ASCII_LETTER
            return score
        if _is_half_width_katakana(u):
            self.pending_score = None
            self.prev = Script.CJ
            return HALF_WIDTH_KATAKANA_PENALTY
        if 0x3040 <= u < 0x3100:
            score = self._take_pending() + SHIFT_JIS_SCORE_PER_KANA
            score += self._adjacent_to_ascii()
            self.prev = Script.CJ
            return score
        if _is_ideograph(u):
            score = self._take_pending()
            if self.prev_byte < 0x98 or (self.prev_byte == 0x98 and byte < 0x73):
                score += self._maybe_set_as_pending(
                    SHIFT_JIS_SCORE_PER_LEVEL_1_KANJI
                    + cjk_extra_score(text, self._frequent)
                )
            else:
                score += self._maybe_set_as_pending(SHIFT_JIS_SCORE_PER_LEVEL_2_KANJI)
            score += self._adjacent_to_ascii()
            self.prev = Script.CJ
            return score
        self.pending_score = None
        self.prev = Script.OTHER
        if 0xE000 <= u < 0xF900:
            return SHIFT_JIS_PUA_PENALTY
        if u in _JAPANESE_PUNCTUATION:
            return CJ_PUNCTUATION
        return 0 if u < 0x80 else CJK_OTHER


class EucJpCandidate(MultiByteCandidate):
    """EUC-JP, including JIS X 0212 three-byte sequences."""

    python_codec = "euc_jp"

    def __init__(self, encoding: str) -> None:
        super().__init__(encoding)
        self._lead = 0
        self._jis0212 = False
        self.prev_prev_byte = 0
        self.non_ascii_seen = False
        self._frequent = frequent_characters("kanji")

    def _mid_sequence(self) -> bool:
        return self._lead != 0

    def _advance(self, byte: int) -> None:
        self.prev_prev_byte = self.prev_byte
        self.prev_byte = byte

    def _decode(self, byte: int) -> str | None:
        lead = self._lead
        if not lead:
            if byte < 0x80:
                return chr(byte)
            if byte in (0x8E, 0x8F) or 0xA1 <= byte <= 0xFE:
                self._lead = byte
                return ""
            return None
        if lead == 0x8E:
            self._lead = 0
            if 0xA1 <= byte <= 0xDF:
                return chr(0xFF61 - 0xA1 + byte)
            return None
        if lead == 0x8F and not self._jis0212:
            if 0xA1 <= byte <= 0xFE:
                self._jis0212 = True
                self._lead = byte
                return ""
            self._lead = 0
            return None
        self._lead = 0
        jis0212, self._jis0212 = self._jis0212, False
        if not 0xA1 <= byte <= 0xFE:
            return None
        if jis0212:
            return _map_sequence(bytes((0x8F, lead, byte)), self.python_codec)
        return _map_sequence(bytes((lead, byte)), self.python_codec)

    def _score_char(self, text: str, byte: int) -> int | None:
        u = ord(text[0])
        score = 0
        if not self.non_ascii_seen and u >= 0x80:
            self.non_ascii_seen = True
            if _is_half_width_katakana(u):
                return None
            if 0x3040 <= u < 0x3100:
                # offsets the kana advantage over an initial Big5 hanzi
                score += EUC_JP_INITIAL_KANA_PENALTY
        if _is_ascii_letter(u):
            if self.prev is Script.CJ:
                score += CJK_LATIN_ADJACENCY_PENALTY
            self.prev = Script.ASCII_LETTER
        elif _is_half_width_katakana(u):
            score += HALF_WIDTH_KATAKANA_PENALTY
            self.prev = Script.OTHER
        elif 0x3041 <= u <= 0x3093 or 0x30A1 <= u <= 0x30F6:
            if u in _NEAR_OBSOLETE_KANA:
                score += EUC_JP_SCORE_PER_NEAR_OBSOLETE_KANA
            else:
                score += EUC_JP_SCORE_PER_KANA
            score += self._adjacent_to_ascii()
            self.prev = Script.CJ
        elif _is_ideograph(u):
            if self.prev_prev_byte == 0x8F:
                score += EUC_JP_SCORE_PER_OTHER_KANJI
            elif self.prev_byte < 0xD0:
                score += EUC_JP_SCORE_PER_LEVEL_1_KANJI
                score += cjk_extra_score(text, self._frequent)
            else:
                score += EUC_JP_SCORE_PER_LEVEL_2_KANJI
            score += self._adjacent_to_ascii()
            self.prev = Script.CJ
        else:
            if u in _JAPANESE_PUNCTUATION:
                score += CJ_PUNCTUATION
            elif u >= 0x80:
                score += CJK_OTHER
            self.prev = Script.OTHER
        return score


class EucKrCandidate(MultiByteCandidate):
    """EUC-KR with the Unified Hangul Code extension (cp949)."""

    python_codec = "cp949"

    def __init__(self, encoding: str) -> None:
        super().__init__(encoding)
        self._lead = 0
        self.prev_was_euc_range = False
        self.current_word_len = 0
        self._frequent = frequent_characters("hangul")

    def _mid_sequence(self) -> bool:
        return self._lead != 0

    def _advance(self, byte: int) -> None:
        self.prev_was_euc_range = 0xA1 <= byte <= 0xFE

    def _decode(self, byte: int) -> str | None:
        lead = self._lead
        if lead:
            self._lead = 0
            if 0x41 <= byte <= 0xFE:
                return _map_sequence(bytes((lead, byte)), self.python_codec)
            return None
        if byte < 0x80:
            return chr(byte)
        if 0x81 <= byte <= 0xFE:
            self._lead = byte
            return ""
        return None

    def _long_word(self) -> int:
        self.current_word_len += 1
        if self.current_word_len > EUC_KR_LONG_WORD:
            return EUC_KR_LONG_WORD_PENALTY
        return 0

    def _score_char(self, text: str, byte: int) -> int | None:
        u = ord(text[0])
        score = 0
        if _is_ascii_letter(u):
            if self.prev in (Script.HANGUL, Script.HANJA):
                score += CJK_LATIN_ADJACENCY_PENALTY
            self.prev = Script.ASCII_LETTER
            self.current_word_len = 0
        elif 0xAC00 <= u <= 0xD7A3:
            if self.prev_was_euc_range and 0xA1 <= byte <= 0xFE:
                score += EUC_KR_SCORE_PER_EUC_HANGUL
                score += cjk_extra_score(text, self._frequent)
            else:
                score += EUC_KR_SCORE_PER_NON_EUC_HANGUL
            score += self._adjacent_to_ascii()
            self.prev = Script.HANGUL
            score += self._long_word()
        elif 0x4E00 <= u < 0xAC00 or 0xF900 <= u <= 0xFA0B:
            score += EUC_KR_SCORE_PER_HANJA
            if self.prev is Script.ASCII_LETTER:
                score += CJK_LATIN_ADJACENCY_PENALTY
            elif self.prev is Script.HANGUL:
                score += EUC_KR_HANJA_AFTER_HANGUL_PENALTY
            self.prev = Script.HANJA
            score += self._long_word()
        else:
            if u >= 0x80:
                score += CJK_OTHER
            self.prev = Script.OTHER
            self.current_word_len = 0
        return score


class Big5Candidate(MultiByteCandidate):
    """Big5 with the HKSCS extensions (big5hkscs)."""

    python_codec = "big5hkscs"

    def __init__(self, encoding: str) -> None:
        super().__init__(encoding)
        self._lead = 0

    def _mid_sequence(self) -> bool:
        return self._lead != 0

    def _decode(self, byte: int) -> str | None:
        lead = self._lead
        if lead:
            self._lead = 0
            if 0x40 <= byte <= 0x7E or 0xA1 <= byte <= 0xFE:
                return _map_sequence(bytes((lead, byte)), self.python_codec)
            return None
        if byte < 0x80:
            return chr(byte)
        if 0x81 <= byte <= 0xFE:
            self._lead = byte
            return ""
        return None

    def _score_char(self, text: str, byte: int) -> int | None:
        if len(text) == 2:
            # HKSCS letters with a combining mark, such as Ê̄
            self.prev = Script.OTHER
            return CJK_OTHER
        u = ord(text)
        if _is_ascii_letter(u):
            score = CJK_LATIN_ADJACENCY_PENALTY if self.prev is Script.CJ else 0
            self.prev = Script.ASCII_LETTER
            return score
        if _is_ideograph(u) or u > 0xFFFF:
            if _is_ideograph(u) and 0xA4 <= self.prev_byte <= 0xC6:
                score = BIG5_SCORE_PER_LEVEL_1_HANZI
            else:
                score = BIG5_SCORE_PER_OTHER_HANZI
            score += self._adjacent_to_ascii()
            self.prev = Script.CJ
            return score
        self.prev = Script.OTHER
        if u in _CHINESE_PUNCTUATION:
            return CJ_PUNCTUATION
        return 0 if u < 0x80 else CJK_OTHER


class GbkCandidate(MultiByteCandidate):
    """GBK, accepting the GB18030 four-byte forms."""

    python_codec = "gb18030"

    def __init__(self, encoding: str) -> None:
        super().__init__(encoding)
        self._first = 0
        self._second = 0
        self._third = 0
        self._frequent = frequent_characters("simplified")

    def _mid_sequence(self) -> bool:
        return self._first != 0

    def _decode(self, byte: int) -> str | None:  # noqa: PLR0911
        first = self._first
        if not first:
            if byte < 0x80:
                return chr(byte)
            if byte == 0x80:
                return "€"
            if byte == 0xFF:
                return None
            self._first = byte
            return ""
        if self._third:
            sequence = bytes((first, self._second, self._third, byte))
            self._first = self._second = self._third = 0
            if 0x30 <= byte <= 0x39:
                return _map_sequence(sequence, self.python_codec)
            return None
        if self._second:
            if 0x81 <= byte <= 0xFE:
                self._third = byte
                return ""
            self._first = self._second = 0
            return None
        if 0x30 <= byte <= 0x39:
            self._second = byte
            return ""
        self._first = 0
        if 0x40 <= byte <= 0x7E or 0x80 <= byte <= 0xFE:
            return _map_sequence(bytes((first, byte)), self.python_codec)
        return None

    def _score_char(self, text: str, byte: int) -> int | None:  # noqa: PLR0911
        u = ord(text)
        if _is_ascii_letter(u):
            score = CJK_LATIN_ADJACENCY_PENALTY if self.prev is Script.CJ else 0
            self.prev = Script.ASCII_LETTER
            return score
        if 0x4E00 <= u <= 0x9FA5:
            if 0xA1 <= byte <= 0xFE and 0xA1 <= self.prev_byte <= 0xD7:
                score = GBK_SCORE_PER_LEVEL_1 + cjk_extra_score(text, self._frequent)
            elif 0xA1 <= byte <= 0xFE and 0xD8 <= self.prev_byte <= 0xFE:
                score = GBK_SCORE_PER_LEVEL_2
            else:
                score = GBK_SCORE_PER_NON_EUC
            score += self._adjacent_to_ascii()
            self.prev = Script.CJ
            return score
        if _is_ideograph(u):
            score = self._adjacent_to_ascii()
            self.prev = Script.CJ
            return score
        if 0xE000 <= u < 0xF900:
            if u in _GB18030_PUA_IDEOGRAPHS:
                score = GBK_SCORE_PER_NON_EUC + self._adjacent_to_ascii()
                self.prev = Script.CJ
                return score
            self.prev = Script.OTHER
            return GBK_PUA_PENALTY
        if u > 0xFFFF:
            if u >= 0xF0000:
                self.prev = Script.OTHER
                return GBK_PUA_PENALTY
            if u < 0x30000:
                score = GBK_SCORE_PER_NON_EUC + self._adjacent_to_ascii()
                self.prev = Script.CJ
                return score
            self.prev = Script.OTHER
            return CJK_OTHER
        self.prev = Script.OTHER
        if u in _CHINESE_PUNCTUATION:
            return CJ_PUNCTUATION
        return 0 if u < 0x80 else CJK_OTHER
