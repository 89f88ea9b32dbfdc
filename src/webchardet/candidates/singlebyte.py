"""Single-byte candidates scored from byte-pair tables.

Every byte is mapped to a class by the encoding's
:class:`~webchardet.models.SingleByteData` and each consecutive pair of
classes is looked up in the table's score matrix.  Pairs of two ASCII bytes
are never scored, so plain ASCII text leaves every table at zero.  The
variants below add the case and script rules that tell apart encodings
whose tables alone would be too close.
"""

from __future__ import annotations

import enum

from webchardet.candidates import Candidate
from webchardet.models import (
    ASCII_PUNCTUATION,
    CASELESS_MASK,
    SPACE,
    UNMAPPED,
    UPPER,
    SingleByteData,
)

LATIN_ADJACENCY_PENALTY = -50
IMPLAUSIBLE_LATIN_CASE_TRANSITION_PENALTY = -180
NON_LATIN_CAPITALIZATION_BONUS = 40
NON_LATIN_ALL_CAPS_PENALTY = -40
NON_LATIN_MIXED_CASE_PENALTY = -20
NON_LATIN_CAMEL_PENALTY = -80
NON_LATIN_IMPLAUSIBLE_CASE_TRANSITION_PENALTY = -100

#: Shortest run of non-Latin letters that makes a non-Latin table eligible.
MIN_WORD_LENGTH = 3

# Indexed by the number of non-ASCII bytes immediately before the current one.
_NON_ASCII_RUN_PENALTIES = (0, 0, 0, -5, -20)
_LONG_NON_ASCII_RUN_PENALTY = -200

_END_OF_STREAM = b" "


class LatinCase(enum.Enum):
    SPACE = enum.auto()
    UPPER = enum.auto()
    LOWER = enum.auto()
    ALL_CAPS = enum.auto()


class WordCase(enum.Enum):
    """Case shape of the current non-Latin word."""

    SPACE = enum.auto()
    UPPER = enum.auto()
    LOWER = enum.auto()
    UPPER_LOWER = enum.auto()
    LOWER_UPPER = enum.auto()
    LOWER_UPPER_UPPER = enum.auto()
    LOWER_UPPER_LOWER = enum.auto()
    UPPER_LOWER_CAMEL = enum.auto()
    ALL_CAPS = enum.auto()
    MIX = enum.auto()


def latin_case_step(
    case: LatinCase, upper: bool, letter: bool, ascii_pair: bool
) -> tuple[LatinCase, int]:
    """Advance the Latin case state and return it with the score delta."""
    if not letter:
        return LatinCase.SPACE, 0
    if not upper:
        if case is LatinCase.ALL_CAPS and not ascii_pair:
            return LatinCase.LOWER, IMPLAUSIBLE_LATIN_CASE_TRANSITION_PENALTY
        return LatinCase.LOWER, 0
    if case is LatinCase.SPACE:
        return LatinCase.UPPER, 0
    if case is LatinCase.LOWER:
        if ascii_pair:
            return LatinCase.UPPER, 0
        return LatinCase.UPPER, IMPLAUSIBLE_LATIN_CASE_TRANSITION_PENALTY
    return LatinCase.ALL_CAPS, 0


class SingleByteCandidate(Candidate):
    """Shared byte loop for table-driven candidates."""

    def __init__(self, encoding: str, table: SingleByteData) -> None:
        super().__init__(encoding)
        self.table = table
        self.prev = SPACE

    def _feed(self, data: bytes) -> int | None:
        classify = self.table.classify
        score = 0
        for byte in data:
            cls = classify(byte)
            if cls == UNMAPPED:
                return None
            score += self._step(byte, cls)
        return score

    def _finish(self) -> int | None:
        # a trailing space closes the last word
        return self._feed(_END_OF_STREAM)

    def _step(self, byte: int, cls: int) -> int:
        raise NotImplementedError


class LatinCandidate(SingleByteCandidate):
    """Latin-script encodings: windows-1252, windows-1250 and relatives."""

    def __init__(self, encoding: str, table: SingleByteData) -> None:
        super().__init__(encoding, table)
        self.case = LatinCase.SPACE
        self.prev_non_ascii = 0

    def _step(self, byte: int, cls: int) -> int:
        caseless = cls & CASELESS_MASK
        ascii_byte = byte < 0x80
        run = self.prev_non_ascii
        if run < len(_NON_ASCII_RUN_PENALTIES):
            score = _NON_ASCII_RUN_PENALTIES[run]
        else:
            score = _LONG_NON_ASCII_RUN_PENALTY
        ascii_pair = run == 0 and ascii_byte
        self.case, delta = latin_case_step(
            self.case,
            bool(cls & UPPER),
            self.table.is_latin_alphabetic(caseless),
            ascii_pair,
        )
        score += delta
        if not ascii_pair:
            score += self.table.score(caseless, self.prev)
        self.prev_non_ascii = 0 if ascii_byte else run + 1
        self.prev = caseless
        return score


class NonLatinCandidate(SingleByteCandidate):
    """Base for tables whose alphabet is not Latin.

    Tracks the longest run of non-Latin letters: a stream without a word of
    at least :data:`MIN_WORD_LENGTH` such letters rules the table out.
    """

    def __init__(self, encoding: str, table: SingleByteData) -> None:
        super().__init__(encoding, table)
        self.prev_ascii = True
        self.current_word_len = 0
        self.longest_word = 0

    def _step(self, byte: int, cls: int) -> int:
        table = self.table
        caseless = cls & CASELESS_MASK
        ascii_byte = byte < 0x80
        ascii_pair = self.prev_ascii and ascii_byte
        non_latin = table.is_non_latin_alphabetic(caseless)

        score = self._case_score(cls, caseless, non_latin, ascii_pair)

        if non_latin:
            self.current_word_len += 1
            if self.current_word_len > self.longest_word:
                self.longest_word = self.current_word_len
        else:
            self.current_word_len = 0

        if not ascii_pair:
            score += table.score(caseless, self.prev)
            if (
                table.is_latin_alphabetic(self.prev)
                and non_latin
                or table.is_latin_alphabetic(caseless)
                and table.is_non_latin_alphabetic(self.prev)
            ):
                score += LATIN_ADJACENCY_PENALTY
            self._count_punctuation(caseless, non_latin)

        self.prev_ascii = ascii_byte
        self.prev = caseless
        return score

    def _case_score(
        self, cls: int, caseless: int, non_latin: bool, ascii_pair: bool
    ) -> int:
        return 0

    def _count_punctuation(self, caseless: int, non_latin: bool) -> None:
        pass

    def _qualifies(self) -> bool:
        return self.longest_word >= MIN_WORD_LENGTH


class CaselessCandidate(NonLatinCandidate):
    """Scripts without case, such as Thai and Arabic."""


class NonLatinCasedCandidate(NonLatinCandidate):
    """Cyrillic and Greek: scores the case shape of each word."""

    def __init__(
        self, encoding: str, table: SingleByteData, *, all_caps_penalty: bool = False
    ) -> None:
        super().__init__(encoding, table)
        self.case = WordCase.SPACE
        self.all_caps_penalty = all_caps_penalty

    def _case_score(  # noqa: PLR0911, PLR0912
        self, cls: int, caseless: int, non_latin: bool, ascii_pair: bool
    ) -> int:
        case = self.case
        if self.table.is_latin_alphabetic(caseless):
            self.case = WordCase.MIX
            return 0

        if not non_latin:
            self.case = WordCase.SPACE
            if case is WordCase.UPPER_LOWER:
                return NON_LATIN_CAPITALIZATION_BONUS
            if case is WordCase.LOWER_UPPER:
                return NON_LATIN_IMPLAUSIBLE_CASE_TRANSITION_PENALTY
            if case is WordCase.LOWER_UPPER_LOWER:
                return NON_LATIN_CAMEL_PENALTY
            if case is WordCase.ALL_CAPS and self.all_caps_penalty:
                return NON_LATIN_ALL_CAPS_PENALTY
            if case in (WordCase.MIX, WordCase.LOWER_UPPER_UPPER):
                return NON_LATIN_MIXED_CASE_PENALTY
            return 0

        if not cls & UPPER:
            if case is WordCase.SPACE:
                self.case = WordCase.LOWER
            elif case is WordCase.UPPER:
                self.case = WordCase.UPPER_LOWER
            elif case is WordCase.LOWER_UPPER:
                self.case = WordCase.LOWER_UPPER_LOWER
                return NON_LATIN_CAMEL_PENALTY
            elif case is WordCase.LOWER_UPPER_UPPER:
                self.case = WordCase.MIX
                return NON_LATIN_MIXED_CASE_PENALTY
            elif case is WordCase.LOWER_UPPER_LOWER:
                self.case = WordCase.UPPER_LOWER_CAMEL
                return NON_LATIN_CAMEL_PENALTY
            elif case is WordCase.ALL_CAPS:
                self.case = WordCase.MIX
                return NON_LATIN_IMPLAUSIBLE_CASE_TRANSITION_PENALTY
            elif case is WordCase.MIX:
                return NON_LATIN_MIXED_CASE_PENALTY
            return 0

        if case is WordCase.SPACE:
            self.case = WordCase.UPPER
        elif case is WordCase.UPPER:
            self.case = WordCase.ALL_CAPS
        elif case in (WordCase.LOWER, WordCase.UPPER_LOWER, WordCase.UPPER_LOWER_CAMEL):
            self.case = WordCase.LOWER_UPPER
        elif case is WordCase.LOWER_UPPER:
            self.case = WordCase.LOWER_UPPER_UPPER
            return NON_LATIN_IMPLAUSIBLE_CASE_TRANSITION_PENALTY
        elif case in (WordCase.LOWER_UPPER_UPPER, WordCase.MIX):
            return NON_LATIN_MIXED_CASE_PENALTY
        elif case is WordCase.LOWER_UPPER_LOWER:
            self.case = WordCase.MIX
            return NON_LATIN_IMPLAUSIBLE_CASE_TRANSITION_PENALTY
        return 0


class ArabicFrenchCandidate(NonLatinCandidate):
    """windows-1256: caseless Arabic with cased French letters."""

    def __init__(self, encoding: str, table: SingleByteData) -> None:
        super().__init__(encoding, table)
        self.case = LatinCase.SPACE

    def _case_score(
        self, cls: int, caseless: int, non_latin: bool, ascii_pair: bool
    ) -> int:
        self.case, delta = latin_case_step(
            self.case,
            bool(cls & UPPER),
            self.table.is_latin_alphabetic(caseless),
            ascii_pair,
        )
        return delta


class LogicalHebrewCandidate(NonLatinCandidate):
    """windows-1255: Hebrew stored in reading order."""

    def __init__(self, encoding: str, table: SingleByteData) -> None:
        super().__init__(encoding, table)
        self.plausible_punctuation = 0

    def _count_punctuation(self, caseless: int, non_latin: bool) -> None:
        if caseless == ASCII_PUNCTUATION and self.table.is_non_latin_alphabetic(
            self.prev
        ):
            self.plausible_punctuation += 1


class VisualHebrewCandidate(NonLatinCandidate):
    """ISO-8859-8: Hebrew stored in display order, so words run backwards."""

    def __init__(self, encoding: str, table: SingleByteData) -> None:
        super().__init__(encoding, table)
        self.plausible_punctuation = 0

    def _count_punctuation(self, caseless: int, non_latin: bool) -> None:
        if non_latin and self.prev == ASCII_PUNCTUATION:
            self.plausible_punctuation += 1
