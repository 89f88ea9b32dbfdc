"""ISO-2022-JP candidate.

ISO-2022-JP is 7-bit: it can only be told apart from ASCII by its escape
sequences, so a stream without any escape rules it out.
"""

from __future__ import annotations

import enum

from webchardet.candidates import Candidate
from webchardet.candidates.cjk import CJ_PUNCTUATION, CJK_BASE_SCORE

ESC = 0x1B
SO = 0x0E
SI = 0x0F

ISO_2022_JP_SCORE_PER_ESCAPE = CJ_PUNCTUATION
ISO_2022_JP_SCORE_PER_KANJI = CJK_BASE_SCORE
ISO_2022_JP_SCORE_PER_KATAKANA = CJ_PUNCTUATION


class State(enum.Enum):
    ASCII = enum.auto()
    ROMAN = enum.auto()
    KATAKANA = enum.auto()
    LEAD = enum.auto()
    TRAIL = enum.auto()
    ESCAPE_START = enum.auto()
    ESCAPE = enum.auto()


_ESCAPES: dict[tuple[int, int], State] = {
    (0x28, 0x42): State.ASCII,  # ESC ( B
    (0x28, 0x4A): State.ROMAN,  # ESC ( J
    (0x28, 0x49): State.KATAKANA,  # ESC ( I
    (0x24, 0x40): State.LEAD,  # ESC $ @
    (0x24, 0x42): State.LEAD,  # ESC $ B
}


def _is_mapped_jis0208(lead: int, trail: int) -> bool:
    try:
        bytes((lead | 0x80, trail | 0x80)).decode("euc_jp")
    except UnicodeDecodeError:
        return False
    return True


class Iso2022JpCandidate(Candidate):
    """Follows the ISO-2022-JP decoder states byte by byte."""

    def __init__(self, encoding: str) -> None:
        super().__init__(encoding)
        self.state = State.ASCII
        self.escapes_seen = 0
        self._escape_lead = 0
        self._lead = 0
        self._output_since_escape = False

    def _feed(self, data: bytes) -> int | None:  # noqa: PLR0911, PLR0912
        score = 0
        for byte in data:
            state = self.state
            if state is State.ESCAPE_START:
                if byte not in (0x24, 0x28):
                    return None
                self._escape_lead = byte
                self.state = State.ESCAPE
                continue
            if state is State.ESCAPE:
                target = _ESCAPES.get((self._escape_lead, byte))
                if target is None:
                    return None
                if self.escapes_seen and not self._output_since_escape:
                    return None
                self.escapes_seen += 1
                self._output_since_escape = False
                self.state = target
                score += ISO_2022_JP_SCORE_PER_ESCAPE
                continue
            if byte == ESC:
                if state is State.TRAIL:
                    return None
                self.state = State.ESCAPE_START
                continue
            if byte >= 0x80:
                return None
            if state in (State.ASCII, State.ROMAN):
                if byte in (SO, SI):
                    return None
            elif state is State.KATAKANA:
                if not 0x21 <= byte <= 0x5F:
                    return None
                score += ISO_2022_JP_SCORE_PER_KATAKANA
            elif state is State.LEAD:
                if not 0x21 <= byte <= 0x7E:
                    return None
                self._lead = byte
                self.state = State.TRAIL
                continue
            else:
                if not 0x21 <= byte <= 0x7E or not _is_mapped_jis0208(
                    self._lead, byte
                ):
                    return None
                self.state = State.LEAD
                score += ISO_2022_JP_SCORE_PER_KANJI
            self._output_since_escape = True
        return score

    def _finish(self) -> int | None:
        if self.state in (State.TRAIL, State.ESCAPE_START, State.ESCAPE):
            return None
        return 0

    def _qualifies(self) -> bool:
        return self.escapes_seen > 0
