"""Stream-wide UTF-8 validity tracking.

The detector never reports UTF-8 on its own; it only records whether the
whole stream was valid UTF-8 containing at least one non-ASCII character,
so callers can decide for themselves.
"""

from __future__ import annotations


class Utf8Tracker:
    """Incremental UTF-8 validator following the WHATWG decoder bounds.

    Once the stream is invalid it stays invalid.
    """

    def __init__(self) -> None:
        self._valid = True
        self._non_ascii_seen = False
        self._needed = 0
        self._lower = 0x80
        self._upper = 0xBF
        self._finished = False

    @property
    def valid(self) -> bool:
        """Whether every byte so far is valid UTF-8."""
        return self._valid

    @property
    def non_ascii_seen(self) -> bool:
        return self._non_ascii_seen

    @property
    def valid_non_ascii_utf8(self) -> bool:
        """True for a valid UTF-8 stream with at least one byte >= 0x80."""
        return self._valid and self._non_ascii_seen

    def feed(self, data: bytes) -> None:  # noqa: PLR0912
        if not self._valid:
            return
        if self._needed == 0 and data.isascii():
            return
        needed, lower, upper = self._needed, self._lower, self._upper
        for byte in data:
            if needed == 0:
                if byte < 0x80:
                    continue
                self._non_ascii_seen = True
                if 0xC2 <= byte <= 0xDF:
                    needed = 1
                elif 0xE0 <= byte <= 0xEF:
                    if byte == 0xE0:
                        lower = 0xA0
                    elif byte == 0xED:
                        upper = 0x9F
                    needed = 2
                elif 0xF0 <= byte <= 0xF4:
                    if byte == 0xF0:
                        lower = 0x90
                    elif byte == 0xF4:
                        upper = 0x8F
                    needed = 3
                else:
                    self._valid = False
                    return
                continue
            if not lower <= byte <= upper:
                self._valid = False
                return
            lower, upper = 0x80, 0xBF
            needed -= 1
        self._needed, self._lower, self._upper = needed, lower, upper

    def finish(self) -> None:
        """Close the stream; a truncated final sequence makes it invalid."""
        if not self._finished:
            self._finished = True
            if self._needed:
                self._valid = False
