"""Detection outcome type."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """Outcome of one detection session.

    :param encoding: The winning legacy encoding.  Never ``"utf-8"``.
    :param valid_non_ascii_utf8: Whether the whole stream was valid UTF-8
        and contained at least one non-ASCII byte.
    """

    encoding: str
    valid_non_ascii_utf8: bool

    def guess(self, allow_utf8: bool = False) -> str:
        """Return ``"utf-8"`` when allowed and plausible, else :attr:`encoding`."""
        if allow_utf8 and self.valid_non_ascii_utf8:
            return "utf-8"
        return self.encoding

    def to_dict(self) -> dict[str, str | bool]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'encoding'`` and ``'valid_non_ascii_utf8'`` keys.
        """
        return {
            "encoding": self.encoding,
            "valid_non_ascii_utf8": self.valid_non_ascii_utf8,
        }
