"""Encoding candidates: one incremental detector per legacy encoding."""

from __future__ import annotations

import logging


class Candidate:
    """One encoding under consideration for the current stream.

    Subclasses implement :meth:`_feed` and :meth:`_finish`.  Both return
    the score delta for what they consumed, or ``None`` once the bytes prove
    the encoding impossible.  A disqualified candidate never comes back and
    ignores everything fed to it afterwards.
    """

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        self._alive = True
        self._score = 0
        self._consumed = 0
        self.logger = logging.getLogger(__name__)

    def feed(self, data: bytes) -> None:
        """Consume *data*, in stream order."""
        if not self._alive:
            return
        delta = self._feed(data)
        self._consumed += len(data)
        if delta is None:
            self._disqualify("invalid byte sequence")
        else:
            self._score += delta

    def finish(self) -> None:
        """Run the end-of-stream checks.  Call exactly once."""
        if not self._alive:
            return
        delta = self._finish()
        if delta is None:
            self._disqualify("incomplete sequence at end of stream")
            return
        self._score += delta
        if not self._qualifies():
            self._disqualify("not qualified at end of stream")

    def is_alive(self) -> bool:
        return self._alive

    def score(self) -> int:
        return self._score

    def _disqualify(self, reason: str) -> None:
        self._alive = False
        self.logger.debug(
            "%s disqualified within %d bytes: %s", self.encoding, self._consumed, reason
        )

    def _feed(self, data: bytes) -> int | None:
        raise NotImplementedError

    def _finish(self) -> int | None:
        return 0

    def _qualifies(self) -> bool:
        return True

    def __repr__(self) -> str:
        state = "alive" if self._alive else "dead"
        return f"<{type(self).__name__} {self.encoding} {state} score={self._score}>"
