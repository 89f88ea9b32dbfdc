"""EncodingDetector: streaming legacy encoding detection."""

from __future__ import annotations

import logging

from webchardet.enums import Tld
from webchardet.registry import CandidateRegistry
from webchardet.result import DetectionResult
from webchardet.selector import select_encoding
from webchardet.tld import resolve_tld_hint
from webchardet.validity import Utf8Tracker

logger = logging.getLogger(__name__)


class EncodingDetector:
    """Streaming detector for legacy web content of unlabeled encoding.

    Feed the bytes of one stream with :meth:`feed`, then call
    :meth:`finish` to get a :class:`DetectionResult`.  A detector covers a
    single stream: there is no ``reset()``, create a new one instead.

    ::

        detector = EncodingDetector(tld="jp")
        for chunk in chunks:
            detector.feed(chunk)
            if detector.done:
                break
        encoding = detector.finish().encoding
    """

    def __init__(self, tld: Tld | str | bytes | None = None) -> None:
        """Initialize the detector.

        :param tld: Top-level domain the content came from, as a
            :class:`Tld`, a label such as ``"ru"`` or a host name.  Only
            used to break ties; unrecognised values are ignored.
        """
        self._tld = resolve_tld_hint(tld)
        self._registry = CandidateRegistry()
        self._utf8 = Utf8Tracker()
        self._result: DetectionResult | None = None

    @property
    def tld(self) -> Tld:
        return self._tld

    @property
    def done(self) -> bool:
        """Whether further input can no longer change the outcome's family.

        True once a single multi-byte CJK candidate is all that remains.
        Feeding more bytes is still allowed and still processed.
        """
        return self._registry.only_cjk_left()

    @property
    def result(self) -> DetectionResult | None:
        """The outcome, or ``None`` until :meth:`finish` has been called."""
        return self._result

    def feed(self, byte_str: bytes | bytearray) -> bool:
        """Feed the next chunk of the stream.

        :param byte_str: The next chunk of bytes, in stream order.
        :returns: Whether any byte fed so far, in this or an earlier
            chunk, was non-ASCII.
        :raises ValueError: If called after :meth:`finish`.
        """
        if self._result is not None:
            msg = "feed() called after finish()"
            raise ValueError(msg)
        if byte_str:
            data = byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
            self._registry.feed(data)
            self._utf8.feed(data)
        return self._utf8.non_ascii_seen

    def finish(self) -> DetectionResult:
        """Signal end of stream and return the outcome.

        Calling it again returns the same result.

        :returns: The :class:`DetectionResult` for the stream.
        """
        if self._result is None:
            self._registry.finish()
            self._utf8.finish()
            encoding = select_encoding(self._registry.candidates, self._tld)
            self._result = DetectionResult(
                encoding=encoding,
                valid_non_ascii_utf8=self._utf8.valid_non_ascii_utf8,
            )
            logger.debug(
                "detected %s (valid non-ASCII UTF-8: %s)",
                encoding,
                self._result.valid_non_ascii_utf8,
            )
        return self._result

    def guess(self, allow_utf8: bool = False) -> str:
        """Finish the stream if needed and return the encoding to use.

        :param allow_utf8: Report ``"utf-8"`` when the stream was valid
            non-ASCII UTF-8.  Off by default: callers opt in explicitly.
        :returns: An encoding name.
        """
        return self.finish().guess(allow_utf8)
