"""Legacy web content encoding detector."""

from __future__ import annotations

from webchardet._utils import (
    DEFAULT_MAX_BYTES,
    _validate_byte_str,
    _validate_max_bytes,
)
from webchardet.detector import EncodingDetector
from webchardet.enums import Tld
from webchardet.result import DetectionResult
from webchardet.tld import classify_tld

__version__ = "0.1.0"
__all__ = [
    "DetectionResult",
    "EncodingDetector",
    "Tld",
    "classify_tld",
    "detect",
]


def detect(
    byte_str: bytes | bytearray,
    tld: Tld | str | bytes | None = None,
    allow_utf8: bool = False,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> dict[str, str | bool]:
    """Detect the legacy encoding of the given byte string.

    :param byte_str: The raw bytes to examine.
    :param tld: Optional top-level domain hint, used only to break ties.
    :param allow_utf8: Report ``"utf-8"`` when the data is valid non-ASCII
        UTF-8.
    :param max_bytes: Maximum number of bytes to examine.
    :returns: A dict with ``'encoding'`` and ``'valid_non_ascii_utf8'`` keys.
    :raises TypeError: If *byte_str* is not bytes-like.
    :raises ValueError: If *max_bytes* is not a positive integer.
    """
    _validate_byte_str(byte_str)
    _validate_max_bytes(max_bytes)
    detector = EncodingDetector(tld=tld)
    detector.feed(bytes(byte_str[:max_bytes]))
    result = detector.finish()
    return {
        "encoding": result.guess(allow_utf8),
        "valid_non_ascii_utf8": result.valid_non_ascii_utf8,
    }
