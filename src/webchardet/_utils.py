"""Internal shared utilities for webchardet."""

from __future__ import annotations

#: Default maximum number of bytes to examine during one-shot detection.
DEFAULT_MAX_BYTES: int = 200_000


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)


def _validate_byte_str(byte_str: object) -> None:
    """Raise TypeError if *byte_str* is not a bytes-like object."""
    if not isinstance(byte_str, (bytes, bytearray, memoryview)):
        msg = f"Expected object of type bytes or bytearray, got: {type(byte_str)}"
        raise TypeError(msg)
