# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from webchardet.candidates import Candidate
from webchardet.registry import create_candidate, get_encoding_info


def _run(encoding: str, data: bytes, *, finish: bool = True) -> Candidate:
    candidate = create_candidate(get_encoding_info(encoding))
    candidate.feed(data)
    if finish:
        candidate.finish()
    return candidate


@pytest.fixture
def run_candidate() -> Callable[..., Candidate]:
    """Return a helper that feeds bytes to a fresh candidate.

    ``run_candidate("shift_jis", data)`` builds the candidate for the named
    encoding, feeds *data* in one chunk and finishes it unless
    ``finish=False`` is passed.
    """
    return _run
