# tests/test_iso2022jp.py
"""Tests for the escape-driven ISO-2022-JP candidate."""

from __future__ import annotations

import pytest

from webchardet import detect
from webchardet.candidates.iso2022jp import (
    ISO_2022_JP_SCORE_PER_ESCAPE,
    ISO_2022_JP_SCORE_PER_KANJI,
    ISO_2022_JP_SCORE_PER_KATAKANA,
    Iso2022JpCandidate,
    State,
)

_HELLO = b"\x1b$B$3$s$K$A$O\x1b(B"


def test_hiragana(run_candidate):
    candidate = run_candidate("iso-2022-jp", _HELLO)
    assert isinstance(candidate, Iso2022JpCandidate)
    assert candidate.is_alive()
    assert candidate.escapes_seen == 2
    assert candidate.score() == (
        2 * ISO_2022_JP_SCORE_PER_ESCAPE + 5 * ISO_2022_JP_SCORE_PER_KANJI
    )


def test_plain_ascii_does_not_qualify(run_candidate):
    candidate = run_candidate("iso-2022-jp", b"Hello world", finish=False)
    assert candidate.is_alive()
    candidate.finish()
    assert not candidate.is_alive()


def test_half_width_katakana(run_candidate):
    candidate = run_candidate("iso-2022-jp", b"\x1b(I\x31\x32\x1b(B")
    assert candidate.is_alive()
    assert candidate.score() == (
        2 * ISO_2022_JP_SCORE_PER_ESCAPE + 2 * ISO_2022_JP_SCORE_PER_KATAKANA
    )


def test_roman(run_candidate):
    candidate = run_candidate("iso-2022-jp", b"\x1b(Jabc\x1b(B")
    assert candidate.is_alive()
    assert candidate.score() == 2 * ISO_2022_JP_SCORE_PER_ESCAPE
    assert candidate.state is State.ASCII


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(b"\x1b$B\x1b(B", id="empty-segment"),
        pytest.param(b"\x1b$B$\x1b(B", id="escape-in-trail"),
        pytest.param(b"\x1b$A", id="unknown-escape"),
        pytest.param(b"\x1bx", id="bad-escape-start"),
        pytest.param(b"abc\xe9", id="high-byte"),
        pytest.param(b"\x0e", id="shift-out"),
        pytest.param(b"\x1b(I\x60", id="katakana-range"),
        pytest.param(b"\x1b$B\x29\x21", id="unmapped-jis0208"),
        pytest.param(b"\x1b$B$\x0a", id="control-in-trail"),
    ],
)
def test_invalid_streams(run_candidate, data):
    assert not run_candidate("iso-2022-jp", data, finish=False).is_alive()


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(b"\x1b$B$", id="trail"),
        pytest.param(b"\x1b", id="escape-start"),
        pytest.param(b"\x1b$", id="escape"),
    ],
)
def test_truncated_at_end(run_candidate, data):
    candidate = run_candidate("iso-2022-jp", data, finish=False)
    assert candidate.is_alive()
    candidate.finish()
    assert not candidate.is_alive()


def test_ending_in_kanji_mode_is_allowed(run_candidate):
    candidate = run_candidate("iso-2022-jp", b"\x1b$B$3$s")
    assert candidate.is_alive()


def test_byte_at_a_time(run_candidate):
    whole = run_candidate("iso-2022-jp", _HELLO)
    chunked = run_candidate("iso-2022-jp", b"", finish=False)
    for byte in _HELLO:
        chunked.feed(bytes((byte,)))
    chunked.finish()
    assert chunked.score() == whole.score()


def test_detect_iso_2022_jp():
    assert detect(_HELLO)["encoding"] == "iso-2022-jp"
    assert detect(b"\x1b(Jabc\x1b(B")["encoding"] == "iso-2022-jp"
