# tests/test_singlebyte.py
"""Tests for the table-driven single-byte candidates."""

from __future__ import annotations

import pytest

from webchardet.candidates.singlebyte import (
    IMPLAUSIBLE_LATIN_CASE_TRANSITION_PENALTY,
    NON_LATIN_ALL_CAPS_PENALTY,
    NON_LATIN_CAPITALIZATION_BONUS,
    LatinCase,
    LatinCandidate,
    NonLatinCasedCandidate,
    VisualHebrewCandidate,
    latin_case_step,
)

_VISUAL_HEBREW = b".\xed\xec\xe5\xf2 \xed\xe5\xec\xf9"


def test_latin_case_step_lower_to_upper_inside_word():
    assert latin_case_step(LatinCase.LOWER, True, True, False) == (
        LatinCase.UPPER,
        IMPLAUSIBLE_LATIN_CASE_TRANSITION_PENALTY,
    )


def test_latin_case_step_ascii_pair_is_free():
    assert latin_case_step(LatinCase.LOWER, True, True, True) == (LatinCase.UPPER, 0)
    assert latin_case_step(LatinCase.ALL_CAPS, False, True, True) == (
        LatinCase.LOWER,
        0,
    )


def test_latin_case_step_all_caps_then_lower():
    assert latin_case_step(LatinCase.ALL_CAPS, False, True, False) == (
        LatinCase.LOWER,
        IMPLAUSIBLE_LATIN_CASE_TRANSITION_PENALTY,
    )


def test_latin_case_step_capitalized_word():
    case, delta = latin_case_step(LatinCase.SPACE, True, True, False)
    assert (case, delta) == (LatinCase.UPPER, 0)
    assert latin_case_step(case, False, True, False) == (LatinCase.LOWER, 0)
    assert latin_case_step(case, True, True, False) == (LatinCase.ALL_CAPS, 0)


def test_latin_case_step_non_letter_resets():
    assert latin_case_step(LatinCase.ALL_CAPS, False, False, False) == (
        LatinCase.SPACE,
        0,
    )


def test_latin_candidate_scores_german(run_candidate):
    candidate = run_candidate("windows-1252", "Straße".encode("cp1252"))
    assert isinstance(candidate, LatinCandidate)
    assert candidate.is_alive()
    assert candidate.score() == 14


def test_ascii_only_scores_zero(run_candidate):
    for name in ("windows-1252", "windows-1250", "iso-8859-4"):
        candidate = run_candidate(name, b"The quick brown fox jumps over the lazy dog.")
        assert candidate.is_alive()
        assert candidate.score() == 0


def test_unmapped_byte_disqualifies(run_candidate):
    candidate = run_candidate("windows-1252", b"abc\x81def", finish=False)
    assert not candidate.is_alive()


def test_disqualified_candidate_ignores_input(run_candidate):
    candidate = run_candidate("windows-1252", b"\x81", finish=False)
    candidate.feed("Straße".encode("cp1252"))
    candidate.finish()
    assert not candidate.is_alive()


def test_unknown_letter_pair_is_penalized(run_candidate):
    candidate = run_candidate("windows-1250", "Straße".encode("cp1250"))
    assert candidate.is_alive()
    assert candidate.score() < 0


def test_long_non_ascii_run_is_penalized(run_candidate):
    candidate = run_candidate("windows-1252", b"\xe4" * 6)
    assert candidate.score() < 0


def test_mid_word_capital_is_penalized(run_candidate):
    plain = run_candidate("windows-1252", "straße".encode("cp1252"))
    odd = run_candidate("windows-1252", "straßE".encode("cp1252"))
    assert odd.score() == plain.score() + IMPLAUSIBLE_LATIN_CASE_TRANSITION_PENALTY


def test_ascii_case_is_not_scored(run_candidate):
    assert run_candidate("windows-1252", b"straSSe McDonald").score() == 0


def test_cyrillic_word_qualifies(run_candidate):
    candidate = run_candidate("windows-1251", "Русский".encode("cp1251"))
    assert isinstance(candidate, NonLatinCasedCandidate)
    assert candidate.is_alive()
    assert candidate.score() == 141


def test_short_words_do_not_qualify(run_candidate):
    assert not run_candidate("windows-1251", "Ру и мы".encode("cp1251")).is_alive()
    assert run_candidate("windows-1251", "Рус".encode("cp1251")).is_alive()


def test_ascii_does_not_qualify_non_latin(run_candidate):
    candidate = run_candidate("windows-1251", b"plain ascii text")
    assert not candidate.is_alive()


def test_capitalization_bonus(run_candidate):
    capitalized = run_candidate("windows-1251", "Русский".encode("cp1251"))
    lower = run_candidate("windows-1251", "русский".encode("cp1251"))
    assert capitalized.score() - lower.score() == NON_LATIN_CAPITALIZATION_BONUS


def test_all_caps_penalty_only_for_koi8_u(run_candidate):
    lower = run_candidate("windows-1251", "русский".encode("cp1251"))
    caps = run_candidate("windows-1251", "РУССКИЙ".encode("cp1251"))
    assert caps.score() == lower.score()

    koi_lower = run_candidate("koi8-u", "русский".encode("koi8_u"))
    koi_caps = run_candidate("koi8-u", "РУССКИЙ".encode("koi8_u"))
    assert koi_caps.score() - koi_lower.score() == NON_LATIN_ALL_CAPS_PENALTY


def test_camel_case_is_penalized(run_candidate):
    lower = run_candidate("windows-1251", "русский".encode("cp1251"))
    camel = run_candidate("windows-1251", "руСский".encode("cp1251"))
    assert camel.score() < lower.score()


def test_latin_next_to_cyrillic_is_penalized(run_candidate):
    spaced = run_candidate("windows-1251", "abc Русский".encode("cp1251"))
    glued = run_candidate("windows-1251", "abcРусский".encode("cp1251"))
    assert glued.score() < spaced.score()


def test_greek_final_sigma(run_candidate):
    candidate = run_candidate("windows-1253", "Ελληνικά".encode("cp1253"))
    assert candidate.is_alive()
    assert candidate.score() == 166


def test_thai_is_caseless(run_candidate):
    candidate = run_candidate("windows-874", "ภาษาไทย".encode("cp874"))
    assert candidate.is_alive()
    assert candidate.score() > 0


def test_arabic(run_candidate):
    candidate = run_candidate("windows-1256", "مرحبا بالعالم".encode("cp1256"))
    assert candidate.is_alive()
    assert candidate.score() > 0


def test_logical_hebrew(run_candidate):
    candidate = run_candidate("windows-1255", "עברית".encode("cp1255"))
    assert candidate.is_alive()
    assert candidate.score() == 90


def test_logical_hebrew_counts_trailing_punctuation(run_candidate):
    candidate = run_candidate("windows-1255", "שלום עולם.".encode("cp1255"))
    assert candidate.plausible_punctuation == 1


def test_visual_hebrew_counts_leading_punctuation(run_candidate):
    visual = run_candidate("iso-8859-8", _VISUAL_HEBREW)
    logical = run_candidate("windows-1255", _VISUAL_HEBREW)
    assert isinstance(visual, VisualHebrewCandidate)
    assert visual.plausible_punctuation == 1
    assert logical.plausible_punctuation == 0


def test_visual_hebrew_prefers_reversed_words(run_candidate):
    visual = run_candidate("iso-8859-8", _VISUAL_HEBREW)
    logical = run_candidate("windows-1255", _VISUAL_HEBREW)
    assert visual.score() > logical.score()


@pytest.mark.parametrize("chunk_size", [1, 2, 3])
def test_chunking_does_not_change_score(run_candidate, chunk_size):
    data = "Ελληνικά και Ρωσικά".encode("cp1253")
    whole = run_candidate("windows-1253", data)
    chunked = run_candidate("windows-1253", b"", finish=False)
    for i in range(0, len(data), chunk_size):
        chunked.feed(data[i : i + chunk_size])
    chunked.finish()
    assert chunked.score() == whole.score()
