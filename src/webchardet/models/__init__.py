"""Byte-class tables, pair scores and CJK frequency data.

Single-byte tables are derived from Python's codecs and :mod:`unicodedata`
and scored from the per-language letter data in ``languages.json``.  Each
table is built once per process on first use and then shared read-only by
every detection session.
"""

from __future__ import annotations

import dataclasses
import importlib.resources
import json
import threading
import unicodedata

#: ASCII non-letters, controls, NBSP and other space separators.
SPACE = 0
#: Non-ASCII symbols and punctuation.
SYMBOL = 1
ASCII_LETTER = 2
#: ``.,!?:;`` in tables that track plausible punctuation.
ASCII_PUNCTUATION = 3
#: Box drawing, block elements and geometric shapes.
IMPLAUSIBLE = 4
#: First class value assigned to a letter of the table's alphabet.
FIRST_LETTER = 5
#: Set on upper-case letters; the low seven bits are the caseless class.
UPPER = 0x80
CASELESS_MASK = 0x7F
#: Bytes that are undefined in the encoding or decode to a C1 control.
UNMAPPED = 255

IMPLAUSIBILITY_PENALTY = -220
COMMON_PAIR_BONUS = 8
ASCII_LETTER_WEIGHT = 3
MAX_LETTER_WEIGHT = 10

#: Length of each frequent-character list; earlier entries earn more.
FREQUENT_CHARACTERS = 128

_SENTENCE_PUNCTUATION = frozenset(".,!?:;")
_LETTER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Mn"})

_LANGUAGE_CACHE: dict[str, LanguageModel] | None = None
_FREQUENT_CACHE: dict[str, dict[str, int]] | None = None
_DATA_LOCK = threading.Lock()
_TABLE_CACHE: dict[tuple[str, tuple[str, ...]], SingleByteData] = {}
_TABLE_CACHE_LOCK = threading.Lock()


@dataclasses.dataclass(frozen=True, slots=True)
class LanguageModel:
    """Letter statistics for one language."""

    code: str
    latin: bool
    weights: dict[str, int]
    common_pairs: frozenset[str]
    final_letters: frozenset[str]
    dampened: frozenset[str]


class SingleByteData:
    """Byte classes and pair scores for one single-byte encoding.

    Instances are immutable once built; use :func:`get_single_byte_data`
    rather than constructing them directly.
    """

    __slots__ = (
        "_classes",
        "_latin",
        "_non_latin",
        "_scores",
        "encoding",
        "letters",
        "size",
    )

    def __init__(
        self,
        encoding: str,
        classes: bytes,
        letters: tuple[str, ...],
        latin_flags: tuple[bool, ...],
        scores: tuple[int, ...],
    ) -> None:
        self.encoding = encoding
        self.letters = letters
        self.size = FIRST_LETTER + len(letters)
        self._classes = classes
        self._scores = scores
        self._latin = (False, False, True, False, False, *latin_flags)
        self._non_latin = (False,) * FIRST_LETTER + tuple(not f for f in latin_flags)

    def classify(self, byte: int) -> int:
        """Return the class of *byte*, with the :data:`UPPER` bit for capitals."""
        return self._classes[byte]

    def is_latin_alphabetic(self, caseless: int) -> bool:
        return self._latin[caseless]

    def is_non_latin_alphabetic(self, caseless: int) -> bool:
        return self._non_latin[caseless]

    def score(self, current: int, previous: int) -> int:
        """Return the pair score for two caseless classes."""
        return self._scores[previous * self.size + current]


def load_language_models() -> dict[str, LanguageModel]:
    """Load the per-language letter data from the bundled languages.json.

    :returns: A dict mapping language codes to :class:`LanguageModel`.
    :raises ValueError: If the data file is malformed.
    """
    global _LANGUAGE_CACHE, _FREQUENT_CACHE  # noqa: PLW0603
    if _LANGUAGE_CACHE is not None:
        return _LANGUAGE_CACHE

    with _DATA_LOCK:
        if _LANGUAGE_CACHE is not None:
            return _LANGUAGE_CACHE
        ref = importlib.resources.files("webchardet.models").joinpath(
            "languages.json"
        )
        try:
            raw = json.loads(ref.read_text(encoding="utf-8"))
            languages = {
                code: _parse_language(code, entry)
                for code, entry in raw["languages"].items()
            }
            frequent = {
                name: _frequent_bonuses(chars)
                for name, chars in raw["frequent"].items()
            }
        except (KeyError, TypeError, ValueError) as e:
            msg = f"corrupt languages.json: {e}"
            raise ValueError(msg) from e
        _FREQUENT_CACHE = frequent
        _LANGUAGE_CACHE = languages
        return languages


def frequent_characters(name: str) -> dict[str, int]:
    """Return the frequent-character bonus table *name*.

    Known tables are ``"kanji"``, ``"hangul"`` and ``"simplified"``.  The
    bonus for the character at position *pos* is ``(128 - pos) // 16``.
    """
    load_language_models()
    assert _FREQUENT_CACHE is not None
    return _FREQUENT_CACHE[name]


def cjk_extra_score(char: str, table: dict[str, int]) -> int:
    """Return the frequency bonus of *char*, or 0 when it is not listed."""
    return table.get(char, 0)


def letter_weights(letters: str) -> dict[str, int]:
    """Assign weights 10 (most frequent) down to 1 by frequency rank."""
    unique = list(dict.fromkeys(letters))
    count = len(unique)
    if count == 1:
        return {unique[0]: MAX_LETTER_WEIGHT}
    return {
        letter: 1 + (MAX_LETTER_WEIGHT - 1) * (count - 1 - rank) // (count - 1)
        for rank, letter in enumerate(unique)
    }


def _parse_language(code: str, entry: dict) -> LanguageModel:
    pairs = entry.get("pairs", [])
    if any(len(pair) != 2 for pair in pairs):
        msg = f"language {code!r} lists a pair that is not two letters"
        raise ValueError(msg)
    return LanguageModel(
        code=code,
        latin=entry["script"] == "latin",
        weights=letter_weights(entry["letters"]),
        common_pairs=frozenset(pairs),
        final_letters=frozenset(entry.get("final", "")),
        dampened=frozenset(entry.get("alif", "")),
    )


def _frequent_bonuses(chars: str) -> dict[str, int]:
    unique = list(dict.fromkeys(chars))[:FREQUENT_CHARACTERS]
    return {
        char: (FREQUENT_CHARACTERS - pos) // 16 for pos, char in enumerate(unique)
    }


def get_single_byte_data(
    encoding: str,
    codec: str,
    languages: tuple[str, ...],
    *,
    latin: bool,
    punctuation: bool = False,
    visual: bool = False,
) -> SingleByteData:
    """Return the shared table for *encoding* scored for *languages*.

    :param encoding: The encoding's public name.
    :param codec: The Python codec used to decode each byte.
    :param languages: Codes of the languages the encoding is scored for.
    :param latin: Whether the table's primary alphabet is Latin.
    :param punctuation: Give ``.,!?:;`` their own class.
    :param visual: Score pairs in reverse order (visual Hebrew).
    :returns: The immutable :class:`SingleByteData` for *encoding*.
    """
    key = (encoding, languages)
    data = _TABLE_CACHE.get(key)
    if data is not None:
        return data
    with _TABLE_CACHE_LOCK:
        data = _TABLE_CACHE.get(key)
        if data is None:
            data = _build_table(
                encoding,
                codec,
                [load_language_models()[code] for code in languages],
                latin=latin,
                punctuation=punctuation,
                visual=visual,
            )
            _TABLE_CACHE[key] = data
        return data


def _caseless_key(char: str) -> str:
    lower = char.lower()
    return lower if len(lower) == 1 else char


def _build_table(
    encoding: str,
    codec: str,
    languages: list[LanguageModel],
    *,
    latin: bool,
    punctuation: bool,
    visual: bool,
) -> SingleByteData:
    letters: list[str] = []
    latin_flags: list[bool] = []
    classes = bytearray(256)

    for byte in range(256):
        if byte < 0x80:
            char = chr(byte)
            if char.isalpha():
                classes[byte] = ASCII_LETTER | (UPPER if char.isupper() else 0)
            elif punctuation and char in _SENTENCE_PUNCTUATION:
                classes[byte] = ASCII_PUNCTUATION
            else:
                classes[byte] = SPACE
            continue
        try:
            char = bytes((byte,)).decode(codec)
        except UnicodeDecodeError:
            classes[byte] = UNMAPPED
            continue
        if len(char) != 1 or 0x80 <= ord(char) <= 0x9F:
            classes[byte] = UNMAPPED
            continue
        category = unicodedata.category(char)
        if category == "Zs":
            classes[byte] = SPACE
        elif 0x2500 <= ord(char) <= 0x25FF:
            classes[byte] = IMPLAUSIBLE
        elif category not in _LETTER_CATEGORIES:
            classes[byte] = SYMBOL
        else:
            is_latin = unicodedata.name(char, "").startswith("LATIN") or (
                latin and category == "Mn"
            )
            if latin and not is_latin:
                # ordinal indicators and the like
                classes[byte] = SYMBOL
                continue
            key = _caseless_key(char)
            if key in letters:
                index = letters.index(key)
            else:
                letters.append(key)
                latin_flags.append(is_latin)
                index = len(letters) - 1
            classes[byte] = (FIRST_LETTER + index) | (UPPER if char.isupper() else 0)

    alphabet = _Alphabet(letters, latin_flags, languages)
    size = FIRST_LETTER + len(letters)
    scores = []
    for previous in range(size):
        for current in range(size):
            if visual:
                scores.append(alphabet.pair_score(current, previous))
            else:
                scores.append(alphabet.pair_score(previous, current))
    return SingleByteData(
        encoding, bytes(classes), tuple(letters), tuple(latin_flags), tuple(scores)
    )


class _Alphabet:
    """Scores pairs of caseless classes for one table under construction."""

    def __init__(
        self,
        letters: list[str],
        latin_flags: list[bool],
        languages: list[LanguageModel],
    ) -> None:
        self.letters = letters
        self.latin_flags = latin_flags
        self.languages = languages
        self.combining = {
            FIRST_LETTER + i
            for i, letter in enumerate(letters)
            if unicodedata.category(letter) == "Mn"
        }
        self.final = {
            FIRST_LETTER + i
            for i, letter in enumerate(letters)
            if any(letter in lang.final_letters for lang in languages)
        }

    def _is_letter(self, cls: int) -> bool:
        return cls == ASCII_LETTER or cls >= FIRST_LETTER

    def _is_non_latin(self, cls: int) -> bool:
        return cls >= FIRST_LETTER and not self.latin_flags[cls - FIRST_LETTER]

    def _weight(self, lang: LanguageModel, cls: int) -> int | None:
        if cls == ASCII_LETTER:
            return ASCII_LETTER_WEIGHT if lang.latin else None
        return lang.weights.get(self.letters[cls - FIRST_LETTER])

    def _dampened(self, lang: LanguageModel, *classes: int) -> bool:
        return any(
            cls >= FIRST_LETTER and self.letters[cls - FIRST_LETTER] in lang.dampened
            for cls in classes
        )

    def pair_score(self, previous: int, current: int) -> int:
        if IMPLAUSIBLE in (previous, current):
            return IMPLAUSIBILITY_PENALTY
        previous_letter = self._is_letter(previous)
        current_letter = self._is_letter(current)
        if current in self.combining and not previous_letter:
            return IMPLAUSIBILITY_PENALTY
        if previous_letter and current_letter:
            if (
                previous in self.final
                and self._is_non_latin(current)
                and current not in self.combining
            ):
                return IMPLAUSIBILITY_PENALTY
            return self._letter_pair(previous, current)
        if previous_letter:
            return self._boundary(previous)
        if current_letter:
            return self._boundary(current)
        return 0

    def _letter_pair(self, previous: int, current: int) -> int:
        if ASCII_LETTER in (previous, current) and (
            self._is_non_latin(previous) or self._is_non_latin(current)
        ):
            return 0
        best: int | None = None
        for lang in self.languages:
            first = self._weight(lang, previous)
            second = self._weight(lang, current)
            if first is None or second is None:
                continue
            score = first + second
            if previous >= FIRST_LETTER and current >= FIRST_LETTER:
                pair = self.letters[previous - FIRST_LETTER] + self.letters[
                    current - FIRST_LETTER
                ]
                if pair in lang.common_pairs:
                    score += COMMON_PAIR_BONUS
            if self._dampened(lang, previous, current):
                score //= 2
            if best is None or score > best:
                best = score
        if best is None:
            return IMPLAUSIBILITY_PENALTY
        return best

    def _boundary(self, letter: int) -> int:
        if letter == ASCII_LETTER:
            return 0
        best: int | None = None
        for lang in self.languages:
            weight = self._weight(lang, letter)
            if weight is None:
                continue
            score = weight // 2
            if self._dampened(lang, letter):
                score //= 2
            if best is None or score > best:
                best = score
        if best is None:
            return IMPLAUSIBILITY_PENALTY if self._is_non_latin(letter) else 0
        return best
