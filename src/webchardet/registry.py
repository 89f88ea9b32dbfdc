"""Encoding registry: the fixed candidate set and per-session fan-out.

``REGISTRY`` lists every encoding the detector can report, in tie-break
priority order: when two candidates end with equal scores the one listed
first wins.  windows-1252 appears twice, once scored for Icelandic alone.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable

from webchardet.candidates import Candidate
from webchardet.candidates.cjk import (
    Big5Candidate,
    EucJpCandidate,
    EucKrCandidate,
    GbkCandidate,
    ShiftJisCandidate,
)
from webchardet.candidates.iso2022jp import Iso2022JpCandidate
from webchardet.candidates.singlebyte import (
    ArabicFrenchCandidate,
    CaselessCandidate,
    LatinCandidate,
    LogicalHebrewCandidate,
    NonLatinCasedCandidate,
    VisualHebrewCandidate,
)
from webchardet.enums import CJK_FAMILIES, SINGLE_BYTE_FAMILIES, Family, Tld
from webchardet.models import SingleByteData, get_single_byte_data

logger = logging.getLogger(__name__)

_WESTERN = ("de", "fr", "es", "it", "pt", "nl", "sv", "da", "no", "fi", "ca")
_CENTRAL_EUROPEAN = ("pl", "cs", "sk", "hu", "sl", "hr", "ro")
_BALTIC = ("lt", "lv", "et")
_CYRILLIC = ("ru", "uk", "be", "bg", "sr", "mk")
_EAST_SLAVIC = ("ru", "uk", "be")


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingInfo:
    """Static metadata for one detectable encoding.

    :param name: The WHATWG name reported to callers.
    :param family: The detector family that scores it.
    :param python_codec: Codec used to build its table or map its sequences.
    :param tld: The language family whose TLDs prefer it in a tie.
    :param languages: Language codes its single-byte table is scored for.
    """

    name: str
    family: Family
    python_codec: str
    tld: Tld
    languages: tuple[str, ...] = ()

    @property
    def is_single_byte(self) -> bool:
        return self.family in SINGLE_BYTE_FAMILIES


REGISTRY: tuple[EncodingInfo, ...] = (
    EncodingInfo("windows-1252", Family.LATIN, "cp1252", Tld.WESTERN, _WESTERN),
    EncodingInfo(
        "windows-1251", Family.NON_LATIN_CASED, "cp1251", Tld.CYRILLIC, _CYRILLIC
    ),
    EncodingInfo("shift_jis", Family.SHIFT_JIS, "cp932", Tld.JAPANESE),
    EncodingInfo("gbk", Family.GBK, "gb18030", Tld.SIMPLIFIED),
    EncodingInfo("euc-kr", Family.EUC_KR, "cp949", Tld.KOREAN),
    EncodingInfo("big5", Family.BIG5, "big5hkscs", Tld.TRADITIONAL),
    EncodingInfo("euc-jp", Family.EUC_JP, "euc_jp", Tld.JAPANESE),
    EncodingInfo("iso-2022-jp", Family.ISO_2022_JP, "iso2022_jp", Tld.JAPANESE),
    EncodingInfo(
        "windows-1250", Family.LATIN, "cp1250", Tld.CENTRAL_EUROPEAN, _CENTRAL_EUROPEAN
    ),
    EncodingInfo(
        "windows-1256", Family.ARABIC_FRENCH, "cp1256", Tld.ARABIC, ("ar", "fa", "fr")
    ),
    # þ and ð never pair with the other western letters
    EncodingInfo("windows-1252", Family.LATIN, "cp1252", Tld.WESTERN, ("is",)),
    EncodingInfo("windows-1253", Family.NON_LATIN_CASED, "cp1253", Tld.GREEK, ("el",)),
    EncodingInfo("windows-1254", Family.LATIN, "cp1254", Tld.TURKISH, ("tr",)),
    EncodingInfo(
        "windows-1255", Family.LOGICAL_HEBREW, "cp1255", Tld.HEBREW, ("he",)
    ),
    EncodingInfo("windows-874", Family.CASELESS, "cp874", Tld.THAI, ("th",)),
    EncodingInfo("windows-1257", Family.LATIN, "cp1257", Tld.BALTIC, _BALTIC),
    EncodingInfo("windows-1258", Family.LATIN, "cp1258", Tld.VIETNAMESE, ("vi",)),
    EncodingInfo(
        "iso-8859-2", Family.LATIN, "iso8859_2", Tld.CENTRAL_EUROPEAN, _CENTRAL_EUROPEAN
    ),
    EncodingInfo("iso-8859-7", Family.NON_LATIN_CASED, "iso8859_7", Tld.GREEK, ("el",)),
    EncodingInfo("koi8-u", Family.NON_LATIN_CASED, "koi8_u", Tld.CYRILLIC, _EAST_SLAVIC),
    EncodingInfo("ibm866", Family.NON_LATIN_CASED, "cp866", Tld.CYRILLIC, _EAST_SLAVIC),
    EncodingInfo(
        "iso-8859-5", Family.NON_LATIN_CASED, "iso8859_5", Tld.CYRILLIC, _CYRILLIC
    ),
    EncodingInfo("iso-8859-6", Family.CASELESS, "iso8859_6", Tld.ARABIC, ("ar",)),
    EncodingInfo(
        "iso-8859-8", Family.VISUAL_HEBREW, "iso8859_8", Tld.HEBREW, ("he",)
    ),
    EncodingInfo("iso-8859-13", Family.LATIN, "iso8859_13", Tld.BALTIC, _BALTIC),
    EncodingInfo("iso-8859-4", Family.LATIN, "iso8859_4", Tld.BALTIC, _BALTIC),
)

# an encoding listed twice is known by its first entry
_INFO_BY_NAME: dict[str, EncodingInfo] = {}
_PRIORITY: dict[str, int] = {}
for _index, _info in enumerate(REGISTRY):
    _INFO_BY_NAME.setdefault(_info.name, _info)
    _PRIORITY.setdefault(_info.name, _index)
del _index, _info


def get_encoding_info(name: str) -> EncodingInfo:
    """Return the metadata for *name*.

    :raises KeyError: If *name* is not a detectable encoding.
    """
    return _INFO_BY_NAME[name]


def priority(name: str) -> int:
    """Return the tie-break position of *name*; lower wins."""
    return _PRIORITY[name]


def _table(info: EncodingInfo, **kwargs: bool) -> SingleByteData:
    return get_single_byte_data(
        info.name,
        info.python_codec,
        info.languages,
        latin=info.family is Family.LATIN,
        **kwargs,
    )


_FACTORIES: dict[Family, Callable[[EncodingInfo], Candidate]] = {
    Family.LATIN: lambda info: LatinCandidate(info.name, _table(info)),
    Family.NON_LATIN_CASED: lambda info: NonLatinCasedCandidate(
        info.name, _table(info), all_caps_penalty=info.name == "koi8-u"
    ),
    Family.CASELESS: lambda info: CaselessCandidate(info.name, _table(info)),
    Family.ARABIC_FRENCH: lambda info: ArabicFrenchCandidate(info.name, _table(info)),
    Family.LOGICAL_HEBREW: lambda info: LogicalHebrewCandidate(
        info.name, _table(info, punctuation=True)
    ),
    Family.VISUAL_HEBREW: lambda info: VisualHebrewCandidate(
        info.name, _table(info, punctuation=True, visual=True)
    ),
    Family.SHIFT_JIS: lambda info: ShiftJisCandidate(info.name),
    Family.EUC_JP: lambda info: EucJpCandidate(info.name),
    Family.EUC_KR: lambda info: EucKrCandidate(info.name),
    Family.BIG5: lambda info: Big5Candidate(info.name),
    Family.GBK: lambda info: GbkCandidate(info.name),
    Family.ISO_2022_JP: lambda info: Iso2022JpCandidate(info.name),
}


def create_candidate(info: EncodingInfo) -> Candidate:
    """Instantiate a fresh candidate for *info*.

    :raises ValueError: If a single-byte *info* names no languages to score.
    """
    if info.is_single_byte and not info.languages:
        msg = f"single-byte encoding {info.name!r} has no languages to score"
        raise ValueError(msg)
    return _FACTORIES[info.family](info)


class CandidateRegistry:
    """Per-session set of candidates, one for every entry of ``REGISTRY``.

    Bytes are fanned out to the candidates that are still alive; a
    candidate that has been ruled out is skipped for the rest of the
    session.
    """

    def __init__(self, infos: tuple[EncodingInfo, ...] = REGISTRY) -> None:
        self.infos = infos
        self.candidates: tuple[Candidate, ...] = tuple(
            create_candidate(info) for info in infos
        )
        self._bytes_seen = 0
        self._alive_count = len(self.candidates)

    def feed(self, data: bytes) -> None:
        for candidate in self.candidates:
            if candidate.is_alive():
                candidate.feed(data)
        self._bytes_seen += len(data)
        self._log_eliminations()

    def finish(self) -> None:
        for candidate in self.candidates:
            candidate.finish()
        self._log_eliminations()

    def alive(self) -> list[Candidate]:
        return [c for c in self.candidates if c.is_alive()]

    def only_cjk_left(self) -> bool:
        """Whether a single multi-byte CJK candidate is all that remains."""
        alive = [
            info
            for info, candidate in zip(self.infos, self.candidates)
            if candidate.is_alive()
        ]
        return len(alive) == 1 and alive[0].family in CJK_FAMILIES

    def _log_eliminations(self) -> None:
        count = len(self.alive())
        if count != self._alive_count:
            logger.debug(
                "%d of %d candidates alive after %d bytes",
                count,
                len(self.candidates),
                self._bytes_seen,
            )
            self._alive_count = count
