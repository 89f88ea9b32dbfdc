"""Map top-level domains to the language family they suggest."""

from __future__ import annotations

import logging

from webchardet.enums import Tld

logger = logging.getLogger(__name__)

_FAMILY_LABELS: dict[Tld, tuple[str, ...]] = {
    Tld.WESTERN: (
        "ad", "ar", "at", "au", "be", "bo", "br", "ca", "ch", "cl", "co",
        "cr", "cu", "de", "dk", "do", "ec", "es", "fi", "fo", "fr", "gl",
        "gt", "hn", "ie", "is", "it", "li", "lu", "mc", "mt", "mx", "ni",
        "nl", "no", "nz", "pa", "pe", "pr", "pt", "py", "se", "sm", "sv",
        "uk", "us", "uy", "va", "ve", "za",
    ),
    Tld.CENTRAL_EUROPEAN: ("ba", "cz", "hr", "hu", "pl", "ro", "si", "sk"),
    Tld.BALTIC: ("ee", "lt", "lv"),
    Tld.CYRILLIC: (
        "bg", "by", "kg", "kz", "mk", "mn", "rs", "ru", "su", "tj", "ua",
        "xn--p1ai", "рф", "xn--90ais", "бел", "xn--j1amh", "укр",
    ),
    Tld.GREEK: ("cy", "gr", "xn--qxam", "ελ"),
    Tld.TURKISH: ("az", "tr"),
    Tld.HEBREW: ("il",),
    Tld.ARABIC: (
        "ae", "bh", "dz", "eg", "iq", "ir", "jo", "kw", "lb", "ly", "ma",
        "om", "ps", "qa", "sa", "sd", "sy", "tn", "ye",
    ),
    Tld.THAI: ("th", "xn--o3cw4h", "ไทย"),
    Tld.VIETNAMESE: ("vn",),
    Tld.SIMPLIFIED: ("cn", "sg", "xn--fiqs8s", "中国"),
    Tld.TRADITIONAL: ("hk", "mo", "tw", "xn--kprw13d", "台灣"),
    Tld.JAPANESE: ("jp",),
    Tld.KOREAN: ("kp", "kr", "xn--3e0b707e", "한국"),
}

_LABEL_TO_FAMILY: dict[str, Tld] = {
    label: family for family, labels in _FAMILY_LABELS.items() for label in labels
}


def classify_tld(label: str | bytes) -> Tld:
    """Return the language family suggested by a top-level domain.

    *label* may be a bare label (``"jp"``) or a host name
    (``"www.example.co.jp"``); only the last label counts.  Matching is
    case-insensitive and ignores a trailing dot.

    :param label: The label or host name, as ``str`` or ASCII ``bytes``.
    :returns: The matching :class:`~webchardet.enums.Tld`, or ``Tld.GENERIC``
        when the label is unknown.
    """
    if isinstance(label, (bytes, bytearray)):
        try:
            label = bytes(label).decode("ascii")
        except UnicodeDecodeError:
            logger.debug("ignoring non-ASCII TLD bytes %r", label)
            return Tld.GENERIC
    if not isinstance(label, str):
        logger.debug("ignoring TLD hint of type %s", type(label).__name__)
        return Tld.GENERIC
    last = label.strip().rstrip(".").rsplit(".", 1)[-1].lower()
    family = _LABEL_TO_FAMILY.get(last)
    if family is None:
        if last:
            logger.debug("no language family for TLD %r", last)
        return Tld.GENERIC
    return family


def resolve_tld_hint(hint: Tld | str | bytes | None) -> Tld:
    """Normalise a caller-supplied hint to a :class:`Tld` member."""
    if hint is None:
        return Tld.GENERIC
    if isinstance(hint, Tld):
        return hint
    return classify_tld(hint)
