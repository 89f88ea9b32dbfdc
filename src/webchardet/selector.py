"""Pick the winning encoding from the candidates that survived the stream."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from webchardet.candidates import Candidate
from webchardet.enums import Tld
from webchardet.registry import get_encoding_info, priority

logger = logging.getLogger(__name__)

#: Reported when every candidate has been ruled out.
FALLBACK_ENCODING = "windows-1252"

LOGICAL_HEBREW = "windows-1255"
VISUAL_HEBREW = "iso-8859-8"


def tie_break_rank(encoding: str, tld: Tld = Tld.GENERIC) -> tuple[int, int]:
    """Return the sort key that orders candidates with equal scores.

    Encodings whose language family matches *tld* come first; within each
    group the fixed registry priority applies.
    """
    hinted = tld is not Tld.GENERIC and get_encoding_info(encoding).tld is tld
    return (0 if hinted else 1, priority(encoding))


def select_encoding(candidates: Iterable[Candidate], tld: Tld = Tld.GENERIC) -> str:
    """Return the name of the most plausible encoding.

    :param candidates: Every candidate of the session, alive or not.
    :param tld: Language family used to break score ties.
    :returns: The winning encoding name, or :data:`FALLBACK_ENCODING` when
        nothing survived.
    """
    alive = [c for c in candidates if c.is_alive()]
    if not alive:
        logger.debug("no candidate survived, falling back to %s", FALLBACK_ENCODING)
        return FALLBACK_ENCODING
    if len(alive) == 1:
        return alive[0].encoding

    by_name = {c.encoding: c for c in alive}
    ranked = sorted(
        (c for c in alive if c.encoding != VISUAL_HEBREW),
        key=lambda c: (-c.score(), tie_break_rank(c.encoding, tld)),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "ranking (tld=%s): %s",
            tld.value,
            ", ".join(f"{c.encoding}={c.score()}" for c in ranked),
        )

    visual = by_name.get(VISUAL_HEBREW)
    best = ranked[0]
    if visual is not None and visual.score() > best.score():
        logical = by_name.get(LOGICAL_HEBREW)
        logical_punctuation = logical.plausible_punctuation if logical else 0
        if visual.plausible_punctuation > logical_punctuation:
            return VISUAL_HEBREW
    return best.encoding
