"""Media Fragment URI parsing (temporal dimension, NPT only).

Follows the W3C Media Fragments URI syntax for ``t=``:

    #t=10,20        -> start 10, end 20
    #t=npt:10,20    -> start 10, end 20
    #t=0:02:00,210  -> start 120, end 210
    #t=10           -> start 10
    #t=,20          -> end 20

Malformed or out-of-range values never raise; they yield ``None`` exactly
like a URI without a temporal fragment.
"""

import logging
import re

from mediafrag.models import TemporalWindow

logger = logging.getLogger(__name__)

_TEMPORAL_PARAM = re.compile(r"(?:^|&)t=([^&]*)")
_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_NPT_PREFIX = "npt:"


def parse_npt_time(value: str) -> float | None:
    """Parse an NPT time value into seconds.

    Accepts plain seconds ("10", "10.5"), MM:SS ("02:30", "02:30.5") and
    HH:MM:SS ("1:02:30", "1:02:30.5"). Minutes and seconds must be below 60;
    hours are unbounded. Returns None for anything else.
    """
    value = value.strip()
    if not value:
        return None

    if _NUMBER.fullmatch(value):
        return float(value)

    parts = value.split(":")
    if len(parts) not in (2, 3):
        return None
    if not all(_NUMBER.fullmatch(p) for p in parts):
        return None

    numbers = [float(p) for p in parts]
    if len(numbers) == 2:
        hours = 0.0
        minutes, seconds = numbers
    else:
        hours, minutes, seconds = numbers

    if hours < 0 or not 0 <= minutes < 60 or not 0 <= seconds < 60:
        return None
    return hours * 3600 + minutes * 60 + seconds


def _resolve_bound(part: str, name: str, raw: str) -> tuple[bool, float | None]:
    """Return (ok, seconds) for one side of a ``start,end`` pair.

    An empty part is a legitimately absent bound; an unparsable one is not.
    """
    part = part.strip()
    if not part:
        return True, None
    seconds = parse_npt_time(part)
    if seconds is None:
        logger.debug("Rejecting t=%r: unparsable %s time %r", raw, name, part)
        return False, None
    if seconds < 0:
        logger.debug("Rejecting t=%r: negative %s time", raw, name)
        return False, None
    return True, seconds


def parse_media_fragment(uri: str) -> TemporalWindow | None:
    """Extract the temporal window from the fragment of *uri*.

    When ``t=`` appears several times the last occurrence is selected first
    and validated afterwards, so a malformed trailing ``t=`` discards the
    result even if an earlier one was well-formed.
    """
    hash_index = uri.find("#")
    if hash_index == -1:
        return None
    fragment = uri[hash_index + 1:]

    matches = _TEMPORAL_PARAM.findall(fragment)
    if not matches or not matches[-1]:
        return None
    raw = matches[-1]

    value = raw[len(_NPT_PREFIX):] if raw.startswith(_NPT_PREFIX) else raw
    parts = value.split(",")
    if len(parts) > 2:
        logger.debug("Rejecting t=%r: expected at most one ',' delimiter", raw)
        return None

    ok, start = _resolve_bound(parts[0], "start", raw)
    if not ok:
        return None
    end = None
    if len(parts) == 2:
        ok, end = _resolve_bound(parts[1], "end", raw)
        if not ok:
            return None

    if start is None and end is None:
        return None
    if start is None and end == 0:
        logger.debug("Rejecting t=%r: zero end with no start", raw)
        return None
    if start is not None and end is not None and start >= end:
        logger.debug("Rejecting t=%r: start %s is not before end %s", raw, start, end)
        return None

    return TemporalWindow(start=start, end=end)
