"""Duration parsing for the timecode strings the platform API returns."""

from __future__ import annotations

import logging
import re

from outliers.errors import DurationParseError

logger = logging.getLogger(__name__)

# PT4M13S, P0D, P1DT2H, and the bare "4m13s" token form.
ISO_DURATION_PATTERN = re.compile(
    r"^(?:P(?:(?P<days>\d+)D)?T?)?"
    r"(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?$",
    re.IGNORECASE,
)
# 4:13 or 1:02:03
CLOCK_DURATION_PATTERN = re.compile(r"^(?:(\d+):)?(\d{1,2}):(\d{2})$")


def parse_duration_seconds(raw) -> int:
    """
    Parse a duration string into total seconds.

    Example: PT2M30S = 150 seconds, 1:02:03 = 3723 seconds.
    Raises DurationParseError for anything else.
    """
    if not isinstance(raw, str):
        raise DurationParseError(f"duration must be a string, got {type(raw).__name__}", raw)

    value = raw.strip()
    if not value:
        raise DurationParseError("duration is empty", raw)

    clock = CLOCK_DURATION_PATTERN.match(value)
    if clock:
        hours = int(clock.group(1) or 0)
        minutes = int(clock.group(2))
        seconds = int(clock.group(3))
        return hours * 3600 + minutes * 60 + seconds

    match = ISO_DURATION_PATTERN.match(value)
    if not match:
        raise DurationParseError(f"unrecognized duration format: {raw!r}", raw)

    days = int(match.group("days") or 0)
    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes") or 0)
    seconds = int(match.group("seconds") or 0)
    return days * 86400 + hours * 3600 + minutes * 60 + seconds


def duration_seconds(raw) -> int:
    """Pipeline-safe variant: unparseable durations count as 0 seconds."""
    try:
        return parse_duration_seconds(raw)
    except DurationParseError as exc:
        logger.debug("Treating duration as 0 seconds: %s", exc)
        return 0
