"""
Wall-clock time representation.

A time of day is an integer number of minutes since local midnight in the
range 0..1440, where 1440 marks the end of the day.
"""

import math
import re

import pendulum

from .exceptions import InvalidTimeError

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$", re.ASCII)
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


def parse_time(raw: object) -> int | None:
    """
    Parse ``H:MM``, ``HH:MM`` or ``HH:MM:SS`` into minutes since midnight.

    Seconds are accepted but dropped. Returns None for anything that is not
    a string, is blank, does not match, or has an hour/minute out of range.
    """
    if not isinstance(raw, str):
        return None

    trimmed = raw.strip()
    if not trimmed:
        return None

    match = _TIME_PATTERN.match(trimmed)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        return None

    return hours * 60 + minutes


def parse_time_strict(raw: object) -> int:
    """Like ``parse_time`` but raises InvalidTimeError instead of returning None."""
    minutes = parse_time(raw)
    if minutes is None:
        if raw is not None and not isinstance(raw, str):
            raise InvalidTimeError(
                f"Invalid time of day: {raw!r} (expected a quoted 'HH:MM' string)"
            )
        raise InvalidTimeError(f"Invalid time of day: {raw!r} (expected HH:MM)")
    return minutes


def clamp_minutes(value: float) -> float:
    """Constrain a minute count to the 0..1440 day range."""
    return max(0, min(MINUTES_PER_DAY, value))


def whole_minutes(value: float) -> int:
    """Clamp to the day and round half up to a whole minute. NaN becomes 0."""
    if math.isnan(value):
        return 0
    return math.floor(clamp_minutes(value) + 0.5)


def format_time(minutes: float) -> str:
    """
    Format a minute count as zero-padded ``HH:MM``.

    The value is clamped to the day and rounded to a whole minute first.
    1440 formats as "00:00"; callers that care about end-of-day have to look
    at the minute count, not the string.
    """
    total = whole_minutes(minutes)
    hours = (total // 60) % 24
    return f"{hours:02d}:{total % 60:02d}"


def day_of_week_from_date(raw: object) -> int | None:
    """
    Return the weekday of a ``YYYY-MM-DD`` date, 0=Monday ... 6=Sunday.

    Returns None if the value is not a valid calendar date.
    """
    if not isinstance(raw, str):
        return None

    trimmed = raw.strip()
    if not _DATE_PATTERN.match(trimmed):
        return None

    try:
        date = pendulum.from_format(trimmed, "YYYY-MM-DD")
    except ValueError:
        return None

    return int(date.day_of_week)
