"""
Free-window computation: the public entry point of the engine.

Busy spans come in as wall-clock strings, are normalized to same-day
intervals (splitting spans that wrap past midnight), subtracted from the
query range and formatted back to ``HH:MM`` strings.

The functions here never raise on bad data. An unparseable or inverted
range yields no free time; unparseable spans are skipped.
"""

import logging
from typing import Iterable, List

from .clock import MINUTES_PER_DAY, parse_time
from .interval_algebra import intervals_overlap, subtract_intervals
from .models import BusySpan, FreeWindow, Interval

logger = logging.getLogger(__name__)


def busy_span_to_intervals(span: BusySpan) -> List[Interval]:
    """
    Normalize one busy span to zero, one or two same-day intervals.

    A span ending before it starts wraps past midnight and is split into
    ``[start, 1440)`` and ``[0, end)``. Zero-width spans yield nothing.
    """
    start = parse_time(span.start_time)
    end = parse_time(span.end_time)

    if start is None or end is None:
        logger.debug("Skipping busy span with unparseable time: %r", span)
        return []

    if end > start:
        return [Interval(start=start, end=end)]

    if end < start:
        intervals = [Interval(start=start, end=MINUTES_PER_DAY)]
        # A span ending exactly at midnight has no morning part.
        if end > 0:
            intervals.append(Interval(start=0, end=end))
        return intervals

    logger.debug("Skipping zero-width busy span: %r", span)
    return []


def compute_free_time_windows(
    busy: Iterable[BusySpan],
    range_start: str,
    range_end: str,
) -> List[FreeWindow]:
    """
    Compute the free windows inside ``[range_start, range_end)``.

    Args:
        busy: Busy spans for the day, in any order, possibly overlapping
        range_start: Start of the search window (``HH:MM``)
        range_end: End of the search window (``HH:MM``)

    Returns:
        Free windows in ascending order; empty if the range is invalid
    """
    start = parse_time(range_start)
    end = parse_time(range_end)
    if start is None or end is None or end <= start:
        logger.debug(
            "No usable range %r - %r, returning no free time",
            range_start,
            range_end,
        )
        return []

    busy_intervals: List[Interval] = []
    for span in busy:
        busy_intervals.extend(busy_span_to_intervals(span))

    free = subtract_intervals(Interval(start=start, end=end), busy_intervals)
    return [FreeWindow.from_interval(interval) for interval in free]


def find_conflicts(candidate: BusySpan, busy: Iterable[BusySpan]) -> List[BusySpan]:
    """
    Return the busy spans that overlap ``candidate``.

    Both sides are normalized the same way as in ``compute_free_time_windows``,
    so overnight spans are compared piecewise. Unparseable spans never
    conflict.
    """
    candidate_intervals = busy_span_to_intervals(candidate)
    if not candidate_intervals:
        return []

    conflicts: List[BusySpan] = []
    for span in busy:
        span_intervals = busy_span_to_intervals(span)
        if any(
            intervals_overlap(mine, theirs)
            for mine in candidate_intervals
            for theirs in span_intervals
        ):
            conflicts.append(span)

    return conflicts
