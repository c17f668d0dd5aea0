"""
Interval algebra over a single day.

Every function here is pure: inputs are never mutated and each stage builds
new tuples/lists. Invalid intervals are dropped rather than reported.

Example:
    Container: 09:00 - 17:00
    Blocked:   [10:00-11:00, 10:30-12:00, 14:00-15:00]
    Merged:    [10:00-12:00, 14:00-15:00]
    Free:      [09:00-10:00, 12:00-14:00, 15:00-17:00]
"""

import math
from typing import Iterable, List, Sequence, Tuple, Union

from .clock import clamp_minutes
from .models import Interval

IntervalLike = Union[Interval, Tuple[float, float]]


def _endpoints(interval: IntervalLike) -> Tuple[float, float]:
    if isinstance(interval, Interval):
        return interval.start, interval.end
    start, end = interval
    return start, end


def clamp_interval(interval: IntervalLike) -> Interval | None:
    """
    Clamp both endpoints into the day.

    Returns None if an endpoint is not finite or if nothing of positive
    length is left after clamping.
    """
    start, end = _endpoints(interval)
    if not (math.isfinite(start) and math.isfinite(end)):
        return None

    start = clamp_minutes(start)
    end = clamp_minutes(end)
    if end <= start:
        return None

    return Interval(start=start, end=end)


def merge_intervals(intervals: Iterable[IntervalLike]) -> List[Interval]:
    """
    Collapse intervals into a sorted list of disjoint intervals.

    Overlapping and touching intervals (next.start == current.end) are
    coalesced, so ``[0, 60)`` and ``[60, 120)`` become ``[0, 120)``.
    """
    valid = [
        clamped for clamped in (clamp_interval(i) for i in intervals)
        if clamped is not None
    ]
    if not valid:
        return []

    ordered = sorted(valid, key=lambda i: (i.start, i.end))
    merged: List[Interval] = []
    current_start, current_end = ordered[0].start, ordered[0].end

    for interval in ordered[1:]:
        if interval.start <= current_end:
            current_end = max(current_end, interval.end)
        else:
            merged.append(Interval(start=current_start, end=current_end))
            current_start, current_end = interval.start, interval.end

    merged.append(Interval(start=current_start, end=current_end))
    return merged


def _clip_to_container(
    interval: IntervalLike,
    container: Interval,
) -> Tuple[float, float]:
    """Clip an interval to the container bounds (may yield an empty pair)."""
    start, end = _endpoints(interval)
    return max(start, container.start), min(end, container.end)


def subtract_intervals(
    container: IntervalLike,
    blocked: Sequence[IntervalLike],
) -> List[Interval]:
    """
    Return the parts of ``container`` not covered by any blocked interval.

    Blocked intervals go through ``clamp_interval`` first, then are clipped
    to the container before merging, so only their overlapping portion
    counts. The result is sorted and disjoint, and together with the merged
    blocked set it rebuilds the container.
    """
    bounds = clamp_interval(container)
    if bounds is None:
        return []

    valid_blocked = (c for c in map(clamp_interval, blocked) if c is not None)
    merged_blocked = merge_intervals(
        _clip_to_container(b, bounds) for b in valid_blocked
    )
    if not merged_blocked:
        return [bounds]

    free: List[Interval] = []
    cursor = bounds.start

    for busy in merged_blocked:
        if busy.start > cursor:
            free.append(Interval(start=cursor, end=busy.start))
        cursor = max(cursor, busy.end)

    if cursor < bounds.end:
        free.append(Interval(start=cursor, end=bounds.end))

    return free


def intervals_overlap(first: IntervalLike, second: IntervalLike) -> bool:
    """Check if two half-open intervals share any time. Touching is not overlap."""
    first_start, first_end = _endpoints(first)
    second_start, second_end = _endpoints(second)
    return first_start < second_end and first_end > second_start
