"""
Domain layer - the day timeline engine, pure logic without I/O.
"""

from .clock import (
    MINUTES_PER_DAY,
    day_of_week_from_date,
    format_time,
    parse_time,
    parse_time_strict,
)
from .free_windows import busy_span_to_intervals, compute_free_time_windows, find_conflicts
from .interval_algebra import clamp_interval, intervals_overlap, merge_intervals, subtract_intervals
from .models import BusySpan, FreeWindow, Interval

__all__ = [
    "MINUTES_PER_DAY",
    "BusySpan",
    "FreeWindow",
    "Interval",
    "busy_span_to_intervals",
    "clamp_interval",
    "compute_free_time_windows",
    "day_of_week_from_date",
    "find_conflicts",
    "format_time",
    "intervals_overlap",
    "merge_intervals",
    "parse_time",
    "parse_time_strict",
    "subtract_intervals",
]
