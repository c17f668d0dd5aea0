"""
Application service for answering "when am I free today?".

The service pulls busy spans from a source adapter and delegates the actual
free-time calculation to the domain engine. This keeps the CLI thin and lets
tests swap in a stub source via a simple protocol.
"""

from __future__ import annotations

import logging
from typing import List, Protocol, Sequence

from ..domain.clock import parse_time_strict
from ..domain.exceptions import InvalidTimeError
from ..domain.free_windows import compute_free_time_windows, find_conflicts
from ..domain.models import BusySpan, FreeWindow

logger = logging.getLogger(__name__)


class BusySourceProtocol(Protocol):
    """Protocol describing the busy-span source needed by the service."""

    def get_busy_spans(self) -> List[BusySpan]:
        """Return the busy spans for the day being planned."""


class AvailabilityService:
    """
    Orchestrates busy-span retrieval and free-window calculation.

    By default bad input degrades to "no free time" like the engine does.
    With ``strict=True`` the range and every busy span are validated first
    and the first bad value raises InvalidTimeError.
    """

    def __init__(self, busy_source: BusySourceProtocol, *, strict: bool = False) -> None:
        self._busy_source = busy_source
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def find_free_windows(
        self,
        range_start: str,
        range_end: str,
        min_duration_minutes: int = 0,
    ) -> List[FreeWindow]:
        """
        Fetch busy spans and compute free windows within the range.

        Windows shorter than ``min_duration_minutes`` are dropped.

        Raises:
            ValueError: If min_duration_minutes is negative
        """
        if min_duration_minutes < 0:
            raise ValueError("min_duration_minutes must not be negative")

        busy = self._busy_source.get_busy_spans()

        if self._strict:
            self._validate_range(range_start, range_end)
            self._validate_spans(busy)

        windows = compute_free_time_windows(busy, range_start, range_end)
        logger.debug(
            "Found %d free window(s) in %s - %s from %d busy span(s)",
            len(windows),
            range_start,
            range_end,
            len(busy),
        )

        return [
            window for window in windows
            if window.duration_minutes() >= min_duration_minutes
        ]

    def check_conflicts(self, candidate: BusySpan) -> List[BusySpan]:
        """Return the existing busy spans that a candidate span would overlap."""
        busy = self._busy_source.get_busy_spans()

        if self._strict:
            self._validate_spans([candidate])
            self._validate_spans(busy)

        return find_conflicts(candidate, busy)

    @staticmethod
    def _validate_range(range_start: str, range_end: str) -> None:
        start = parse_time_strict(range_start)
        end = parse_time_strict(range_end)
        if end <= start:
            raise InvalidTimeError(
                f"Range end {range_end} must be later than range start {range_start}"
            )

    @staticmethod
    def _validate_spans(spans: Sequence[BusySpan]) -> None:
        for span in spans:
            start = parse_time_strict(span.start_time)
            end = parse_time_strict(span.end_time)
            if start == end:
                raise InvalidTimeError(
                    f"Busy span {span.start_time} - {span.end_time} has zero length"
                )
