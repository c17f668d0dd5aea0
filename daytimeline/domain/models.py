"""
Domain models for the day timeline.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from .clock import format_time, whole_minutes


@dataclass(frozen=True)
class Interval:
    """
    Immutable half-open range ``[start, end)`` in minutes since midnight.

    Invariant: start must be before end. Raw pairs that may be empty or
    inverted go through ``clamp_interval``, which drops them instead of
    raising.
    """
    start: float
    end: float

    def __post_init__(self):
        if not self.end > self.start:
            raise ValueError(f"Start {self.start} must be before end {self.end}")

    def duration_minutes(self) -> float:
        """Return the length in minutes."""
        return self.end - self.start

    def __str__(self) -> str:
        return f"{format_time(self.start)}-{format_time(self.end)}"


@dataclass(frozen=True)
class BusySpan:
    """
    A caller-supplied commitment with optional wall-clock endpoints.

    Either endpoint may be None or unparseable; such spans are discarded.
    Non-string values read from a file (YAML turns an unquoted 10:30 into
    630) are kept as-is so strict mode can report them.
    """
    start_time: Any
    end_time: Any

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BusySpan":
        """
        Build a span from a mapping using ``start_time``/``end_time`` or the
        camel-cased ``startTime``/``endTime`` keys.
        """
        start = data.get("start_time", data.get("startTime"))
        end = data.get("end_time", data.get("endTime"))
        return cls(start_time=start, end_time=end)


@dataclass(frozen=True)
class FreeWindow:
    """A free window formatted as ``HH:MM`` strings."""
    start_time: str
    end_time: str
    start_minutes: int = field(compare=False)
    end_minutes: int = field(compare=False)

    @classmethod
    def from_interval(cls, interval: Interval) -> "FreeWindow":
        return cls(
            start_time=format_time(interval.start),
            end_time=format_time(interval.end),
            start_minutes=whole_minutes(interval.start),
            end_minutes=whole_minutes(interval.end),
        )

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        return self.end_minutes - self.start_minutes

    def to_dict(self) -> dict[str, str]:
        return {"start_time": self.start_time, "end_time": self.end_time}

    def format_display(self) -> str:
        """Format: HH:MM – HH:MM (N min)"""
        return f"{self.start_time} – {self.end_time} ({self.duration_minutes()} min)"
