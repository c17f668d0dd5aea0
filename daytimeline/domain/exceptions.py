"""
Domain-specific exception hierarchy for the day timeline application.

The interval engine itself never raises; these are used by strict mode and
by the layers around the engine (configuration, busy-span sources, CLI).
"""


class DayTimelineError(Exception):
    """Base class for all application-level errors."""


class InvalidTimeError(DayTimelineError, ValueError):
    """Raised when a wall-clock value is rejected in strict mode."""


class BusyDataError(DayTimelineError):
    """Raised when busy spans cannot be loaded or have the wrong shape."""


class ConfigError(DayTimelineError, ValueError):
    """Raised when the configuration file is missing or invalid."""
