"""Error types raised by numstats."""
from __future__ import annotations

__all__: list[str] = [
    "NumStatsError",
    "ResourceUnavailable",
    "EmptyInputError",
    "StatisticOverflowError",
]


class NumStatsError(Exception):
    """Base class for numstats errors."""


class ResourceUnavailable(NumStatsError, OSError):
    """The resource behind a number source could not be accessed."""

    def __init__(self, resource: str, reason: str | None = None) -> None:
        self.resource = resource
        self.reason = reason
        message = f"number source {resource!r} is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyInputError(NumStatsError, ValueError):
    """A statistic was requested over zero values."""

    def __init__(self, statistic: str) -> None:
        self.statistic = statistic
        super().__init__(f"cannot compute {statistic} of an empty sequence")


class StatisticOverflowError(NumStatsError, ArithmeticError):
    """The statistic cannot be represented as a float."""

    def __init__(self, statistic: str) -> None:
        self.statistic = statistic
        super().__init__(f"{statistic} is too large to represent as a float")
