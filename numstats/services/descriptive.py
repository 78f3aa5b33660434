"""Descriptive statistics over integer sequences."""
from __future__ import annotations

import logging
import statistics
from dataclasses import dataclass
from typing import Callable, Literal, Sequence

from numstats.errors import EmptyInputError, StatisticOverflowError
from numstats.services.sources import NumberSource

__all__: list[str] = [
    "mean",
    "median",
    "mode",
    "Statistic",
    "StatisticResult",
    "StatisticsEngine",
]

logger = logging.getLogger(__name__)

Statistic = Literal["mean", "median", "mode"]


def mean(values: Sequence[int]) -> float:
    """
    Arithmetic mean of the values.
    Raises EmptyInputError if input is empty, StatisticOverflowError if the
    mean is beyond float range.
    """
    if not values:
        raise EmptyInputError("mean")
    try:
        return float(statistics.mean(values))
    except OverflowError as exc:
        raise StatisticOverflowError("mean") from exc


def median(values: Sequence[int]) -> float:
    """
    Middle value after sorting; the average of the two middle values for an even count.
    Raises EmptyInputError if input is empty, StatisticOverflowError if the
    median is beyond float range.
    """
    if not values:
        raise EmptyInputError("median")
    try:
        return float(statistics.median(values))
    except OverflowError as exc:
        raise StatisticOverflowError("median") from exc


def mode(values: Sequence[int]) -> list[int]:
    """
    All values sharing the highest frequency, in order of first occurrence.

    When every value occurs once, every distinct value is returned.
    Raises EmptyInputError if input is empty.
    """
    if not values:
        raise EmptyInputError("mode")
    return statistics.multimode(values)


REDUCERS: dict[str, Callable[[Sequence[int]], float | list[int]]] = {
    "mean": mean,
    "median": median,
    "mode": mode,
}


@dataclass(frozen=True)
class StatisticResult:
    statistic: Statistic
    value: float | list[int]
    count: int


class StatisticsEngine:
    """
    Computes statistics over whatever a number source currently produces.

    The source is injected and never opened or closed here. Every computation
    reads the source exactly once; nothing is cached between calls.
    """

    def __init__(self, source: NumberSource) -> None:
        self.source = source

    async def summarize(self, statistic: Statistic) -> StatisticResult:
        """Read the source once and reduce it, reporting how many values were used."""
        try:
            reduce = REDUCERS[statistic]
        except KeyError:
            raise ValueError(f"unknown statistic {statistic!r}") from None
        numbers = await self.source.produce()
        logger.debug("Computing %s over %d numbers", statistic, len(numbers))
        return StatisticResult(statistic, reduce(numbers), len(numbers))

    async def compute_mean(self) -> float:
        result = await self.summarize("mean")
        return result.value  # type: ignore[return-value]

    async def compute_median(self) -> float:
        result = await self.summarize("median")
        return result.value  # type: ignore[return-value]

    async def compute_mode(self) -> list[int]:
        result = await self.summarize("mode")
        return result.value  # type: ignore[return-value]
