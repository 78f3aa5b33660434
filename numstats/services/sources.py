"""Number sources: anything with an async ``produce()`` returning a list of ints."""
from __future__ import annotations

import logging
from typing import Iterable, Protocol, runtime_checkable

import anyio

from numstats.errors import ResourceUnavailable
from numstats.services.parsing import parse_numbers

__all__: list[str] = [
    "NumberSource",
    "FileNumberSource",
    "InMemoryNumberSource",
    "RecordingNumberSource",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class NumberSource(Protocol):
    async def produce(self) -> list[int]:
        """
        Return the current integers of the underlying resource, in source order.
        Raises ResourceUnavailable if the resource cannot be accessed.
        """
        ...


class FileNumberSource:
    """Reads a newline-separated text file on every call."""

    def __init__(self, path: str | anyio.Path, encoding: str = "utf-8") -> None:
        self.path = anyio.Path(path)
        self.encoding = encoding

    async def produce(self) -> list[int]:
        try:
            text = await self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceUnavailable(str(self.path), str(exc)) from exc
        numbers = parse_numbers(text)
        logger.debug("Read %d numbers from %s", len(numbers), self.path)
        return numbers

    def __repr__(self) -> str:
        return f"FileNumberSource({str(self.path)!r})"


class InMemoryNumberSource:
    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self._numbers = list(numbers)

    def replace(self, numbers: Iterable[int]) -> None:
        self._numbers = list(numbers)

    async def produce(self) -> list[int]:
        # Callers may mutate what they get back
        return list(self._numbers)


class RecordingNumberSource:
    """
    Forwards to another source and records every call.

    ``call_count`` counts all calls, failed ones included.
    ``returns`` holds each successfully produced sequence, in call order.
    """

    def __init__(self, wrapped: NumberSource) -> None:
        self.wrapped = wrapped
        self.call_count = 0
        self.returns: list[list[int]] = []

    async def produce(self) -> list[int]:
        self.call_count += 1
        numbers = await self.wrapped.produce()
        self.returns.append(numbers)
        return numbers
