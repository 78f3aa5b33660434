"""Service settings read from environment variables."""
from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

__all__: list[str] = [
    "Settings",
]


@dataclass(frozen=True)
class Settings:
    source_path: str | None = None  # numbers file; None serves an empty in-memory source
    source_encoding: str = "utf-8"
    log_level: int = logging.INFO
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        # Fail at startup rather than on every request
        try:
            codecs.lookup(self.source_encoding)
        except LookupError:
            raise ValueError(f"unknown source encoding {self.source_encoding!r}") from None

    @classmethod
    def from_env(cls) -> "Settings":
        level_name = os.environ.get("NUMSTATS_LOG_LEVEL", "INFO").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level {level_name!r}")
        return cls(
            source_path=os.environ.get("NUMSTATS_SOURCE_PATH") or None,
            source_encoding=os.environ.get("NUMSTATS_SOURCE_ENCODING", "utf-8"),
            log_level=level,
            host=os.environ.get("NUMSTATS_HOST", "127.0.0.1"),
            port=int(os.environ.get("NUMSTATS_PORT", 8000)),
        )
