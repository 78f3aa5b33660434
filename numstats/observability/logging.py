"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys

DEFAULT_LEVEL = logging.INFO

def setup_logging(level: int = DEFAULT_LEVEL) -> None:
    """Configure standard Python logging for the service.

    Safe to call more than once; only the first call installs the handler,
    later calls just adjust the level.
    """
    root_logger = logging.getLogger()
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        root_logger.setLevel(level)
        return

    # Gunicorn-like brackets, same as the uvicorn access lines
    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # uvicorn installs its own handlers; send everything through the root instead
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(level)

    setup_logging._configured = True  # type: ignore[attr-defined]
