"""Structured logging helpers for ErrorMap."""

from __future__ import annotations

import logging
import os
import time
import uuid
from contextvars import ContextVar
from typing import Any, Optional

LOG_LEVEL_ENV = "ERRORMAP_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def _level_from_env(default: int) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV)
    if not raw:
        return default
    value = logging.getLevelName(raw.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return value if isinstance(value, int) else default


def configure_logging(level: Optional[int] = None) -> None:
    """
    Attach the package handler once. ``level`` wins over ``ERRORMAP_LOG_LEVEL``.
    """
    logger = logging.getLogger("errormap")
    if logger.handlers:
        if level is not None:
            logger.setLevel(level)
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else _level_from_env(logging.INFO))


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"errormap.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or str(uuid.uuid4())
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid


def clear_correlation_id() -> None:
    _correlation_id.set(None)


def time_call(name: str, logger: logging.Logger, *, detail: Any = None, threshold_ms: int = 100):
    start = time.monotonic()

    class Timer:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            elapsed_ms = (time.monotonic() - start) * 1000
            level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
            extra = {"detail": detail, "elapsed_ms": elapsed_ms}
            logger.log(level, "%s took %.2fms", name, elapsed_ms, extra=extra)

    return Timer()
