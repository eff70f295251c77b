"""Tracing helpers for the fetch and render stages."""
from __future__ import annotations

import contextlib
import time
from typing import Iterator, Optional

import structlog
from structlog.contextvars import bind_contextvars, unbind_contextvars


def _logger():
    return structlog.get_logger("venuecal.trace")


def set_context(*, language: str, short_id: str) -> None:
    bind_contextvars(language=language, short_id=short_id)
    _logger().debug("trace_context", language=language, short_id=short_id)


def clear_context() -> None:
    unbind_contextvars("language", "short_id")


@contextlib.contextmanager
def span(*, name: str, url: Optional[str] = None) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        _logger().info("trace_span", span=name, url=url, elapsed_ms=elapsed_ms)


def log_fetch_result(*, url: str, status: int, bytes_read: int, elapsed_ms: int) -> None:
    _logger().info(
        "fetch_result",
        url=url,
        status=status,
        bytes=bytes_read,
        elapsed_ms=elapsed_ms,
    )


def log_fetch_error(*, url: str, reason: str) -> None:
    _logger().warning("fetch_error", url=url, reason=reason)
