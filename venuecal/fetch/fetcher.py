"""Single-attempt fetching primitive shared by both upstream calls."""
from __future__ import annotations

import time
from typing import Dict, Optional

import httpx

from venuecal.errors import TransportError
from venuecal.fetch.session import FetchSession
from venuecal.observability.metrics import MetricsRegistry
from venuecal.observability.tracing import log_fetch_error, log_fetch_result, span


async def fetch_text(
    session: FetchSession,
    url: str,
    *,
    params: Optional[Dict[str, str]] = None,
    metrics: Optional[MetricsRegistry] = None,
) -> str:
    """Fetch ``url`` once and return the decoded body.

    Malformed URLs, connection failures, timeouts and non-2xx statuses all
    raise :class:`TransportError`. There is no retry.
    """
    try:
        with span(name="fetch", url=url):
            start = time.perf_counter()
            response = await session.get(url, params=params)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        log_fetch_result(
            url=str(response.url),
            status=response.status_code,
            bytes_read=len(response.content or b""),
            elapsed_ms=elapsed_ms,
        )
        if metrics is not None:
            metrics.incr("pages_fetched")
            metrics.incr(f"http_{response.status_code // 100}xx")
        response.raise_for_status()
        return response.text
    except httpx.HTTPStatusError as exc:
        log_fetch_error(url=url, reason=str(exc))
        raise TransportError(
            f"Upstream returned {exc.response.status_code} for {url}", url=url
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        log_fetch_error(url=url, reason=str(exc))
        raise TransportError(f"Request to {url} failed: {exc!r}", url=url) from exc
