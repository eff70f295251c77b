"""Resolve a short venue identifier to GoOut's numeric venue ID."""
from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import structlog
from structlog.typing import FilteringBoundLogger

from venuecal.errors import ResolutionError
from venuecal.fetch.fetcher import fetch_text
from venuecal.fetch.session import FetchSession
from venuecal.observability.metrics import MetricsRegistry
from venuecal.parse.venue_id import parse_venue_id, venue_marker

LOGGER = structlog.get_logger(__name__)


async def get_venue_id(
    session: FetchSession,
    language: str,
    short_id: str,
    *,
    metrics: Optional[MetricsRegistry] = None,
    logger: Optional[FilteringBoundLogger] = None,
) -> str:
    """Fetch the venue profile page and extract the numeric venue ID."""
    log = logger or LOGGER
    path = f"{quote(language, safe='')}/venue/{quote(short_id, safe='')}"
    html = await fetch_text(session, session.url(path), metrics=metrics)
    log.debug("venue_page", short_id=short_id, html=html)

    venue_id = parse_venue_id(html, venue_marker(session.host))
    if venue_id is None:
        raise ResolutionError(short_id)
    log.info("venue_resolved", short_id=short_id, venue_id=venue_id)
    return venue_id
