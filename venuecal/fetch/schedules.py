"""Fetch a venue's schedules with their events and venues embedded."""
from __future__ import annotations

from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger

from venuecal.entities.models import GetSchedules
from venuecal.fetch.fetcher import fetch_text
from venuecal.fetch.session import FetchSession
from venuecal.observability.metrics import MetricsRegistry
from venuecal.parse.payload import load_schedules

LOGGER = structlog.get_logger(__name__)

SCHEDULES_PATH = "services/entities/v1/schedules"
INCLUDE = "events,venues"


async def get_schedules(
    session: FetchSession,
    language: str,
    venue_id: str,
    *,
    metrics: Optional[MetricsRegistry] = None,
    logger: Optional[FilteringBoundLogger] = None,
) -> GetSchedules:
    log = logger or LOGGER
    params = {
        "venueIds[]": venue_id,
        "languages[]": language,
        "include": INCLUDE,
    }
    payload = await fetch_text(session, session.url(SCHEDULES_PATH), params=params, metrics=metrics)
    log.debug("schedules_payload", venue_id=venue_id, json=payload)

    schedules = load_schedules(payload, venue_id=venue_id)
    log.info(
        "schedules_loaded",
        venue_id=venue_id,
        schedules=len(schedules.schedules),
        events=len(schedules.included.events),
        venues=len(schedules.included.venues),
    )
    return schedules
