"""Resolve -> fetch -> project: the single operation behind every surface."""
from __future__ import annotations

from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger
from icalendar import Calendar

from venuecal.fetch.schedules import get_schedules
from venuecal.fetch.session import FetchSession
from venuecal.fetch.venue import get_venue_id
from venuecal.observability.metrics import MetricsRegistry, record_duration
from venuecal.observability.tracing import clear_context, set_context
from venuecal.render.calendar import event_calendar

LOGGER = structlog.get_logger(__name__)


async def get_events(
    session: FetchSession,
    language: str,
    short_id: str,
    *,
    metrics: Optional[MetricsRegistry] = None,
    logger: Optional[FilteringBoundLogger] = None,
) -> Calendar:
    """Build the calendar of a venue's schedules for one language."""
    log = logger or LOGGER
    metrics = metrics if metrics is not None else MetricsRegistry()
    set_context(language=language, short_id=short_id)
    try:
        with record_duration(metrics, "run_duration_ms"):
            venue_id = await get_venue_id(session, language, short_id, metrics=metrics, logger=log)
            schedules = await get_schedules(session, language, venue_id, metrics=metrics, logger=log)
            return event_calendar(
                language,
                schedules,
                host=session.host,
                metrics=metrics,
                logger=log,
            )
    finally:
        clear_context()
