"""Projection of a schedules envelope into an iCalendar feed."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

import structlog
from structlog.typing import FilteringBoundLogger
from icalendar import Calendar, Event

from venuecal.entities.models import GetSchedules, Schedule, Venue
from venuecal.errors import RenderError
from venuecal.observability.metrics import MetricsRegistry
from venuecal.render.markup import render_description

LOGGER = structlog.get_logger(__name__)

PRODID = "-//venuecal//GoOut venue events//EN"
PUBLIC = "PUBLIC"


@dataclass(slots=True)
class CalendarEntry:
    """Render-ready calendar event for one visible schedule."""

    schedule_id: int
    summary: str
    description: str
    start: datetime
    end: datetime
    url: str
    location: str
    visibility: str = PUBLIC


def _location(language: str, venue: Venue) -> str:
    locale = venue.locales.get(language)
    if locale is None:
        return venue.attributes.address
    return f"{locale.name}\n{venue.attributes.address}"


def _site_url(language: str, schedule: Schedule) -> str:
    locale = schedule.locales.get(language)
    return locale.site_url if locale is not None else ""


def project_schedules(
    language: str,
    schedules: GetSchedules,
    *,
    metrics: Optional[MetricsRegistry] = None,
    logger: Optional[FilteringBoundLogger] = None,
) -> List[CalendarEntry]:
    """Return one entry per renderable schedule, in envelope order.

    Postponed schedules and schedules whose venue or event does not resolve
    are skipped without error. A missing translation yields empty text.
    """
    log = logger or LOGGER
    metrics = metrics if metrics is not None else MetricsRegistry()
    entries: List[CalendarEntry] = []

    for schedule in schedules.schedules:
        metrics.incr("schedules_seen")
        if schedule.is_postponed_indefinitely:
            metrics.incr("skipped_postponed")
            log.debug("schedule_skipped", schedule_id=schedule.id, reason="postponed")
            continue

        rels = schedule.relationships
        venue = schedules.find_venue(rels.venue.id) if rels.venue is not None else None
        if venue is None:
            metrics.incr("skipped_missing_venue")
            log.debug("schedule_skipped", schedule_id=schedule.id, reason="venue")
            continue
        event = schedules.find_event(rels.event.id) if rels.event is not None else None
        if event is None:
            metrics.incr("skipped_missing_event")
            log.debug("schedule_skipped", schedule_id=schedule.id, reason="event")
            continue

        locale = event.locales.get(language)
        if locale is None:
            metrics.incr("missing_locale")
        summary = locale.name if locale is not None else ""
        description = locale.description if locale is not None else ""

        entries.append(
            CalendarEntry(
                schedule_id=schedule.id,
                summary=summary,
                description=render_description(description),
                start=schedule.attributes.start_at,
                end=schedule.attributes.end_at,
                url=_site_url(language, schedule),
                location=_location(language, venue),
            )
        )
        metrics.incr("schedules_emitted")

    return entries


def calendar_name(language: str, schedules: GetSchedules) -> Optional[str]:
    """Localized name of the first included venue, if it has one."""
    if not schedules.included.venues:
        return None
    locale = schedules.included.venues[0].locales.get(language)
    return locale.name if locale is not None else None


def _to_component(entry: CalendarEntry, *, host: str, stamp: datetime) -> Event:
    component = Event()
    component.add("uid", f"schedule-{entry.schedule_id}@{host}")
    component.add("dtstamp", stamp)
    component.add("summary", entry.summary)
    component.add("description", entry.description)
    # same instant in UTC; fixed-offset zones have no TZID a client can resolve
    component.add("dtstart", entry.start.astimezone(timezone.utc))
    component.add("dtend", entry.end.astimezone(timezone.utc))
    if entry.url:
        component.add("url", entry.url)
    component.add("location", entry.location)
    component.add("class", entry.visibility)
    return component


def assemble_calendar(entries: List[CalendarEntry], *, name: Optional[str], host: str) -> Calendar:
    """Wrap projected entries in a VCALENDAR container."""
    try:
        cal = Calendar()
        cal.add("prodid", PRODID)
        cal.add("version", "2.0")
        if name:
            cal.add("x-wr-calname", name)
        stamp = datetime.now(timezone.utc)
        for entry in entries:
            cal.add_component(_to_component(entry, host=host, stamp=stamp))
    except (AttributeError, TypeError, ValueError) as exc:
        raise RenderError(f"Failed to build calendar: {exc}") from exc
    return cal


def event_calendar(
    language: str,
    schedules: GetSchedules,
    *,
    host: str = "goout.net",
    metrics: Optional[MetricsRegistry] = None,
    logger: Optional[FilteringBoundLogger] = None,
) -> Calendar:
    entries = project_schedules(language, schedules, metrics=metrics, logger=logger)
    return assemble_calendar(entries, name=calendar_name(language, schedules), host=host)


def serialize_calendar(cal: Calendar) -> str:
    try:
        return cal.to_ical().decode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RenderError(f"Failed to serialize calendar: {exc}") from exc
