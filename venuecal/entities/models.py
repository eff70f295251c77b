"""Pydantic models for the GoOut schedules payload.

Payload keys are camelCase and map onto snake_case attributes. Validation is
strict about JSON types and ignores keys the model does not declare, so the
upstream schema can grow without breaking the feed. Relationships are weak
``Rel`` references resolved through :class:`GetSchedules` lookups.
"""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

POSTPONED_INDEFINITELY = "postponed_indefinitely"


class Entity(BaseModel):
    """Shared configuration for every payload model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
        frozen=True,
        extra="ignore",
    )


class Rel(Entity):
    """Reference to another entity in the same payload."""

    id: int
    kind: str = Field(alias="type")


# Schedule


class ScheduleAttrs(Entity):
    state: str
    start_at: AwareDatetime
    end_at: AwareDatetime
    has_time: bool
    has_time_end: bool
    doors_time_at: Optional[str] = None
    announced_at: str
    published_at: str
    is_permanent: bool
    external_tickets_url: Optional[str] = None
    external_stream_url: Optional[str] = None
    parsed_at: Optional[str] = None
    tags: List[str]
    source_urls: List[str]
    ticketing_state: str
    pricing: Optional[str] = None
    updated_at: str
    currency: str


class ScheduleRels(Entity):
    contacts: List[Rel]
    sale: Optional[Rel] = None
    venue: Optional[Rel] = None
    event: Optional[Rel] = None
    parent: Optional[Rel] = None
    parent_inner_schedules: List[Rel]
    inner_schedules: List[Rel]
    duplicate_schedules: List[Rel]


class ScheduleLocale(Entity):
    stage: Optional[str] = None
    site_url: str


class Schedule(Entity):
    """One dated occurrence of an event at a venue."""

    id: int
    kind: str = Field(alias="type")
    url: str
    attributes: ScheduleAttrs
    relationships: ScheduleRels
    locales: Dict[str, ScheduleLocale]

    @property
    def is_postponed_indefinitely(self) -> bool:
        return POSTPONED_INDEFINITELY in self.attributes.tags


# Event


class EventAttrs(Entity):
    state: str
    main_category: str
    categories: List[str]
    # film/exhibition metadata, keywords and range are passed through untouched
    keywords: List[Any]
    tags: List[str]
    tags_manual: List[str]
    film_meta: Any
    exhibition_meta: Any
    minor_performers: List[str]
    recommendation: Optional[str] = None
    schedules_range: Any
    has_time_slots: bool


class EventRels(Entity):
    videos: List[Rel]
    images: List[Rel]
    performers: List[Rel]
    revision_parent: Optional[Rel] = None
    revisions: List[Rel]


class EventLocale(Entity):
    name: str
    note: str
    description: str
    meta_description: Optional[str] = None
    meta_title: Optional[str] = None


class Event(Entity):
    """The reusable subject behind one or more schedules."""

    id: int
    kind: str = Field(alias="type")
    url: str
    attributes: EventAttrs
    relationships: EventRels
    locales: Dict[str, EventLocale]


# Venue


class VenueAttrs(Entity):
    state: str
    main_category: str
    categories: List[str]
    address: str
    country_iso: str
    latitude: float
    longitude: float
    updated_at: str
    email: str
    phone: str
    url_facebook: Optional[str] = None
    source_url: Optional[str] = None


class VenueLocale(Entity):
    name: str
    description: str
    site_url: str
    meta_description: Optional[str] = None
    meta_title: Optional[str] = None


class Venue(Entity):
    """A physical location hosting schedules."""

    id: int
    kind: str = Field(alias="type")
    url: str
    attributes: VenueAttrs
    locales: Dict[str, VenueLocale]


# Envelope


class GetSchedulesInc(Entity):
    events: List[Event]
    schedules: List[Schedule]
    venues: List[Venue]


class GetSchedules(Entity):
    """Response envelope: primary schedules plus included side collections."""

    schedules: List[Schedule]
    included: GetSchedulesInc

    @cached_property
    def events_by_id(self) -> Dict[int, Event]:
        index: Dict[int, Event] = {}
        for event in self.included.events:
            index.setdefault(event.id, event)
        return index

    @cached_property
    def venues_by_id(self) -> Dict[int, Venue]:
        index: Dict[int, Venue] = {}
        for venue in self.included.venues:
            index.setdefault(venue.id, venue)
        return index

    def find_event(self, id: int) -> Optional[Event]:
        return self.events_by_id.get(id)

    def find_venue(self, id: int) -> Optional[Venue]:
        return self.venues_by_id.get(id)
