"""Error kinds raised by the feed pipeline.

Every error is terminal for the request that triggered it. Missing
relationships or translations inside the projector are data conditions,
not errors, and never surface here.
"""
from __future__ import annotations

from typing import Optional


class VenueCalError(Exception):
    """Base class for all pipeline failures."""


class TransportError(VenueCalError):
    """An outbound request failed: connection, timeout, status or decoding."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class ResolutionError(VenueCalError):
    """The venue profile page did not contain a numeric venue ID."""

    def __init__(self, short_id: str) -> None:
        super().__init__(f"Failed to parse venue ID for {short_id!r}")
        self.short_id = short_id


class SchemaError(VenueCalError):
    """The schedules payload did not match the entity model."""

    def __init__(self, *, venue_id: str, path: str, reason: str) -> None:
        super().__init__(f"Failed to parse schedules for {venue_id!r}: {path}: {reason}")
        self.venue_id = venue_id
        self.path = path
        self.reason = reason


class RenderError(VenueCalError):
    """The calendar could not be assembled or serialized."""
