"""Venue ID extraction from GoOut profile pages.

The profile page embeds the canonical venue URL inside a JSON string literal
with its slashes escaped as ``\\u002F``. The numeric ID is whatever follows
that literal up to the closing quote. This depends on undocumented page
markup and is the most likely thing to break when GoOut changes its frontend;
callers only go through :func:`parse_venue_id`.
"""
from __future__ import annotations

from typing import Optional

_ESCAPED_SLASH = "\\u002F"


def venue_marker(host: str) -> str:
    """Return the escaped ``https://<host>/venue/`` literal."""
    return f"https:{_ESCAPED_SLASH}{_ESCAPED_SLASH}{host}{_ESCAPED_SLASH}venue{_ESCAPED_SLASH}"


def parse_venue_id(html: str, marker: str) -> Optional[str]:
    """Return the text between the first ``marker`` and the next ``"``."""
    _, found, rest = html.partition(marker)
    if not found:
        return None
    venue_id = rest.split('"', 1)[0]
    return venue_id or None
