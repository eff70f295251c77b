"""Decoding of schedules payloads into the entity model."""
from __future__ import annotations

from typing import Iterable, Union

from pydantic import ValidationError

from venuecal.entities.models import GetSchedules
from venuecal.errors import SchemaError


def format_loc(loc: Iterable[Union[int, str]]) -> str:
    """Render a pydantic error location as ``schedules[0].attributes.startAt``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path or "$"


def load_schedules(payload: Union[str, bytes], *, venue_id: str) -> GetSchedules:
    """Validate a raw JSON payload, reporting the first mismatch by field path."""
    try:
        return GetSchedules.model_validate_json(payload)
    except ValidationError as exc:
        # malformed JSON reports an empty location, rendered as "$"
        first = exc.errors(include_url=False)[0]
        raise SchemaError(
            venue_id=venue_id,
            path=format_loc(first["loc"]),
            reason=first["msg"],
        ) from exc
