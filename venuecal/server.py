"""FastAPI service serving venue calendars."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse, Response

from venuecal.errors import VenueCalError
from venuecal.fetch.session import create_fetch_session
from venuecal.observability.metrics import MetricsRegistry
from venuecal.pipeline import get_events
from venuecal.render.calendar import serialize_calendar

LOGGER = structlog.get_logger(__name__)

CALENDAR_MEDIA_TYPE = "text/calendar"


def create_app(
    settings: Dict[str, Dict[str, Any]],
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    upstream = settings["upstream"]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with create_fetch_session(
            base_url=upstream["base_url"],
            user_agent=upstream["user_agent"],
            timeout=float(upstream["timeout_seconds"]),
            transport=transport,
        ) as session:
            app.state.session = session
            yield

    app = FastAPI(title="venuecal", lifespan=lifespan)
    app.add_middleware(GZipMiddleware, minimum_size=500)

    @app.exception_handler(VenueCalError)
    async def handle_pipeline_error(request: Request, exc: VenueCalError) -> PlainTextResponse:
        LOGGER.error("request_failed", path=request.url.path, error=str(exc))
        return PlainTextResponse(str(exc), status_code=500)

    @app.get("/", response_class=PlainTextResponse)
    async def handle_index() -> str:
        return "ok"

    @app.get("/{language}/{name}/{short_id}/events")
    @app.get("/{language}/{name}/{short_id}/events/")
    async def handle_get_events(request: Request, language: str, name: str, short_id: str) -> Response:
        metrics = MetricsRegistry()
        calendar = await get_events(request.app.state.session, language, short_id, metrics=metrics)
        body = serialize_calendar(calendar)
        LOGGER.info(
            "request_served",
            language=language,
            short_id=short_id,
            emitted=metrics.get("schedules_emitted"),
        )
        return Response(content=body, media_type=CALENDAR_MEDIA_TYPE)

    return app
