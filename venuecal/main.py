"""Command-line entrypoints: run the service or look up one venue."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import uvicorn
from dotenv import load_dotenv

try:
    import uvloop
except ImportError:  # pragma: no cover - uvloop optional on some platforms
    uvloop = None

from venuecal.errors import VenueCalError
from venuecal.fetch.session import create_fetch_session
from venuecal.observability.log import configure_logging
from venuecal.pipeline import get_events
from venuecal.render.calendar import serialize_calendar
from venuecal.server import create_app
from venuecal.settings import DEFAULT_LOGGING_PATH, DEFAULT_SETTINGS_PATH, load_settings


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(prog="venuecal", description="GoOut venue events as iCalendar feeds")
    parser.add_argument("-d", "--debug", action="store_true", help="Print debug logs")
    parser.add_argument("--config", default=str(DEFAULT_SETTINGS_PATH), help="Path to settings TOML")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Start the HTTP service")
    serve.add_argument("--host", help="Bind address")
    serve.add_argument("--port", type=int, help="Bind port")

    lookup = sub.add_parser("lookup", help="Print one venue's calendar and exit")
    lookup.add_argument("short_id", help="Venue short ID, as in goout.net/<lang>/venue/<short_id>")
    lookup.add_argument("-l", "--language", help="Override language for the venue lookup")

    return parser


async def run_lookup(
    settings: Dict[str, Dict[str, Any]],
    language: str,
    short_id: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Run the pipeline once and return the serialized calendar."""
    upstream = settings["upstream"]
    async with create_fetch_session(
        base_url=upstream["base_url"],
        user_agent=upstream["user_agent"],
        timeout=float(upstream["timeout_seconds"]),
        transport=transport,
    ) as session:
        calendar = await get_events(session, language, short_id)
    return serialize_calendar(calendar)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    load_dotenv()
    args = build_arg_parser().parse_args(argv)
    settings = load_settings(Path(args.config))
    configure_logging(DEFAULT_LOGGING_PATH, debug=args.debug)

    if args.command == "lookup":
        language = args.language or settings["cli"]["default_language"]
        runner = uvloop.run if uvloop is not None else asyncio.run
        try:
            calendar = runner(run_lookup(settings, language, args.short_id))
        except VenueCalError as exc:
            print(f"error: {exc}", file=sys.stderr)
            raise SystemExit(1)
        print(calendar)
        return

    if args.command == "serve":
        app = create_app(settings)
        uvicorn.run(
            app,
            host=args.host or settings["server"]["host"],
            port=args.port or int(settings["server"]["port"]),
            log_config=None,
        )


if __name__ == "__main__":
    main()
