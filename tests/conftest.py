from pathlib import Path
from typing import Dict, List

import httpx
import pytest

from venuecal.entities.models import GetSchedules

FIXTURES = Path(__file__).parent / "fixtures"
BASE_URL = "https://example.test"


def fixture_text(*parts: str) -> str:
    return FIXTURES.joinpath(*parts).read_text(encoding="utf-8")


@pytest.fixture()
def profile_html() -> str:
    return fixture_text("html", "venue_profile.html")


@pytest.fixture()
def schedules_json() -> str:
    return fixture_text("json", "schedules.json")


@pytest.fixture()
def envelope(schedules_json) -> GetSchedules:
    return GetSchedules.model_validate_json(schedules_json)


@pytest.fixture()
def settings() -> Dict[str, Dict[str, object]]:
    return {
        "upstream": {
            "base_url": BASE_URL,
            "timeout_seconds": 5.0,
            "user_agent": "venuecal-tests",
        },
        "server": {"host": "127.0.0.1", "port": 3000},
        "cli": {"default_language": "en"},
    }


class FakeUpstream:
    """Serves canned profile pages and schedule payloads."""

    def __init__(self, *, pages: Dict[str, str], schedules: str, status: int = 200) -> None:
        self.pages = pages
        self.schedules = schedules
        self.status = status
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/services/entities/v1/schedules":
            return httpx.Response(self.status, text=self.schedules)
        if request.url.path in self.pages:
            return httpx.Response(200, text=self.pages[request.url.path])
        return httpx.Response(404, text="not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture()
def upstream(profile_html, schedules_json) -> FakeUpstream:
    return FakeUpstream(pages={"/en/venue/vzkpbb": profile_html}, schedules=schedules_json)
