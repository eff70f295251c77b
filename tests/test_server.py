import pytest
from fastapi.testclient import TestClient

from venuecal.server import create_app


@pytest.fixture()
def client(settings, upstream):
    app = create_app(settings, transport=upstream.transport)
    with TestClient(app) as test_client:
        yield test_client


def test_index_is_liveness_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "ok"


@pytest.mark.parametrize("path", ["/en/jazz-club-praha/vzkpbb/events", "/en/jazz-club-praha/vzkpbb/events/"])
def test_events_returns_calendar(client, path):
    response = client.get(path)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/calendar")
    assert response.text.startswith("BEGIN:VCALENDAR")
    assert "SUMMARY:Jazz Night" in response.text


def test_events_are_gzipped_when_accepted(client):
    response = client.get("/en/x/vzkpbb/events", headers={"Accept-Encoding": "gzip"})
    assert response.headers["content-encoding"] == "gzip"
    assert "BEGIN:VEVENT" in response.text


def test_resolution_failure_is_plain_500(client):
    response = client.get("/en/nowhere/nowhere/events")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert "404" in response.text


def test_missing_venue_marker_is_plain_500(client, upstream):
    upstream.pages["/cs/venue/gone"] = "<html>gone</html>"
    response = client.get("/cs/gone/gone/events")
    assert response.status_code == 500
    assert response.text == "Failed to parse venue ID for 'gone'"


def test_schema_error_is_plain_500(client, upstream):
    upstream.schedules = "{}"
    response = client.get("/en/jazz-club-praha/vzkpbb/events")
    assert response.status_code == 500
    assert "Failed to parse schedules for '42'" in response.text


def test_control_character_in_short_id_is_plain_500(client, upstream):
    response = client.get("/en/x/ab%0Acd/events")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert "404" in response.text
    assert upstream.requests[0].url.raw_path == b"/en/venue/ab%0Acd"


def test_invalid_upstream_url_is_plain_500(settings, upstream):
    settings["upstream"]["base_url"] = "https://example.test\n"
    with TestClient(create_app(settings, transport=upstream.transport)) as test_client:
        response = test_client.get("/en/jazz-club-praha/vzkpbb/events")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert "InvalidURL" in response.text
    assert upstream.requests == []
