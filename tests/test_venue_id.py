from venuecal.parse.venue_id import parse_venue_id, venue_marker

MARKER = "https:\\u002F\\u002Fexample.test\\u002Fvenue\\u002F"


def test_marker_is_escaped_venue_url():
    assert venue_marker("example.test") == MARKER


def test_parse_venue_id_returns_digits_before_quote():
    html = '<script>{"url":"https:\\u002F\\u002Fexample.test\\u002Fvenue\\u002F12345","x":1}</script>'
    assert parse_venue_id(html, MARKER) == "12345"


def test_parse_venue_id_uses_first_occurrence():
    html = f'"{MARKER}1" "{MARKER}2"'
    assert parse_venue_id(html, MARKER) == "1"


def test_parse_venue_id_ignores_unescaped_url():
    html = '<a href="https://example.test/venue/12345">venue</a>'
    assert parse_venue_id(html, MARKER) is None


def test_parse_venue_id_empty_id_is_not_found():
    assert parse_venue_id(f'"{MARKER}"', MARKER) is None


def test_parse_venue_id_without_closing_quote_takes_rest():
    assert parse_venue_id(f"{MARKER}987", MARKER) == "987"
