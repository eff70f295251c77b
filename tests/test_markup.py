from venuecal.render.markup import render_description


def test_emphasis_becomes_html_tags():
    html = render_description("A *quiet* evening with **loud** friends")
    assert html == "<p>A <em>quiet</em> evening with <strong>loud</strong> friends</p>"


def test_links_and_paragraphs():
    html = render_description("First.\n\nSee [tickets](https://example.test/t).")
    assert html.count("<p>") == 2
    assert '<a href="https://example.test/t">tickets</a>' in html


def test_empty_description_stays_empty():
    assert render_description("") == ""
