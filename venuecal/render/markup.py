"""Markdown to HTML rendering for event descriptions."""
from __future__ import annotations

import markdown


def render_description(text: str) -> str:
    if not text:
        return ""
    return markdown.markdown(text, output_format="html")
