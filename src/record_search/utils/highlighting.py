"""Highlighting of matched text in search results."""

import html
import re
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class HighlightSegment:
    """A run of text, flagged when it matches the search term."""
    text: str
    matched: bool = False


def highlight_match(text: Optional[str], search_term: Optional[str]) -> List[HighlightSegment]:
    """
    Split text around case-insensitive literal occurrences of a search term.

    Args:
        text: Original text
        search_term: Term to highlight

    Returns:
        Ordered segments that concatenate back to ``text``
    """
    if not text:
        return []
    if not search_term:
        return [HighlightSegment(text)]

    pattern = re.compile(f"({re.escape(search_term)})", re.IGNORECASE)
    needle = search_term.lower()

    segments = []
    for part in pattern.split(text):
        if not part:
            continue
        segments.append(HighlightSegment(part, matched=part.lower() == needle))
    return segments


def highlight_html(
    text: Optional[str],
    search_term: Optional[str],
    css_class: str = "bg-yellow-200"
) -> str:
    """Render highlighted text as escaped HTML with ``<mark>`` around matches."""
    rendered = []
    for segment in highlight_match(text, search_term):
        escaped = html.escape(segment.text)
        if segment.matched:
            rendered.append(f'<mark class="{html.escape(css_class, quote=True)}">{escaped}</mark>')
        else:
            rendered.append(escaped)
    return "".join(rendered)
