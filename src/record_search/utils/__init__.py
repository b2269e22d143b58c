"""Utility modules for record search."""

from .fields import get_nested_value, resolve_fields, extract_text
from .highlighting import HighlightSegment, highlight_match, highlight_html
from .validators import build_search_options, options_from_config
from .logging_config import setup_logging, StructuredLogger

__all__ = [
    "get_nested_value",
    "resolve_fields",
    "extract_text",
    "HighlightSegment",
    "highlight_match",
    "highlight_html",
    "build_search_options",
    "options_from_config",
    "setup_logging",
    "StructuredLogger",
]
