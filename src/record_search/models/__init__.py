"""Data models for record search."""

from .match import MatchResult, MatchType
from .options import MatchOptions, SearchOptions, SearchOptionsModel
from .result import RankedResult

__all__ = [
    "MatchResult",
    "MatchType",
    "MatchOptions",
    "SearchOptions",
    "SearchOptionsModel",
    "RankedResult",
]
