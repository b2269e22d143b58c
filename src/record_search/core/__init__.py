"""Core matching and ranking components for record search."""

from .distance import levenshtein_distance, similarity_score
from .matcher import fuzzy_match
from .engine import FuzzySearchEngine, fuzzy_search, quick_search, sort_results
from .exceptions import (
    RecordSearchError,
    ValidationError,
    ConfigurationError,
    FieldAccessError
)

__all__ = [
    "levenshtein_distance",
    "similarity_score",
    "fuzzy_match",
    "FuzzySearchEngine",
    "fuzzy_search",
    "quick_search",
    "sort_results",
    "RecordSearchError",
    "ValidationError",
    "ConfigurationError",
    "FieldAccessError"
]
