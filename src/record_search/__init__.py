"""
Record Search Utility for Business Records

Typo-tolerant search over in-memory collections of products, suppliers,
customers and purchase orders, using Levenshtein distance with scored
multi-field ranking.
"""

from .api.service import FuzzySearchService
from .api.memo import MemoizedSearch
from .core.distance import levenshtein_distance, similarity_score
from .core.matcher import fuzzy_match
from .core.engine import FuzzySearchEngine, fuzzy_search, quick_search
from .models.match import MatchResult, MatchType
from .models.options import MatchOptions, SearchOptions
from .models.result import RankedResult
from .utils.highlighting import highlight_match, highlight_html

__version__ = "1.0.0"

__all__ = [
    "FuzzySearchService",
    "FuzzySearchEngine",
    "MemoizedSearch",
    "levenshtein_distance",
    "similarity_score",
    "fuzzy_match",
    "fuzzy_search",
    "quick_search",
    "MatchResult",
    "MatchType",
    "MatchOptions",
    "SearchOptions",
    "RankedResult",
    "highlight_match",
    "highlight_html",
]
