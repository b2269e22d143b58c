"""Service layer for record search."""

from .memo import MemoizedSearch
from .service import FuzzySearchService

__all__ = ["MemoizedSearch", "FuzzySearchService"]
