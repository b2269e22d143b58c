"""High-level API service for record search."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..core.engine import FuzzySearchEngine, QUICK_SEARCH_FIELDS, QUICK_SEARCH_OPTIONS
from ..core.exceptions import RecordSearchError
from ..models.options import SearchOptions
from ..models.result import RankedResult
from ..utils.fields import FieldSpec
from ..utils.highlighting import highlight_html
from ..utils.logging_config import setup_logging
from ..utils.validators import build_search_options, options_from_config
from .memo import MemoizedSearch

logger = logging.getLogger(__name__)


class FuzzySearchService:
    """
    High-level service interface for searching business records.

    Wraps a FuzzySearchEngine with service-wide default options, a memoized
    search path for repeated identical queries, and statistics.
    """

    def __init__(
        self,
        threshold: float = 0.4,
        min_score: float = 0.3,
        limit: Optional[int] = None,
        case_sensitive: bool = False,
        whole_words: bool = False,
        max_distance: int = 3,
        memoize: bool = True,
        log_level: Optional[str] = None
    ):
        """
        Initialize record search service.

        Args:
            threshold: Default fuzzy similarity gate
            min_score: Default minimum item score
            limit: Default result limit (None = unlimited)
            case_sensitive: Default case sensitivity
            whole_words: Default word-boundary matching
            max_distance: Default maximum edit distance
            memoize: Whether repeated identical searches reuse the last result
            log_level: Configure package logging at this level when given

        Raises:
            ValidationError: If the default options are invalid
        """
        if log_level:
            setup_logging(level=log_level)

        self.options = build_search_options(
            SearchOptions(),
            threshold=threshold,
            min_score=min_score,
            limit=limit,
            case_sensitive=case_sensitive,
            whole_words=whole_words,
            max_distance=max_distance
        )
        self.engine = FuzzySearchEngine(self.options)
        self.memo = MemoizedSearch(self.engine) if memoize else None
        self._closed = False

        logger.info("Record search service initialized")

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]], **kwargs) -> 'FuzzySearchService':
        """
        Create a service from a plain mapping of search options.

        Raises:
            ConfigurationError: If the mapping is not valid search options
        """
        options = options_from_config(config)
        return cls(
            threshold=options.threshold,
            min_score=options.min_score,
            limit=options.limit,
            case_sensitive=options.case_sensitive,
            whole_words=options.whole_words,
            max_distance=options.max_distance,
            **kwargs
        )

    def search(
        self,
        items: Any,
        search_term: Optional[str],
        fields: FieldSpec = None,
        **overrides
    ) -> Any:
        """
        Search items and return the matching ones in ranking order.

        Args:
            items: Items to search
            search_term: Search term; blank terms return ``items`` unchanged
            fields: Field spec (path, accessor, sequence of either, or None)
            **overrides: SearchOptions fields overriding the service defaults;
                ``limit=None`` or ``limit=0`` lifts the default limit

        Returns:
            Matching items, best first
        """
        self._check_open()
        options = build_search_options(self.options, **overrides)

        if self.memo is not None:
            return self.memo(items, search_term, fields, options)
        return self.engine.search(items, search_term, fields, options)

    def search_ranked(
        self,
        items: Any,
        search_term: Optional[str],
        fields: FieldSpec = None,
        **overrides
    ) -> List[RankedResult]:
        """Search and return ranked results with scores and match types."""
        self._check_open()
        return self.engine.rank(items, search_term, fields, **overrides)

    def quick_search(self, items: Any, search_term: Optional[str], fields: FieldSpec = QUICK_SEARCH_FIELDS) -> Any:
        """Search names and descriptions with the stricter quick-search presets."""
        self._check_open()
        return self.engine.search(items, search_term, fields, QUICK_SEARCH_OPTIONS)

    def highlight(self, text: Optional[str], search_term: Optional[str], css_class: str = "bg-yellow-200") -> str:
        """Render ``text`` as HTML with occurrences of the term marked."""
        self._check_open()
        return highlight_html(text, search_term, css_class=css_class)

    def get_stats(self) -> Dict[str, Any]:
        """Get service and engine statistics."""
        return {
            'service': {
                'memoized': self.memo is not None,
                'cache_hits': self.memo.hits if self.memo else 0,
                'cache_misses': self.memo.misses if self.memo else 0,
                'closed': self._closed
            },
            'engine': self.engine.get_stats()
        }

    def clear_cache(self) -> None:
        if self.memo is not None:
            self.memo.clear()

    def _check_open(self) -> None:
        if self._closed:
            raise RecordSearchError("Service is closed")

    def close(self) -> None:
        """Release the cached result and refuse further searches."""
        self.clear_cache()
        self._closed = True
        logger.info("Record search service closed")

    @classmethod
    @contextmanager
    def create(cls, **kwargs) -> Iterator['FuzzySearchService']:
        """
        Create and manage service lifecycle with context manager.

        Args:
            **kwargs: Service configuration

        Yields:
            Ready record search service
        """
        service = cls(**kwargs)

        try:
            yield service
        finally:
            service.close()
