"""Fuzzy ranking of item collections."""

import logging
import time
from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Sequence

from ..models.match import MatchResult
from ..models.options import SearchOptions
from ..models.result import RankedResult
from ..utils.fields import FieldSpec, resolve_fields, extract_text
from ..utils.logging_config import StructuredLogger
from ..utils.validators import build_search_options
from .matcher import fuzzy_match

logger = logging.getLogger(__name__)

SCORE_TIE_TOLERANCE = 0.01

QUICK_SEARCH_FIELDS = ("name", "description")
QUICK_SEARCH_OPTIONS = SearchOptions(threshold=0.5, min_score=0.4, limit=50)


def _compare_results(a: RankedResult, b: RankedResult) -> int:
    """Order by score descending; near-equal scores fall back to match-type priority."""
    if abs(a.score - b.score) > SCORE_TIE_TOLERANCE:
        return -1 if a.score > b.score else 1
    return b.match_type.priority - a.match_type.priority


def sort_results(results: List[RankedResult]) -> List[RankedResult]:
    """Return results in ranking order. Equal keys keep their input order."""
    return sorted(results, key=cmp_to_key(_compare_results))


class FuzzySearchEngine:
    """
    Ranks in-memory items against a search term.

    Each item is scored by its best matching field, filtered by a minimum
    score and sorted by score with match-type tie-breaking. The engine never
    raises for malformed items: failing fields simply count as empty.
    """

    def __init__(self, options: Optional[SearchOptions] = None):
        """
        Initialize the engine.

        Args:
            options: Default search options used when a call does not override them
        """
        self.options = options or SearchOptions()
        self._stats = {
            'total_searches': 0,
            'items_scanned': 0,
            'avg_search_time': 0.0
        }
        self._log = StructuredLogger(__name__)

    def rank(
        self,
        items: Sequence[Any],
        search_term: Optional[str],
        fields: FieldSpec = None,
        options: Optional[SearchOptions] = None,
        **overrides
    ) -> List[RankedResult]:
        """
        Score, filter and sort items.

        Unlike search(), an empty search term yields no ranked results since
        nothing was scored.

        Args:
            items: Items to rank
            search_term: Search term
            fields: Field spec (path, accessor, sequence of either, or None)
            options: Options for this call (defaults to the engine options)
            **overrides: Individual SearchOptions fields for this call

        Returns:
            Ranked results, best first, truncated to the limit

        Raises:
            ValidationError: If the overrides produce invalid options
        """
        options = build_search_options(options or self.options, **overrides)

        if not _is_item_list(items) or not items:
            return []
        if _is_blank(search_term):
            return []

        start_time = time.perf_counter()
        search = search_term.strip()
        accessors = resolve_fields(fields)
        match_options = options.to_match_options()

        results = []
        for item in items:
            best_score = 0.0
            best_match: Optional[MatchResult] = None
            best_index = 0

            for index, accessor in enumerate(accessors):
                text = extract_text(item, accessor)
                if text is None:
                    continue

                match = fuzzy_match(text, search, match_options)
                if match.matched and match.score > best_score:
                    best_score = match.score
                    best_match = match
                    best_index = index

            if best_match is not None and best_score >= options.min_score:
                results.append(RankedResult(
                    item=item,
                    score=best_score,
                    match_type=best_match.type,
                    field_index=best_index
                ))

        results = sort_results(results)
        if options.limit:
            results = results[:options.limit]

        search_time = time.perf_counter() - start_time
        self._update_stats(len(items), search_time)
        self._log.with_context(term=search, items=len(items), fields=len(accessors)).debug(
            f"Ranked {len(results)} results in {search_time:.4f}s"
        )
        return results

    def search(
        self,
        items: Sequence[Any],
        search_term: Optional[str],
        fields: FieldSpec = None,
        options: Optional[SearchOptions] = None,
        **overrides
    ) -> Any:
        """
        Search items and return the matching ones in ranking order.

        Args:
            items: Items to search
            search_term: Search term; blank terms return ``items`` unchanged
            fields: Field spec (path, accessor, sequence of either, or None)
            options: Options for this call (defaults to the engine options)
            **overrides: Individual SearchOptions fields for this call

        Returns:
            New list of matching items, or ``items`` itself for a blank term

        Raises:
            ValidationError: If the overrides produce invalid options
        """
        if not _is_item_list(items) or not items:
            return []
        if _is_blank(search_term):
            return items

        ranked = self.rank(items, search_term, fields, options, **overrides)
        return [result.item for result in ranked]

    def sort_results(self, results: List[RankedResult]) -> List[RankedResult]:
        return sort_results(results)

    def _update_stats(self, item_count: int, search_time: float) -> None:
        self._stats['total_searches'] += 1
        self._stats['items_scanned'] += item_count

        total_searches = self._stats['total_searches']
        current_avg = self._stats['avg_search_time']
        self._stats['avg_search_time'] = (
            (current_avg * (total_searches - 1) + search_time) / total_searches
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        return {
            **self._stats,
            'min_score': self.options.min_score,
            'threshold': self.options.threshold,
            'limit': self.options.limit
        }


def _is_item_list(items: Any) -> bool:
    if isinstance(items, (list, tuple)):
        return True
    if items is not None:
        logger.debug(f"Ignoring non-list items of type {type(items).__name__}")
    return False


def _is_blank(search_term: Any) -> bool:
    return not isinstance(search_term, str) or not search_term.strip()


def fuzzy_search(
    items: Sequence[Any],
    search_term: Optional[str],
    fields: FieldSpec = None,
    options: Optional[SearchOptions] = None,
    **overrides
) -> Any:
    """Search items with default engine options. See FuzzySearchEngine.search."""
    return FuzzySearchEngine().search(items, search_term, fields, options, **overrides)


def quick_search(
    items: Sequence[Any],
    search_term: Optional[str],
    fields: FieldSpec = QUICK_SEARCH_FIELDS
) -> Any:
    """Search names and descriptions with stricter preset options."""
    return FuzzySearchEngine(QUICK_SEARCH_OPTIONS).search(items, search_term, fields)
