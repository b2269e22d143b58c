"""Memoized search that recomputes only when its inputs change."""

import logging
from typing import Any, Optional

from ..core.engine import FuzzySearchEngine
from ..models.options import SearchOptions
from ..utils.fields import FieldSpec

logger = logging.getLogger(__name__)


class MemoizedSearch:
    """
    Caches the last search result of an engine.

    The collection is compared by identity, the way a UI list held in state
    is replaced rather than mutated. The term, field spec and options are
    compared by equality. Mutating the cached collection in place is not
    detected; pass a new list instead.
    """

    def __init__(self, engine: Optional[FuzzySearchEngine] = None):
        self.engine = engine or FuzzySearchEngine()
        self.hits = 0
        self.misses = 0
        self._key: Optional[tuple] = None
        self._items: Any = None
        self._result: Any = None

    def __call__(
        self,
        items: Any,
        search_term: Optional[str],
        fields: FieldSpec = None,
        options: Optional[SearchOptions] = None
    ) -> Any:
        key = (search_term, _freeze(fields), options)

        if self._key is not None and items is self._items and key == self._key:
            self.hits += 1
            return self._result

        self.misses += 1
        self._result = self.engine.search(items, search_term, fields, options)
        self._items = items
        self._key = key
        logger.debug(f"Search recomputed (hits={self.hits}, misses={self.misses})")
        return self._result

    def clear(self) -> None:
        """Drop the cached result."""
        self._key = None
        self._items = None
        self._result = None


def _freeze(fields: FieldSpec) -> Any:
    if isinstance(fields, list):
        return tuple(fields)
    return fields
