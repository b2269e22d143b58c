"""Ranked search result data model."""

from typing import Any, Dict
from dataclasses import dataclass

from .match import MatchType


@dataclass
class RankedResult:
    """
    One item that survived ranking, with the score of its best field.

    Attributes:
        item: The matched item, exactly as supplied by the caller
        score: Best field score (0.0-1.0, higher is better)
        match_type: Strategy that produced the best field score
        field_index: Position of the accessor that produced the best score
    """
    item: Any
    score: float
    match_type: MatchType
    field_index: int = 0

    def __post_init__(self) -> None:
        """Validate ranked result."""
        if not 0.0 <= self.score <= 1.0:
            raise ValueError("Score must be between 0.0 and 1.0")
        if self.match_type is MatchType.NONE:
            raise ValueError("Ranked results cannot have match type 'none'")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "item": self.item,
            "score": round(self.score, 4),
            "match_type": self.match_type.value,
            "field_index": self.field_index,
        }
