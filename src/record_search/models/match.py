"""Match classification data models."""

from dataclasses import dataclass
from enum import Enum


class MatchType(str, Enum):
    """Strategy that produced a match, in descending priority."""
    EXACT = "exact"
    CONTAINS = "contains"
    WORD = "word"
    FUZZY = "fuzzy"
    PARTIAL = "partial"
    NONE = "none"

    @property
    def priority(self) -> int:
        """Tie-break weight used when two scores are within tolerance."""
        return _PRIORITIES[self]


_PRIORITIES = {
    MatchType.EXACT: 4,
    MatchType.CONTAINS: 3,
    MatchType.WORD: 2,
    MatchType.FUZZY: 1,
    MatchType.PARTIAL: 0,
    MatchType.NONE: -1,
}


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of classifying one text against one search term.

    Attributes:
        matched: Whether any strategy accepted the text
        score: Relevance score (0.0-1.0, higher is better)
        type: Strategy that produced the match
    """
    matched: bool
    score: float
    type: MatchType

    def __post_init__(self) -> None:
        """Validate match result."""
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"Score must be between 0.0 and 1.0, got {self.score}")
        if not isinstance(self.type, MatchType):
            raise ValueError(f"Invalid match type: {self.type}")

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls(matched=False, score=0.0, type=MatchType.NONE)

    def to_dict(self) -> dict:
        return {"matched": self.matched, "score": self.score, "type": self.type.value}
