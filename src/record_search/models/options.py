"""Option models for matching and ranking."""

from dataclasses import dataclass, replace
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NULLABLE_OPTIONS = frozenset({"limit"})


@dataclass(frozen=True)
class MatchOptions:
    """
    Options for classifying a single text against a search term.

    Attributes:
        threshold: Minimum similarity accepted on the fuzzy path (0.0-1.0)
        case_sensitive: Compare without lower-casing
        whole_words: Enable the word-boundary check
        max_distance: Maximum edit distance accepted on the fuzzy path
    """
    threshold: float = 0.6
    case_sensitive: bool = False
    whole_words: bool = False
    max_distance: int = 3

    def __post_init__(self) -> None:
        """Validate match options."""
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError("Threshold must be between 0.0 and 1.0")
        if self.max_distance < 0:
            raise ValueError("Max distance cannot be negative")


@dataclass(frozen=True)
class SearchOptions:
    """
    Options for ranking a collection of items.

    Attributes:
        threshold: Fuzzy-path similarity gate handed to the classifier
        min_score: Minimum best-field score an item needs to be kept
        limit: Maximum number of items returned (None or 0 = unlimited)
        case_sensitive: Compare without lower-casing
        whole_words: Enable the word-boundary check
        max_distance: Maximum edit distance accepted on the fuzzy path
    """
    threshold: float = 0.4
    min_score: float = 0.3
    limit: Optional[int] = None
    case_sensitive: bool = False
    whole_words: bool = False
    max_distance: int = 3

    def __post_init__(self) -> None:
        """Validate search options."""
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError("Threshold must be between 0.0 and 1.0")
        if not 0.0 <= self.min_score <= 1.0:
            raise ValueError("Min score must be between 0.0 and 1.0")
        if self.limit is not None:
            if not isinstance(self.limit, int) or isinstance(self.limit, bool):
                raise ValueError("Limit must be an integer")
            if self.limit < 0:
                raise ValueError("Limit cannot be negative")
            if self.limit == 0:
                # 0 means unlimited
                object.__setattr__(self, "limit", None)
        if self.max_distance < 0:
            raise ValueError("Max distance cannot be negative")

    def to_match_options(self) -> MatchOptions:
        return MatchOptions(
            threshold=self.threshold,
            case_sensitive=self.case_sensitive,
            whole_words=self.whole_words,
            max_distance=self.max_distance,
        )

    def merged(self, **overrides) -> "SearchOptions":
        """
        Return a copy with the overrides applied.

        None leaves a field unchanged, except for ``limit`` where it
        explicitly asks for unlimited results.
        """
        changes = {
            k: v for k, v in overrides.items()
            if v is not None or k in NULLABLE_OPTIONS
        }
        return replace(self, **changes) if changes else self


class SearchOptionsModel(BaseModel):
    """Pydantic model for search options arriving from config or API payloads."""

    model_config = ConfigDict(extra="forbid")

    threshold: float = Field(0.4, ge=0.0, le=1.0, description="Fuzzy similarity gate")
    min_score: float = Field(0.3, ge=0.0, le=1.0, description="Minimum item score")
    limit: Optional[int] = Field(None, ge=1, description="Maximum results to return")
    case_sensitive: bool = Field(False, description="Case-sensitive comparison")
    whole_words: bool = Field(False, description="Enable word-boundary matching")
    max_distance: int = Field(3, ge=0, le=32, description="Maximum edit distance")

    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, v):
        """Treat 0 and empty strings as 'unlimited'."""
        if v in (0, "", None):
            return None
        return v

    def to_options(self) -> SearchOptions:
        """Convert to SearchOptions dataclass."""
        return SearchOptions(
            threshold=self.threshold,
            min_score=self.min_score,
            limit=self.limit,
            case_sensitive=self.case_sensitive,
            whole_words=self.whole_words,
            max_distance=self.max_distance,
        )
