"""Match classification of a single text against a search term."""

from typing import List, Optional

from ..models.match import MatchResult, MatchType
from ..models.options import MatchOptions
from .distance import levenshtein_distance


CONTAINS_BASE_SCORE = 0.8
WORD_SCORE = 0.9
PARTIAL_SUBSTRING_SCORE = 0.7
PARTIAL_FUZZY_SCORE = 0.5
PARTIAL_MAX_WORD_DISTANCE = 2
PARTIAL_MIN_WORD_LENGTH = 3


def fuzzy_match(
    text: Optional[str],
    search_term: Optional[str],
    options: Optional[MatchOptions] = None,
    **overrides
) -> MatchResult:
    """
    Classify how well a text matches a search term.

    Strategies are tried in priority order and the first that accepts wins:
    exact, contains, word boundary (only with ``whole_words``), fuzzy edit
    distance, then partial per-word matching.

    Args:
        text: Text to search in
        search_term: Term to look for
        options: Match options (defaults to MatchOptions())
        **overrides: Individual MatchOptions fields overriding ``options``

    Returns:
        MatchResult with matched flag, score and match type
    """
    if overrides:
        base = options or MatchOptions()
        options = MatchOptions(
            threshold=overrides.get("threshold", base.threshold),
            case_sensitive=overrides.get("case_sensitive", base.case_sensitive),
            whole_words=overrides.get("whole_words", base.whole_words),
            max_distance=overrides.get("max_distance", base.max_distance),
        )
    elif options is None:
        options = MatchOptions()

    if not text or not search_term:
        return MatchResult.no_match()

    search_text = text if options.case_sensitive else text.lower()
    search = search_term if options.case_sensitive else search_term.lower()

    if search_text == search:
        return MatchResult(matched=True, score=1.0, type=MatchType.EXACT)

    if search in search_text:
        ratio = len(search) / len(search_text)
        score = CONTAINS_BASE_SCORE + ratio * (1.0 - CONTAINS_BASE_SCORE)
        return MatchResult(matched=True, score=min(score, 1.0), type=MatchType.CONTAINS)

    if options.whole_words:
        for word in search_text.split():
            if word.startswith(search):
                return MatchResult(matched=True, score=WORD_SCORE, type=MatchType.WORD)

    # Distance is always case-insensitive; lengths come from the raw strings
    distance = levenshtein_distance(text, search_term)
    max_length = max(len(text), len(search_term))
    similarity = 1.0 - distance / max_length if max_length > 0 else 0.0

    if distance <= options.max_distance and similarity >= options.threshold:
        return MatchResult(matched=True, score=min(similarity, 1.0), type=MatchType.FUZZY)

    return _partial_word_match(search_text, search)


def _partial_word_match(search_text: str, search: str) -> MatchResult:
    """Score each search word against the text and average over all words."""
    search_words = [w for w in search.split() if len(w) >= PARTIAL_MIN_WORD_LENGTH]
    if not search_words:
        return MatchResult.no_match()

    text_words: List[str] = search_text.split()
    matched_words = 0
    total_score = 0.0

    for word in search_words:
        if word in search_text:
            matched_words += 1
            total_score += PARTIAL_SUBSTRING_SCORE
            continue
        for text_word in text_words:
            if (
                levenshtein_distance(text_word, word) <= PARTIAL_MAX_WORD_DISTANCE
                and len(text_word) >= len(word) - PARTIAL_MAX_WORD_DISTANCE
            ):
                matched_words += 1
                total_score += PARTIAL_FUZZY_SCORE
                break

    if matched_words == 0:
        return MatchResult.no_match()

    # Unmatched words still count in the denominator
    return MatchResult(
        matched=True,
        score=total_score / len(search_words),
        type=MatchType.PARTIAL,
    )
