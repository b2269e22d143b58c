"""Edit distance and similarity scoring."""

from typing import Optional

import numpy as np


def levenshtein_distance(str1: Optional[str], str2: Optional[str]) -> int:
    """
    Calculate the Levenshtein distance between two strings.

    Comparison is case-insensitive and works on Unicode code points, so a
    character outside the BMP counts as a single edit.

    Args:
        str1: First string (None is treated as empty)
        str2: Second string (None is treated as empty)

    Returns:
        Minimum number of single-character insertions, deletions or
        substitutions turning one string into the other
    """
    s1 = (str1 or "").lower()
    s2 = (str2 or "").lower()

    if s1 == s2:
        return 0
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Rows follow s2, columns follow s1. Per-call array setup dominates on
    # short UI-length strings; the vectorised rows only pay off on longer text.
    columns = np.arange(len(s1) + 1, dtype=np.int64)
    codes1 = np.fromiter((ord(c) for c in s1), dtype=np.int64, count=len(s1))

    matrix = np.zeros((len(s2) + 1, len(s1) + 1), dtype=np.int64)
    matrix[:, 0] = np.arange(len(s2) + 1)
    matrix[0, :] = columns

    for i in range(1, len(s2) + 1):
        previous = matrix[i - 1]
        substitution_cost = (codes1 != ord(s2[i - 1])).astype(np.int64)

        row = np.empty(len(s1) + 1, dtype=np.int64)
        row[0] = i
        row[1:] = np.minimum(
            previous[:-1] + substitution_cost,  # substitution or match
            previous[1:] + 1,                   # deletion
        )
        # Insertion chains along the row: row[j] = min(row[k] + (j - k)) for k <= j
        matrix[i] = np.minimum.accumulate(row - columns) + columns

    return int(matrix[len(s2), len(s1)])


def similarity_score(str1: Optional[str], str2: Optional[str]) -> float:
    """
    Calculate a normalized similarity between two strings.

    Returns 0.0 when either string is empty, including when both are.
    """
    if not str1 or not str2:
        return 0.0
    if str1.lower() == str2.lower():
        return 1.0

    max_length = max(len(str1), len(str2))
    distance = levenshtein_distance(str1, str2)
    return min(1.0, max(0.0, 1.0 - distance / max_length))
