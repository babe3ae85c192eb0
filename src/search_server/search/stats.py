"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of the index containers so they can be
unit tested on plain numbers.
"""

from __future__ import annotations

from collections.abc import Iterable
import math


def term_weight(token_count: int) -> float:
    """Return the frequency contribution of one token occurrence in a document."""

    if token_count <= 0:
        raise ValueError("token_count must be positive")
    return 1.0 / token_count


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return ``ln(total_docs / doc_freq)``.

    Terms present in every document get an IDF of zero. Terms with no postings
    have no meaningful IDF and also return zero.
    """

    if doc_freq <= 0 or total_docs <= 0:
        return 0.0
    return math.log(total_docs / doc_freq)


def compute_average_rating(ratings: Iterable[int]) -> int:
    """Return the integer mean of ``ratings`` truncated toward zero, or 0 when empty.

    Non-integer ratings are truncated to ``int`` before averaging.
    """

    values = [int(rating) for rating in ratings]
    if not values:
        return 0
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient
