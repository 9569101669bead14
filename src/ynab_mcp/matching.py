# ABOUTME: Fuzzy payee-name matching
# ABOUTME: Tiered relevance scoring (exact > prefix > substring > words > subsequence)

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

DEFAULT_LIMIT = 10


def _exact(query: str, target: str) -> float:
    return 100 if target == query else 0


def _prefix(query: str, target: str) -> float:
    return 90 if target.startswith(query) else 0


def _substring(query: str, target: str) -> float:
    return 70 if query in target else 0


def _words(query: str, target: str) -> float:
    """Score each query word against the first candidate word it fits, capped at 60."""
    # split() drops empty words, so stray whitespace never scores
    target_words = target.split()
    total = 0
    for q_word in query.split():
        for t_word in target_words:
            if t_word.startswith(q_word):
                total += 50
                break
            if q_word in t_word:
                total += 30
                break
    return min(total, 60)


def _subsequence(query: str, target: str) -> float:
    """Greedy in-order character match, scaled to 40 and kept only above 20."""
    if not query:
        return 0
    matched = 0
    cursor = 0
    for char in query:
        found = target.find(char, cursor)
        if found != -1:
            matched += 1
            cursor = found + 1
    score = matched / len(query) * 40
    return score if score > 20 else 0


# Evaluated in order; the first tier with a non-zero score wins.
TIERS: tuple[Callable[[str, str], float], ...] = (
    _exact,
    _prefix,
    _substring,
    _words,
    _subsequence,
)


def fuzzy_score(query: str, target: str) -> float:
    """
    Score how well ``query`` matches ``target`` (case-insensitive).

    Returns:
        Relevance from 0 (no match) to 100 (exact match)
    """
    query_lower = query.lower()
    target_lower = target.lower()
    for tier in TIERS:
        score = tier(query_lower, target_lower)
        if score > 0:
            return score
    return 0


def search(
    query: str,
    candidates: Iterable[T],
    key: Callable[[T], str],
    limit: int = DEFAULT_LIMIT,
) -> list[tuple[T, float]]:
    """
    Rank candidates by relevance to ``query``.

    Zero scores are dropped. Ties keep the input order.

    Args:
        query: Free-text search string
        candidates: Items to score
        key: Extracts the name to match from each candidate
        limit: Maximum results to return

    Returns:
        (candidate, score) pairs, best first
    """
    scored: Sequence[tuple[T, float]] = [
        (candidate, fuzzy_score(query, key(candidate))) for candidate in candidates
    ]
    ranked = sorted(
        (pair for pair in scored if pair[1] > 0),
        key=lambda pair: pair[1],
        reverse=True,
    )
    return ranked[:limit]
