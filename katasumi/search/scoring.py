"""
Relevance Scoring

Tiered heuristic scoring of a shortcut against a natural-language query.
Exact and prefix matches on the action always outrank tag and fuzzy matches.

Tiers (highest reached wins):
    1.0   action equals query (returns immediately)
    0.8   action starts with query
    0.7   a tag equals query
    0.6   query is a substring of action
    0.5   every word of a multi-word query is in action
    0.45  a tag contains query
    0.3-0.4  fuzzy similarity(action, query) above 0.5
    0.25  any query word appears in any tag
"""

from typing import Iterable

from katasumi.models import ScoredShortcut, Shortcut
from katasumi.search.fuzzy import similarity

EXACT_SCORE = 1.0
PREFIX_SCORE = 0.8
TAG_EXACT_SCORE = 0.7
SUBSTRING_SCORE = 0.6
ALL_WORDS_SCORE = 0.5
TAG_SUBSTRING_SCORE = 0.45
FUZZY_BASE_SCORE = 0.3
FUZZY_THRESHOLD = 0.5
TAG_WORD_SCORE = 0.25


def normalize_query(query: str) -> str:
    """Lowercase and trim a free-text query."""
    return query.lower().strip()


def score_shortcut(shortcut: Shortcut, query: str) -> float:
    """
    Calculate relevance score for a shortcut.

    Args:
        shortcut: Record to score
        query: Normalized query (see normalize_query)

    Returns:
        Score from 0.0 to 1.0 (0.0 when nothing matches)
    """
    action = shortcut.action.lower()
    tags = [t.lower() for t in shortcut.tags]

    if action == query:
        return EXACT_SCORE

    score = 0.0

    if action.startswith(query):
        score = max(score, PREFIX_SCORE)

    if query in tags:
        score = max(score, TAG_EXACT_SCORE)

    if query in action:
        score = max(score, SUBSTRING_SCORE)

    query_words = query.split()
    if len(query_words) > 1 and all(word in action for word in query_words):
        score = max(score, ALL_WORDS_SCORE)

    if any(query in tag for tag in tags):
        score = max(score, TAG_SUBSTRING_SCORE)

    fuzzy = similarity(action, query)
    if fuzzy > FUZZY_THRESHOLD:
        score = max(score, FUZZY_BASE_SCORE + (fuzzy - FUZZY_THRESHOLD) * 0.2)

    if any(word in tag for word in query_words for tag in tags):
        score = max(score, TAG_WORD_SCORE)

    return score


def rank_shortcuts(shortcuts: Iterable[Shortcut], query: str) -> list[ScoredShortcut]:
    """
    Score shortcuts, drop non-matches, and sort by descending score.

    Python's sort is stable, so equal scores keep their input order.

    Args:
        shortcuts: Candidates in store order
        query: Raw query (normalized here)

    Returns:
        Scored candidates, best first
    """
    normalized = normalize_query(query)
    scored = [ScoredShortcut(shortcut=s, score=score_shortcut(s, normalized)) for s in shortcuts]
    relevant = [s for s in scored if s.score > 0]
    relevant.sort(key=lambda s: s.score, reverse=True)
    return relevant
