"""
Katasumi Search

Keyword search with tiered scoring, key-combination lookup, and optional
AI re-ranking with keyword fallback.
"""

from katasumi.search.fuzzy import levenshtein_distance, similarity
from katasumi.search.keys import normalize_keys
from katasumi.search.keyword import KeywordSearchEngine
from katasumi.search.scoring import normalize_query, rank_shortcuts, score_shortcut
from katasumi.search.semantic import AISearchEngine, fallback_explanation

__all__ = [
    "normalize_keys",
    "levenshtein_distance",
    "similarity",
    "normalize_query",
    "score_shortcut",
    "rank_shortcuts",
    "KeywordSearchEngine",
    "AISearchEngine",
    "fallback_explanation",
]
