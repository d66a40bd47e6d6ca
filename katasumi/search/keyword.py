"""
Keyword Search Engine

Offline shortcut search: coarse retrieval from the record store, local
filtering, tiered scoring and stable sorting. Also supports reverse lookup
by key combination.
"""

import time
from typing import Optional

from katasumi.configs.constants import DEFAULT_KEYWORD_LIMIT, RETRIEVAL_LIMIT
from katasumi.configs.logging import get_logger
from katasumi.models import PLATFORM_ORDER, Platform, SearchFilters, Shortcut
from katasumi.search.keys import normalize_keys
from katasumi.search.scoring import rank_shortcuts
from katasumi.storage.base import ShortcutStore

logger = get_logger("search.keyword")


class KeywordSearchEngine:
    """Keyword-based search engine with fuzzy matching and ranking."""

    def __init__(self, store: ShortcutStore):
        self.store = store

    def fuzzy_search(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        limit: int = DEFAULT_KEYWORD_LIMIT,
    ) -> list[Shortcut]:
        """
        Perform fuzzy search on shortcuts with filtering and ranking.

        Only app and category are pushed down to the store; platform,
        context and tag are applied locally. An empty query browses the
        filtered records in store order without scoring.

        Args:
            query: Search query string
            filters: Optional filters for app, platform, category, context, tag
            limit: Maximum number of results to return

        Returns:
            Shortcuts sorted by relevance score (ties keep store order)
        """
        filters = filters or SearchFilters()
        start_time = time.time()

        candidates = self.store.search(
            app=filters.app,
            category=filters.category,
            limit=RETRIEVAL_LIMIT,
        )
        candidates = self._apply_local_filters(candidates, filters)

        if not query or not query.strip():
            return candidates[:limit]

        ranked = rank_shortcuts(candidates, query)

        elapsed = time.time() - start_time
        logger.debug(
            f"Keyword search '{query}': {len(candidates)} candidates -> "
            f"{len(ranked)} matches in {elapsed*1000:.1f}ms"
        )
        return [s.shortcut for s in ranked[:limit]]

    def search_by_keys(
        self,
        key_combo: str,
        platform: Platform | str | None = None,
    ) -> list[Shortcut]:
        """
        Find shortcuts bound to a key combination.

        Args:
            key_combo: Key combination in any supported notation
            platform: Restrict matching to one platform; otherwise mac,
                windows and linux are checked in that order

        Returns:
            Matching shortcuts in store order, each at most once
        """
        normalized = normalize_keys(key_combo)
        if not normalized:
            return []

        if platform is not None:
            platform = Platform.parse(platform)
            if platform is None:
                return []
            platforms = (platform,)
        else:
            platforms = PLATFORM_ORDER

        candidates = self.store.search(limit=RETRIEVAL_LIMIT)

        matches = []
        for shortcut in candidates:
            for candidate_platform in platforms:
                if normalize_keys(shortcut.keys.get(candidate_platform)) == normalized:
                    matches.append(shortcut)
                    break

        logger.debug(f"Key search '{key_combo}' -> '{normalized}': {len(matches)} matches")
        return matches

    def _apply_local_filters(
        self,
        shortcuts: list[Shortcut],
        filters: SearchFilters,
    ) -> list[Shortcut]:
        # Unknown platform names are ignored rather than matching nothing
        platform = Platform.parse(filters.platform)
        if platform is not None:
            shortcuts = [s for s in shortcuts if s.keys.get(platform)]

        if filters.context:
            shortcuts = [s for s in shortcuts if s.context == filters.context]

        if filters.tag:
            tag = filters.tag.lower()
            shortcuts = [s for s in shortcuts if tag in (t.lower() for t in s.tags)]

        return shortcuts
