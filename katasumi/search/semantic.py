"""
AI Re-Ranking Engine

Semantic search on top of the keyword engine. The keyword engine supplies a
candidate pool, an AI provider reorders it, and any provider failure
degrades to plain keyword results. Callers never see provider errors.
"""

from typing import Callable, Optional

from katasumi.configs.constants import DEFAULT_SEMANTIC_LIMIT, SEMANTIC_CANDIDATE_POOL
from katasumi.configs.logging import get_logger
from katasumi.exceptions import LLMError, LLMMissingCredentialError
from katasumi.llm import LLMProvider, ProviderResult, create_provider
from katasumi.models import Platform, ProviderConfig, SearchFilters, Shortcut
from katasumi.search.keyword import KeywordSearchEngine
from katasumi.storage.base import ShortcutStore

logger = get_logger("search.semantic")

FallbackHandler = Callable[[LLMError], None]


def fallback_explanation(shortcut: Shortcut, platform: Optional[Platform] = None) -> str:
    """Templated explanation used when the provider is unavailable."""
    key_combo = shortcut.keys.resolve(platform)
    suffix = f" ({key_combo})" if key_combo else ""
    return f"{shortcut.action} in {shortcut.app}{suffix}"


class AISearchEngine:
    """
    AI-powered search engine with guaranteed keyword fallback.

    Args:
        store: Record store shared with the keyword engine
        provider: AI provider adapter; None behaves like a provider that
            always fails (pure keyword mode)
        keyword_engine: Optional pre-built keyword engine over the same store
        on_fallback: Called with every discarded provider failure
    """

    def __init__(
        self,
        store: ShortcutStore,
        provider: Optional[LLMProvider] = None,
        keyword_engine: Optional[KeywordSearchEngine] = None,
        on_fallback: Optional[FallbackHandler] = None,
    ):
        self.store = store
        self.provider = provider
        self.keyword_engine = keyword_engine or KeywordSearchEngine(store)
        self.on_fallback = on_fallback

    @classmethod
    def from_config(
        cls,
        store: ShortcutStore,
        config: Optional[ProviderConfig],
        on_fallback: Optional[FallbackHandler] = None,
    ) -> "AISearchEngine":
        """Build an engine whose provider comes from a ProviderConfig (or none)."""
        provider = create_provider(config) if config is not None else None
        return cls(store, provider=provider, on_fallback=on_fallback)

    def semantic_search(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        limit: int = DEFAULT_SEMANTIC_LIMIT,
        deadline: Optional[float] = None,
    ) -> list[Shortcut]:
        """
        Search with AI re-ranking, falling back to keyword search on failure.

        Args:
            query: Natural language search query
            filters: Optional filters for app, platform, category, context, tag
            limit: Maximum number of results to return
            deadline: Optional absolute time.monotonic() deadline for the
                provider call

        Returns:
            Shortcuts in AI-determined order, or keyword order on fallback
        """
        candidates = self.keyword_engine.fuzzy_search(
            query, filters, limit=SEMANTIC_CANDIDATE_POOL
        )
        if not candidates:
            return []

        result = self._rank(query, candidates, limit, deadline)
        if not result.ok:
            self._record_fallback("semantic_search", result.error)
            return self.keyword_engine.fuzzy_search(query, filters, limit=limit)

        by_id = {s.id: s for s in candidates}
        ranked: list[Shortcut] = []
        seen: set[str] = set()
        for shortcut_id in result.value:
            shortcut = by_id.get(shortcut_id)
            if shortcut is None or shortcut_id in seen:
                continue
            seen.add(shortcut_id)
            ranked.append(shortcut)

        logger.debug(
            f"AI ranked {len(ranked)} of {len(candidates)} candidates for '{query}'"
        )
        return ranked[:limit]

    def explain_shortcut(
        self,
        shortcut: Shortcut,
        platform: Platform | str | None = None,
        deadline: Optional[float] = None,
    ) -> str:
        """
        Plain English explanation of what a shortcut does.

        Args:
            shortcut: Shortcut to explain
            platform: Platform whose key combination to describe; mac, then
                windows, then linux when not given
            deadline: Optional absolute time.monotonic() deadline

        Returns:
            Provider explanation, or "{action} in {app} (keys)" on failure
        """
        if platform is not None:
            platform = Platform.parse(platform)

        if self.provider is None:
            result: ProviderResult[str] = ProviderResult.failure(
                LLMMissingCredentialError("No AI provider configured")
            )
        else:
            result = self.provider.explain_shortcut(shortcut, platform, deadline=deadline)

        if not result.ok:
            self._record_fallback("explain_shortcut", result.error)
            return fallback_explanation(shortcut, platform)
        return result.value

    def _rank(
        self,
        query: str,
        candidates: list[Shortcut],
        limit: int,
        deadline: Optional[float],
    ) -> ProviderResult[list[str]]:
        if self.provider is None:
            return ProviderResult.failure(LLMMissingCredentialError("No AI provider configured"))
        return self.provider.rank_shortcuts(query, candidates, limit, deadline=deadline)

    def _record_fallback(self, operation: str, error: LLMError) -> None:
        logger.warning(f"AI {operation} failed, falling back: {type(error).__name__}: {error}")
        if self.on_fallback is not None:
            try:
                self.on_fallback(error)
            except Exception:
                logger.exception("on_fallback handler raised")
