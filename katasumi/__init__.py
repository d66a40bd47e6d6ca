"""
Katasumi

Keyboard shortcut search: offline keyword ranking, key-combination lookup,
and optional AI re-ranking that always degrades to keyword results.
"""

from katasumi.models import (
    AppInfo,
    Keys,
    Platform,
    ProviderConfig,
    ProviderKind,
    SearchFilters,
    Shortcut,
    Source,
    SourceType,
)
from katasumi.search import AISearchEngine, KeywordSearchEngine, normalize_keys
from katasumi.storage import InMemoryShortcutStore, ShortcutStore

__version__ = "0.1.0"

__all__ = [
    "AppInfo",
    "Keys",
    "Platform",
    "ProviderConfig",
    "ProviderKind",
    "SearchFilters",
    "Shortcut",
    "Source",
    "SourceType",
    "AISearchEngine",
    "KeywordSearchEngine",
    "normalize_keys",
    "InMemoryShortcutStore",
    "ShortcutStore",
]
