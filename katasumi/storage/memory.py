"""
In-Memory Shortcut Store

Read-only store backed by a list of records, loadable from a JSON or YAML
catalog. Insertion order is the store order.
"""

import json
import time
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml

from katasumi.configs.constants import DEFAULT_STORE_LIMIT
from katasumi.configs.logging import get_logger
from katasumi.exceptions import StoreLoadError
from katasumi.models import PLATFORM_ORDER, AppInfo, Shortcut
from katasumi.storage.base import ShortcutStore

logger = get_logger("storage.memory")


class InMemoryShortcutStore(ShortcutStore):
    """Immutable record store; safe for concurrent reads."""

    def __init__(self, shortcuts: Iterable[Shortcut] = ()):
        self._shortcuts: tuple[Shortcut, ...] = tuple(shortcuts)
        self._by_id = {s.id: s for s in self._shortcuts}

    def __len__(self) -> int:
        return len(self._shortcuts)

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> "InMemoryShortcutStore":
        """Build a store from wire-format record dicts."""
        return cls(Shortcut.from_dict(r) for r in records)

    @classmethod
    def from_file(cls, path: str | Path) -> "InMemoryShortcutStore":
        """
        Load a catalog file.

        The file is JSON (.json) or YAML (anything else) holding either a
        list of records or a mapping with a "shortcuts" list.

        Raises:
            StoreLoadError: File missing, undecodable, or malformed
        """
        path = Path(path).expanduser()
        start_time = time.time()

        try:
            content = path.read_text()
            if path.suffix.lower() == ".json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise StoreLoadError(f"Failed to read catalog: {path}", {"error": str(e)}) from e

        if isinstance(data, dict):
            data = data.get("shortcuts")
        if not isinstance(data, list):
            raise StoreLoadError(f"Catalog has no shortcut list: {path}")

        try:
            store = cls.from_records(data)
        except (KeyError, TypeError, ValueError) as e:
            raise StoreLoadError(f"Malformed record in catalog: {path}", {"error": str(e)}) from e

        elapsed = time.time() - start_time
        logger.debug(f"Loaded {len(store)} shortcuts from {path} in {elapsed*1000:.1f}ms")
        return store

    def search(
        self,
        app: Optional[str] = None,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        query: Optional[str] = None,
        limit: int = DEFAULT_STORE_LIMIT,
        offset: int = 0,
    ) -> list[Shortcut]:
        results: Iterable[Shortcut] = self._shortcuts

        if app:
            results = [s for s in results if s.app == app]
        if category:
            results = [s for s in results if s.category == category]
        if query:
            needle = query.lower()
            results = [
                s for s in results
                if needle in s.action.lower() or any(needle in t.lower() for t in s.tags)
            ]
        if tag:
            results = [s for s in results if tag in s.tags]

        results = list(results)
        return results[offset:offset + limit]

    def by_app(self, app: str) -> list[Shortcut]:
        return [s for s in self._shortcuts if s.app == app]

    def by_id(self, shortcut_id: str) -> Optional[Shortcut]:
        return self._by_id.get(str(shortcut_id))

    def apps(self) -> list[AppInfo]:
        grouped: dict[str, list[Shortcut]] = {}
        for shortcut in self._shortcuts:
            grouped.setdefault(shortcut.app, []).append(shortcut)

        infos = []
        for name, shortcuts in grouped.items():
            platforms = tuple(
                p for p in PLATFORM_ORDER if any(s.keys.get(p) for s in shortcuts)
            )
            categories = [s.category for s in shortcuts if s.category]
            infos.append(
                AppInfo(
                    name=name,
                    display_name=name,
                    category=categories[0] if categories else None,
                    platforms=platforms,
                    shortcut_count=len(shortcuts),
                )
            )
        return infos
