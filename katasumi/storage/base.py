"""
Record Store Interface

Read contract the search engines consume. Any backend that satisfies it
(SQL, HTTP, in-memory) can feed the keyword and semantic engines.
"""

from abc import ABC, abstractmethod
from typing import Optional

from katasumi.configs.constants import DEFAULT_STORE_LIMIT
from katasumi.models import AppInfo, Shortcut


class ShortcutStore(ABC):
    """
    Abstract base class for shortcut record stores.

    Implementations must tolerate concurrent reads and must return fresh
    lists so callers never mutate store state.
    """

    @abstractmethod
    def search(
        self,
        app: Optional[str] = None,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        query: Optional[str] = None,
        limit: int = DEFAULT_STORE_LIMIT,
        offset: int = 0,
    ) -> list[Shortcut]:
        """
        Coarse record retrieval in store order.

        Args:
            app: Exact application name
            category: Exact category
            tag: Exact tag
            query: Case-insensitive substring of action or any tag
            limit: Maximum records to return
            offset: Records to skip

        Returns:
            Matching records
        """
        pass

    @abstractmethod
    def by_app(self, app: str) -> list[Shortcut]:
        """All records for one application."""
        pass

    @abstractmethod
    def by_id(self, shortcut_id: str) -> Optional[Shortcut]:
        """A single record, or None when absent."""
        pass

    @abstractmethod
    def apps(self) -> list[AppInfo]:
        """Summaries of every application in the store."""
        pass

    def app_info(self, app: str) -> Optional[AppInfo]:
        """Summary for a single application, or None."""
        for info in self.apps():
            if info.name == app:
                return info
        return None
