"""
Katasumi Storage

Record store contract and the bundled in-memory implementation.
"""

from katasumi.storage.base import ShortcutStore
from katasumi.storage.memory import InMemoryShortcutStore

__all__ = [
    "ShortcutStore",
    "InMemoryShortcutStore",
]
