"""
Pytest fixtures for Katasumi tests.
"""

import sys
import time
from pathlib import Path
from typing import Optional

import pytest

# Add project root to path for katasumi imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from katasumi.exceptions import LLMError  # noqa: E402
from katasumi.llm.provider import LLMConfig, LLMProvider, LLMResponse  # noqa: E402
from katasumi.models import ProviderConfig, ProviderKind, Shortcut  # noqa: E402
from katasumi.search import AISearchEngine, KeywordSearchEngine  # noqa: E402
from katasumi.storage import InMemoryShortcutStore  # noqa: E402

SAMPLE_RECORDS = [
    {
        "id": "1",
        "app": "vim",
        "action": "Copy line",
        "keys": {"mac": "yy", "linux": "yy"},
        "context": "Normal Mode",
        "category": "Editing",
        "tags": ["copy", "clipboard"],
        "source": {"type": "official", "url": "https://vim.org", "confidence": 1.0},
    },
    {
        "id": "2",
        "app": "vim",
        "action": "Paste",
        "keys": {"mac": "p", "linux": "p"},
        "context": "Normal Mode",
        "category": "Editing",
        "tags": ["paste", "clipboard"],
    },
    {
        "id": "3",
        "app": "vscode",
        "action": "Copy line",
        "keys": {"mac": "Cmd+C", "windows": "Ctrl+C", "linux": "Ctrl+C"},
        "context": "Editor",
        "category": "Editing",
        "tags": ["copy", "clipboard"],
    },
    {
        "id": "4",
        "app": "vscode",
        "action": "Open file",
        "keys": {"mac": "Cmd+O", "windows": "Ctrl+O", "linux": "Ctrl+O"},
        "context": "Global",
        "category": "Files",
        "tags": ["file", "open"],
    },
    {
        "id": "5",
        "app": "tmux",
        "action": "Split pane horizontally",
        "keys": {"mac": "Ctrl+B %", "linux": "Ctrl+B %"},
        "context": "Pane Management",
        "category": "Panes",
        "tags": ["split", "pane", "horizontal"],
    },
    {
        "id": "6",
        "app": "vim",
        "action": "Split window vertically",
        "keys": {"mac": "Ctrl+w v", "linux": "Ctrl+w v"},
        "context": "Normal",
        "category": "Windows",
        "tags": ["split", "window", "vertical"],
    },
    {
        "id": "7",
        "app": "vscode",
        "action": "Reopen closed tab",
        "keys": {"mac": "⌘⇧T", "windows": "Ctrl+Shift+T", "linux": "Ctrl+Shift+T"},
        "context": "Global",
        "category": "Tabs",
        "tags": ["tab", "restore"],
    },
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path):
    """Keep tests away from the real ~/.katasumi and provider credentials."""
    monkeypatch.setenv("KATASUMI_DATA_PATH", str(tmp_path / "katasumi"))
    for var in (
        "KATASUMI_AI_PROVIDER",
        "KATASUMI_AI_MODEL",
        "KATASUMI_AI_BASE_URL",
        "KATASUMI_AI_TIMEOUT_MS",
        "KATASUMI_AI_API_KEY",
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "OPENROUTER_API_KEY",
        "KATASUMI_DEBUG",
        "KATASUMI_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def shortcuts() -> list[Shortcut]:
    """Sample shortcut records in store order."""
    return [Shortcut.from_dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def store(shortcuts) -> InMemoryShortcutStore:
    """In-memory store over the sample records."""
    return InMemoryShortcutStore(shortcuts)


@pytest.fixture
def empty_store() -> InMemoryShortcutStore:
    return InMemoryShortcutStore()


@pytest.fixture
def keyword_engine(store) -> KeywordSearchEngine:
    return KeywordSearchEngine(store)


class FakeProvider(LLMProvider):
    """
    Scripted provider for engine tests.

    Returns `reply` as the model text, raises `error` if set, and sleeps
    `delay` seconds first.
    """

    requires_api_key = False

    def __init__(
        self,
        reply: str = "",
        error: Optional[LLMError] = None,
        delay: float = 0.0,
        timeout_ms: int = 5000,
    ):
        super().__init__(ProviderConfig(kind=ProviderKind.OLLAMA, timeout_ms=timeout_ms))
        self.reply = reply
        self.error = error
        self.delay = delay
        self.prompts: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    @property
    def default_model(self) -> str:
        return "fake-model"

    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        self.prompts.append(prompt)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return LLMResponse(text=self.reply, model=self.model, provider=self.name)


@pytest.fixture
def make_engine(store):
    """Factory for an AISearchEngine over the sample store."""

    def _make(provider=None, on_fallback=None) -> AISearchEngine:
        return AISearchEngine(store, provider=provider, on_fallback=on_fallback)

    return _make
