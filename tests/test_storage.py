"""
Tests for the in-memory record store and the data model.
"""

import json
from datetime import datetime
from pathlib import Path

import pytest
import yaml

from katasumi.exceptions import StoreLoadError
from katasumi.models import Keys, Platform, SearchFilters, Shortcut, Source, SourceType
from katasumi.storage import InMemoryShortcutStore

from conftest import SAMPLE_RECORDS


class TestInMemoryShortcutStore:
    """Tests for InMemoryShortcutStore queries."""

    def test_search_filters(self, store):
        """Test app, category, tag and query narrowing."""
        assert [s.id for s in store.search(app="vim")] == ["1", "2", "6"]
        assert [s.id for s in store.search(category="Files")] == ["4"]
        assert [s.id for s in store.search(tag="split")] == ["5", "6"]
        assert [s.id for s in store.search(query="CLIP")] == ["1", "2", "3"]

    def test_search_pagination(self, store):
        """Test limit and offset slice store order."""
        assert [s.id for s in store.search(limit=2, offset=1)] == ["2", "3"]

    def test_by_id_and_app(self, store):
        """Test point lookups."""
        assert store.by_id("4").action == "Open file"
        assert store.by_id("missing") is None
        assert [s.id for s in store.by_app("tmux")] == ["5"]

    def test_apps(self, store):
        """Test app summaries are derived from records."""
        vim = store.app_info("vim")
        assert vim.shortcut_count == 3
        assert vim.platforms == (Platform.MAC, Platform.LINUX)
        assert store.app_info("emacs") is None
        assert [a.name for a in store.apps()] == ["vim", "vscode", "tmux"]

    def test_returns_fresh_lists(self, store):
        """Test callers cannot mutate store state."""
        store.search().clear()
        assert len(store.search()) == len(SAMPLE_RECORDS)


class TestCatalogLoading:
    """Tests for InMemoryShortcutStore.from_file."""

    def test_load_json_list(self, tmp_path: Path):
        """Test a JSON list of records loads."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(SAMPLE_RECORDS))
        store = InMemoryShortcutStore.from_file(path)
        assert len(store) == len(SAMPLE_RECORDS)

    def test_load_yaml_mapping(self, tmp_path: Path):
        """Test a YAML mapping with a shortcuts key loads."""
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({"shortcuts": SAMPLE_RECORDS[:2]}, allow_unicode=True))
        store = InMemoryShortcutStore.from_file(path)
        assert store.by_id("2").action == "Paste"

    def test_missing_file(self, tmp_path: Path):
        """Test a missing file raises StoreLoadError."""
        with pytest.raises(StoreLoadError):
            InMemoryShortcutStore.from_file(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path):
        """Test undecodable content raises StoreLoadError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(StoreLoadError):
            InMemoryShortcutStore.from_file(path)

    def test_no_shortcut_list(self, tmp_path: Path):
        """Test a document without records raises StoreLoadError."""
        path = tmp_path / "empty.yaml"
        path.write_text("apps: []\n")
        with pytest.raises(StoreLoadError):
            InMemoryShortcutStore.from_file(path)

    def test_malformed_record(self, tmp_path: Path):
        """Test a record missing required fields raises StoreLoadError."""
        path = tmp_path / "partial.json"
        path.write_text(json.dumps([{"id": "1", "app": "vim"}]))
        with pytest.raises(StoreLoadError):
            InMemoryShortcutStore.from_file(path)


class TestModels:
    """Tests for data model helpers."""

    def test_keys_resolve_order(self):
        """Test mac, then windows, then linux when no platform is given."""
        assert Keys(windows="Ctrl+C", linux="Ctrl+Shift+C").resolve() == "Ctrl+C"
        assert Keys(linux="Ctrl+Shift+C").resolve() == "Ctrl+Shift+C"
        assert Keys().resolve() is None

    def test_keys_resolve_explicit_platform(self):
        """Test an explicit platform uses only that field."""
        keys = Keys(mac="Cmd+C")
        assert keys.resolve("mac") == "Cmd+C"
        assert keys.resolve(Platform.WINDOWS) is None

    def test_source_confidence_bounds(self):
        """Test confidence outside [0, 1] is rejected."""
        with pytest.raises(ValueError):
            Source(type=SourceType.COMMUNITY, confidence=1.5)

    def test_shortcut_from_dict(self):
        """Test wire records with camelCase provenance load."""
        shortcut = Shortcut.from_dict(
            {
                "id": 9,
                "app": "vim",
                "action": "Undo",
                "keys": {"mac": "u"},
                "tags": ["undo"],
                "source": {
                    "type": "ai-scraped",
                    "url": "https://example.com",
                    "scrapedAt": "2024-01-02T03:04:05Z",
                    "confidence": 0.7,
                },
            }
        )
        assert shortcut.id == "9"
        assert shortcut.tags == ("undo",)
        assert shortcut.source.type is SourceType.AI_SCRAPED
        assert shortcut.source.scraped_at == datetime.fromisoformat("2024-01-02T03:04:05+00:00")
        assert shortcut.to_dict()["source"]["confidence"] == 0.7

    def test_filters_from_dict_ignores_unknowns(self):
        """Test loose filter input never raises."""
        filters = SearchFilters.from_dict({"platform": "amiga", "app": "", "color": "red"})
        assert filters == SearchFilters()
        assert SearchFilters.from_dict(None) == SearchFilters()
