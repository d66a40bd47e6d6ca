"""
Katasumi Data Model

Shortcut records, search filters and AI provider configuration.
Records are immutable: search code only reads and reorders them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class Platform(str, Enum):
    """Operating system a key combination applies to."""

    MAC = "mac"
    WINDOWS = "windows"
    LINUX = "linux"

    @classmethod
    def parse(cls, value: Any) -> Optional["Platform"]:
        """Coerce a string (any case) to a Platform, or None if unknown."""
        if isinstance(value, Platform):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


# Fixed resolution order when no platform is requested
PLATFORM_ORDER = (Platform.MAC, Platform.WINDOWS, Platform.LINUX)


class SourceType(str, Enum):
    """Where a shortcut record came from."""

    OFFICIAL = "official"
    COMMUNITY = "community"
    AI_SCRAPED = "ai-scraped"
    USER_ADDED = "user-added"


@dataclass(frozen=True)
class Keys:
    """Per-platform key combination strings."""

    mac: Optional[str] = None
    windows: Optional[str] = None
    linux: Optional[str] = None

    def get(self, platform: Platform | str) -> Optional[str]:
        """Key string for one platform (None when absent)."""
        platform = Platform.parse(platform)
        if platform is None:
            return None
        return getattr(self, platform.value)

    def resolve(self, platform: Platform | str | None = None) -> Optional[str]:
        """
        Pick the key combination to show for a record.

        An explicit platform returns exactly that field. Otherwise the first
        non-empty field in PLATFORM_ORDER wins.
        """
        if platform is not None:
            return self.get(platform)
        for candidate in PLATFORM_ORDER:
            value = self.get(candidate)
            if value:
                return value
        return None

    def to_dict(self) -> dict[str, str]:
        return {p.value: v for p in PLATFORM_ORDER if (v := self.get(p)) is not None}


@dataclass(frozen=True)
class Source:
    """Provenance metadata for a shortcut record."""

    type: SourceType
    url: str = ""
    scraped_at: Optional[datetime] = None
    confidence: float = 1.0

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Source":
        scraped_at = data.get("scrapedAt", data.get("scraped_at"))
        if isinstance(scraped_at, str):
            scraped_at = datetime.fromisoformat(scraped_at.replace("Z", "+00:00"))
        return cls(
            type=SourceType(data.get("type", SourceType.OFFICIAL.value)),
            url=data.get("url") or "",
            scraped_at=scraped_at,
            confidence=float(data.get("confidence", 1.0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "url": self.url,
            "scrapedAt": self.scraped_at.isoformat() if self.scraped_at else None,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class Shortcut:
    """A single keyboard shortcut record."""

    id: str
    app: str
    action: str
    keys: Keys = field(default_factory=Keys)
    context: Optional[str] = None
    category: Optional[str] = None
    tags: tuple[str, ...] = ()
    source: Optional[Source] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shortcut":
        """
        Build a record from its wire form.

        Accepts camelCase provenance keys so catalogs exported by other
        Katasumi clients load unchanged.
        """
        keys = data.get("keys") or {}
        source = data.get("source")
        return cls(
            id=str(data["id"]),
            app=data["app"],
            action=data["action"],
            keys=Keys(
                mac=keys.get("mac"),
                windows=keys.get("windows"),
                linux=keys.get("linux"),
            ),
            context=data.get("context"),
            category=data.get("category"),
            tags=tuple(data.get("tags") or ()),
            source=Source.from_dict(source) if source else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "app": self.app,
            "action": self.action,
            "keys": self.keys.to_dict(),
            "context": self.context,
            "category": self.category,
            "tags": list(self.tags),
        }
        if self.source is not None:
            data["source"] = self.source.to_dict()
        return data


@dataclass(frozen=True)
class AppInfo:
    """Summary of one application in a catalog."""

    name: str
    display_name: str
    category: Optional[str] = None
    platforms: tuple[Platform, ...] = ()
    shortcut_count: int = 0


@dataclass(frozen=True)
class SearchFilters:
    """Optional narrowing applied to a search."""

    app: Optional[str] = None
    platform: Optional[Platform] = None
    category: Optional[str] = None
    context: Optional[str] = None
    tag: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "SearchFilters":
        """Build filters from loose input; unknown keys and platforms are ignored."""
        data = data or {}
        return cls(
            app=data.get("app") or None,
            platform=Platform.parse(data.get("platform")),
            category=data.get("category") or None,
            context=data.get("context") or None,
            tag=data.get("tag") or None,
        )


@dataclass(frozen=True)
class ScoredShortcut:
    """A record paired with its relevance score in [0, 1]."""

    shortcut: Shortcut
    score: float


# =============================================================================
# AI provider configuration
# =============================================================================


class ProviderKind(str, Enum):
    """Supported remote (or local) language-model providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"
    OLLAMA = "ollama"

    @property
    def requires_api_key(self) -> bool:
        return self is not ProviderKind.OLLAMA

    @property
    def api_key_env(self) -> Optional[str]:
        """Vendor environment variable holding the API key."""
        return {
            ProviderKind.OPENAI: "OPENAI_API_KEY",
            ProviderKind.ANTHROPIC: "ANTHROPIC_API_KEY",
            ProviderKind.OPENROUTER: "OPENROUTER_API_KEY",
        }.get(self)


@dataclass(frozen=True)
class ProviderConfig:
    """How to reach one AI provider."""

    kind: ProviderKind
    api_key: Optional[str] = None
    model: Optional[str] = None
    base_url: Optional[str] = None
    timeout_ms: int = 5000

    def __post_init__(self):
        if not isinstance(self.kind, ProviderKind):
            object.__setattr__(self, "kind", ProviderKind(self.kind))
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0
