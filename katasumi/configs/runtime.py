"""
Katasumi Runtime Configuration

Configuration merging logic for the AI provider and search defaults.
Combines defaults, YAML config, and environment variables.
"""

import os
from typing import Optional

from katasumi.configs.constants import (
    DEFAULT_KEYWORD_LIMIT,
    DEFAULT_SEMANTIC_LIMIT,
    TIMEOUTS,
)
from katasumi.configs.logging import get_logger
from katasumi.configs.yaml_config import load_yaml_config
from katasumi.exceptions import ConfigurationError
from katasumi.models import ProviderConfig, ProviderKind

logger = get_logger("configs.runtime")

# --- Default Runtime Configuration ---

DEFAULT_CONFIG = {
    "keyword_limit": DEFAULT_KEYWORD_LIMIT,
    "semantic_limit": DEFAULT_SEMANTIC_LIMIT,
    "ai_provider": "none",
    "ai_timeout_ms": TIMEOUTS["ai_request_ms"],
}


def get_ai_provider_name(yaml_config: Optional[dict] = None) -> str:
    """
    Get the configured AI provider name.

    Priority:
    1. KATASUMI_AI_PROVIDER env var
    2. ai.provider from config.yaml
    3. Default: "none"

    Returns:
        Lowercased provider name, or "none"
    """
    env_provider = os.environ.get("KATASUMI_AI_PROVIDER", "").strip().lower()
    if env_provider:
        return env_provider

    if yaml_config is None:
        yaml_config = load_yaml_config()
    ai_config = yaml_config.get("ai") or {}
    config_provider = str(ai_config.get("provider") or "").strip().lower()
    return config_provider or "none"


def _resolve_api_key(kind: ProviderKind, ai_config: dict) -> Optional[str]:
    """Generic env var, then vendor env var, then config.yaml api_keys."""
    generic = os.environ.get("KATASUMI_AI_API_KEY")
    if generic:
        return generic
    if kind.api_key_env:
        vendor = os.environ.get(kind.api_key_env)
        if vendor:
            return vendor
    api_keys = ai_config.get("api_keys") or {}
    return api_keys.get(kind.value) or None


def get_provider_config(yaml_config: Optional[dict] = None) -> Optional[ProviderConfig]:
    """
    Build the AI provider configuration from defaults, YAML, and environment.

    Priority (highest wins):
    1. Environment variables
    2. YAML config file
    3. Defaults

    Returns:
        ProviderConfig, or None when no provider is configured

    Raises:
        ConfigurationError: Unknown provider name or invalid timeout
    """
    if yaml_config is None:
        yaml_config = load_yaml_config()
    ai_config = yaml_config.get("ai") or {}

    name = get_ai_provider_name(yaml_config)
    if name == "none":
        return None

    try:
        kind = ProviderKind(name)
    except ValueError as e:
        valid = ", ".join(k.value for k in ProviderKind)
        raise ConfigurationError(
            f"Unknown AI provider: {name}", {"valid": valid}
        ) from e

    model = os.environ.get("KATASUMI_AI_MODEL") or ai_config.get("model") or None
    base_url = os.environ.get("KATASUMI_AI_BASE_URL") or ai_config.get("base_url") or None

    raw_timeout = os.environ.get("KATASUMI_AI_TIMEOUT_MS") or ai_config.get("timeout_ms")
    try:
        timeout_ms = int(raw_timeout) if raw_timeout else DEFAULT_CONFIG["ai_timeout_ms"]
        config = ProviderConfig(
            kind=kind,
            api_key=_resolve_api_key(kind, ai_config),
            model=model,
            base_url=base_url,
            timeout_ms=timeout_ms,
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid AI timeout: {raw_timeout}") from e

    if kind.requires_api_key and not config.api_key:
        # Not fatal: semantic search falls back to keyword results
        logger.info(f"No API key configured for {kind.value}; AI features will fall back")

    return config


def get_full_config() -> dict:
    """
    Get search configuration merged from defaults and YAML.

    Returns:
        Merged configuration dict
    """
    config = DEFAULT_CONFIG.copy()
    yaml_config = load_yaml_config()

    search_config = yaml_config.get("search") or {}
    for key in ("keyword_limit", "semantic_limit"):
        if key in search_config:
            config[key] = int(search_config[key])

    config["ai_provider"] = get_ai_provider_name(yaml_config)
    return config
