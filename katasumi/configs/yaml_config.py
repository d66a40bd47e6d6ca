"""
Katasumi YAML Configuration

Loading, saving, and defaults for ~/.katasumi/config.yaml.
"""

from pathlib import Path

import yaml

from katasumi.configs.logging import get_logger
from katasumi.configs.paths import ensure_data_dir, get_data_path

logger = get_logger("configs.yaml")

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# Katasumi Configuration
# Edit this file to customize Katasumi behavior.

# AI re-ranking and explanations (optional)
# Search works fully offline when no provider is configured.
ai:
  # Provider: openai, anthropic, openrouter, ollama (leave empty to disable)
  provider: ""

  # Model override (provider default if empty)
  model: ""

  # Base URL override (e.g. a remote Ollama host)
  base_url: ""

  # Single-attempt request timeout in milliseconds
  timeout_ms: 5000

  # API keys may also come from OPENAI_API_KEY, ANTHROPIC_API_KEY,
  # OPENROUTER_API_KEY or KATASUMI_AI_API_KEY
  api_keys:
    # openai: "sk-..."
    # anthropic: "sk-ant-..."
    # openrouter: "sk-or-..."

# Search defaults
search:
  keyword_limit: 50
  semantic_limit: 10
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config(path: Path | None = None) -> dict:
    """
    Load configuration from ~/.katasumi/config.yaml.

    Args:
        path: Optional explicit config file path

    Returns:
        Configuration dictionary (empty if file doesn't exist or is unreadable)
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        return {}

    try:
        data = yaml.safe_load(config_path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return {}

    if not isinstance(data, dict):
        return {}
    return data


def save_yaml_config(config: dict, path: Path | None = None) -> bool:
    """
    Save configuration to ~/.katasumi/config.yaml.

    Args:
        config: Configuration dictionary to save
        path: Optional explicit config file path

    Returns:
        True if successful
    """
    config_path = path or get_config_path()
    if path is None:
        ensure_data_dir()

    try:
        content = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
        config_path.write_text(content)
        return True
    except OSError as e:
        logger.error(f"Failed to write config {config_path}: {e}")
        return False


def create_default_config() -> bool:
    """
    Create default config.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = get_config_path()
    if config_path.exists():
        return False

    ensure_data_dir()
    config_path.write_text(DEFAULT_CONFIG_YAML)
    return True
