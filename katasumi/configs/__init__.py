"""
Katasumi Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from katasumi.configs.logging import get_logger, setup_logging

# Paths
from katasumi.configs.paths import get_data_path, ensure_data_dir

# Constants
from katasumi.configs.constants import (
    DEFAULT_KEYWORD_LIMIT,
    DEFAULT_SEMANTIC_LIMIT,
    RETRIEVAL_LIMIT,
    SEMANTIC_CANDIDATE_POOL,
    TIMEOUTS,
    get_timeout,
)

# YAML config
from katasumi.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    get_config_path,
    load_yaml_config,
    save_yaml_config,
    create_default_config,
)

# Note: runtime.py is NOT imported here; it depends on katasumi.models.
# Import it directly: from katasumi.configs.runtime import get_provider_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # Constants
    "DEFAULT_KEYWORD_LIMIT",
    "DEFAULT_SEMANTIC_LIMIT",
    "RETRIEVAL_LIMIT",
    "SEMANTIC_CANDIDATE_POOL",
    "TIMEOUTS",
    "get_timeout",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "save_yaml_config",
    "create_default_config",
]
