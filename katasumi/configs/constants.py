"""
Katasumi Constants

Static configuration values that rarely change: search limits and
timeout configuration.
"""

# --- Search Limits ---

# Candidate retrieval cap for keyword search (effectively unbounded)
RETRIEVAL_LIMIT = 10000

# Recall pool the semantic engine asks the keyword engine for
SEMANTIC_CANDIDATE_POOL = 50

DEFAULT_KEYWORD_LIMIT = 50
DEFAULT_SEMANTIC_LIMIT = 10

# Default page size for direct store queries
DEFAULT_STORE_LIMIT = 100

# --- Timeout Configuration ---
# Centralized timeout values (milliseconds)

TIMEOUTS = {
    # Single remote call to an AI provider (search or explain)
    "ai_request_ms": 5000,
    # Ollama availability probe
    "ai_availability_check_ms": 2000,
}


def get_timeout(key: str, default: int | float | None = None) -> int | float:
    """
    Get a timeout value by key.

    Args:
        key: Timeout key from TIMEOUTS dict
        default: Default value if key not found

    Returns:
        Timeout value in milliseconds
    """
    if default is None:
        default = TIMEOUTS["ai_request_ms"]
    return TIMEOUTS.get(key, default)
