"""
Katasumi Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All Katasumi-specific exceptions inherit from KatasumiError.

Usage:
    from katasumi.exceptions import KatasumiError, LLMError

    try:
        provider.generate(prompt)
    except LLMError as e:
        logger.warning(f"Provider failed: {e}")
"""


class KatasumiError(Exception):
    """Base exception for all Katasumi errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(KatasumiError):
    """Error in Katasumi configuration."""

    pass


# =============================================================================
# Storage Errors
# =============================================================================


class StorageError(KatasumiError):
    """Base class for record store errors."""

    pass


class StoreLoadError(StorageError):
    """Shortcut catalog could not be read or decoded."""

    pass


# =============================================================================
# LLM Provider Errors
# =============================================================================


class LLMError(KatasumiError):
    """Base class for LLM provider errors."""

    pass


class LLMMissingCredentialError(LLMError):
    """Provider requires an API key and none was configured."""

    pass


class LLMConnectionError(LLMError):
    """Failed to connect to LLM provider."""

    pass


class LLMTimeoutError(LLMError):
    """LLM request timed out."""

    pass


class LLMHTTPError(LLMError):
    """LLM provider answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        if response_text:
            details["response_text"] = response_text[:200]
        super().__init__(message, details)
        self.status_code = status_code
        self.response_text = response_text


class LLMResponseError(LLMError):
    """Invalid or unexpected response from LLM."""

    pass
