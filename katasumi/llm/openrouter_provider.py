"""
OpenRouter Provider

Uses the OpenRouter API for access to multiple model providers.
Requires an API key (OPENROUTER_API_KEY or config.yaml).
"""

from .openai_provider import OpenAIProvider


class OpenRouterProvider(OpenAIProvider):
    """
    LLM provider using OpenRouter's OpenAI-compatible API.

    Configuration:
        model: Model to use (default: openai/gpt-4-turbo)
        base_url: API URL (default: https://openrouter.ai/api/v1)
    """

    DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
    DEFAULT_MODEL = "openai/gpt-4-turbo"

    @property
    def name(self) -> str:
        return "openrouter"

    def _headers(self, api_key: str) -> dict[str, str]:
        headers = super()._headers(api_key)
        headers["HTTP-Referer"] = "https://katasumi.dev"
        headers["X-Title"] = "Katasumi"
        return headers
