"""
LLM Provider Abstraction

Unified interface for the AI providers used to re-rank search results and
explain shortcuts. Every adapter shares prompt construction, reply parsing
and the single-attempt timeout contract from LLMProvider.
"""

from katasumi.configs.logging import get_logger
from katasumi.exceptions import ConfigurationError
from katasumi.models import ProviderConfig, ProviderKind

from .anthropic_provider import AnthropicProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider
from .openrouter_provider import OpenRouterProvider
from .provider import LLMConfig, LLMProvider, LLMResponse, ProviderResult

logger = get_logger("llm")

__all__ = [
    "LLMProvider",
    "LLMConfig",
    "LLMResponse",
    "ProviderResult",
    "AnthropicProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
    "create_provider",
]


def create_provider(config: ProviderConfig) -> LLMProvider:
    """
    Create the adapter for a provider configuration.

    Args:
        config: Provider kind plus optional key, model, base URL and timeout

    Returns:
        LLMProvider instance (not yet contacted)

    Raises:
        ConfigurationError: Unsupported provider kind
    """
    kind = config.kind
    if kind is ProviderKind.OPENAI:
        provider: LLMProvider = OpenAIProvider(config)
    elif kind is ProviderKind.ANTHROPIC:
        provider = AnthropicProvider(config)
    elif kind is ProviderKind.OPENROUTER:
        provider = OpenRouterProvider(config)
    elif kind is ProviderKind.OLLAMA:
        provider = OllamaProvider(config)
    else:
        raise ConfigurationError(f"Unsupported AI provider: {kind}")

    logger.debug(f"Created {provider.name} provider (model: {provider.model})")
    return provider
