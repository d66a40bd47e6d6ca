"""
Anthropic API Provider

Uses the Anthropic SDK for direct API access.
Requires an API key (ANTHROPIC_API_KEY or config.yaml).
"""

import time
from typing import Optional

from anthropic import Anthropic, APIConnectionError, APIStatusError, APITimeoutError

from katasumi.configs.logging import get_logger
from katasumi.exceptions import (
    LLMConnectionError,
    LLMHTTPError,
    LLMResponseError,
    LLMTimeoutError,
)
from katasumi.models import ProviderConfig

from .provider import LLMConfig, LLMProvider, LLMResponse

logger = get_logger("llm.anthropic")


class AnthropicProvider(LLMProvider):
    """
    LLM provider using the Anthropic Messages API.

    Configuration:
        model: Model to use (default: claude-3-sonnet-20240229)
        base_url: API URL override (SDK default when unset)
    """

    DEFAULT_MODEL = "claude-3-sonnet-20240229"

    def __init__(self, config: ProviderConfig):
        super().__init__(config)
        self._client: Optional[Anthropic] = None

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def default_model(self) -> str:
        return self.DEFAULT_MODEL

    def _get_client(self) -> Anthropic:
        if self._client is None:
            # Single attempt per call; the engine falls back instead of retrying
            self._client = Anthropic(
                api_key=self._require_api_key(),
                base_url=self.config.base_url or None,
                timeout=self.config.timeout_seconds,
                max_retries=0,
            )
        return self._client

    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """Generate completion using Anthropic API."""
        client = self._get_client()
        config = config or LLMConfig()
        model = config.model or self.model

        start_time = time.time()

        try:
            response = client.messages.create(
                model=model,
                max_tokens=config.max_tokens,
                messages=[{"role": "user", "content": prompt}],
                timeout=config.timeout,
            )
        except APITimeoutError as e:
            raise LLMTimeoutError(f"Anthropic request timed out: {e}") from e
        except APIConnectionError as e:
            raise LLMConnectionError(f"Anthropic connection failed: {e}") from e
        except APIStatusError as e:
            raise LLMHTTPError(
                f"Anthropic API error: {e.status_code}",
                status_code=e.status_code,
                response_text=str(e),
            ) from e

        latency_ms = (time.time() - start_time) * 1000

        content = getattr(response, "content", None) or []
        text = getattr(content[0], "text", "") if content else ""
        if not text:
            raise LLMResponseError("No response from Anthropic")

        # Extract token usage
        tokens_used = 0
        if hasattr(response, "usage"):
            tokens_used = (
                getattr(response.usage, "input_tokens", 0)
                + getattr(response.usage, "output_tokens", 0)
            )

        return LLMResponse(
            text=text,
            model=model,
            tokens_used=tokens_used,
            latency_ms=latency_ms,
            provider=self.name,
        )
