"""
OpenAI Provider

Uses the OpenAI chat completions API.
Requires an API key (OPENAI_API_KEY or config.yaml).
"""

import time
from typing import Any, Optional

from katasumi.configs.logging import get_logger
from katasumi.exceptions import LLMError, LLMResponseError
from katasumi.models import ProviderConfig
from katasumi.utils.http_client import http_json_post

from .prompts import SYSTEM_PROMPT
from .provider import LLMConfig, LLMProvider, LLMResponse

logger = get_logger("llm.openai")


class OpenAIProvider(LLMProvider):
    """
    LLM provider using the OpenAI chat completions API.

    Configuration:
        model: Model to use (default: gpt-4-turbo)
        base_url: API URL (default: https://api.openai.com/v1)
    """

    DEFAULT_BASE_URL = "https://api.openai.com/v1"
    DEFAULT_MODEL = "gpt-4-turbo"

    def __init__(self, config: ProviderConfig):
        super().__init__(config)
        self._base_url = (config.base_url or self.DEFAULT_BASE_URL).rstrip("/")

    @property
    def name(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return self.DEFAULT_MODEL

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/chat/completions"

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    def _payload(self, prompt: str, model: str, config: LLMConfig) -> dict[str, Any]:
        return {
            "model": model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": config.temperature,
        }

    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """Generate completion using an OpenAI-compatible chat API."""
        api_key = self._require_api_key()
        config = config or LLMConfig()
        model = config.model or self.model

        start_time = time.time()

        try:
            data = http_json_post(
                self.endpoint,
                json=self._payload(prompt, model, config),
                headers=self._headers(api_key),
                timeout=config.timeout,
            )

            latency_ms = (time.time() - start_time) * 1000

            choices = data.get("choices") or []
            if not choices:
                raise LLMResponseError(f"{self.name} returned no choices")

            text = (choices[0].get("message") or {}).get("content") or ""
            if not text:
                raise LLMResponseError(f"No response from {self.name}")

            usage = data.get("usage") or {}
            return LLMResponse(
                text=text,
                model=data.get("model", model),
                tokens_used=usage.get("total_tokens", 0),
                latency_ms=latency_ms,
                provider=self.name,
            )

        except LLMError as e:
            logger.debug(f"{self.name} request failed: {e}")
            raise
