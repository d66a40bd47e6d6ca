"""
Ollama Provider

Uses the Ollama local LLM server for generation.
No API key required - runs entirely locally.
"""

import time
from typing import Optional

from katasumi.configs.constants import get_timeout
from katasumi.configs.logging import get_logger
from katasumi.exceptions import LLMError, LLMResponseError
from katasumi.models import ProviderConfig
from katasumi.utils.http_client import http_json_get, http_json_post

from .provider import LLMConfig, LLMProvider, LLMResponse

logger = get_logger("llm.ollama")


class OllamaProvider(LLMProvider):
    """
    LLM provider using Ollama local server.

    Configuration:
        model: Model to use (default: llama2)
        base_url: Ollama server URL (default: http://localhost:11434)

    Requires:
        Ollama to be installed and running
    """

    DEFAULT_BASE_URL = "http://localhost:11434"
    DEFAULT_MODEL = "llama2"

    requires_api_key = False

    def __init__(self, config: ProviderConfig):
        super().__init__(config)
        self._base_url = (config.base_url or self.DEFAULT_BASE_URL).rstrip("/")

    @property
    def name(self) -> str:
        return "ollama"

    @property
    def default_model(self) -> str:
        return self.DEFAULT_MODEL

    def is_available(self) -> bool:
        """Check if Ollama server is running and has models installed."""
        timeout = get_timeout("ai_availability_check_ms") / 1000.0
        try:
            data = http_json_get(f"{self._base_url}/api/tags", timeout=timeout)
        except LLMError as e:
            logger.debug(f"Ollama not reachable: {e}")
            return False

        if data.get("models"):
            return True
        logger.debug("Ollama running but no models installed")
        return False

    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """Generate completion using Ollama API."""
        config = config or LLMConfig()
        model = config.model or self.model

        start_time = time.time()

        try:
            payload = {
                "model": model,
                "prompt": prompt,
                "stream": False,
            }

            data = http_json_post(
                f"{self._base_url}/api/generate",
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=config.timeout,
            )

            latency_ms = (time.time() - start_time) * 1000

            text = data.get("response", "")
            if not text:
                raise LLMResponseError("No response from Ollama")

            # Extract token counts if available
            tokens_used = 0
            if "prompt_eval_count" in data and "eval_count" in data:
                tokens_used = data["prompt_eval_count"] + data["eval_count"]

            return LLMResponse(
                text=text,
                model=model,
                tokens_used=tokens_used,
                latency_ms=latency_ms,
                provider=self.name,
            )

        except LLMError as e:
            logger.debug(f"Ollama request failed: {e}")
            raise
