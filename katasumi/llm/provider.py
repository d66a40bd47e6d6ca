"""
Base LLM Provider Interface

Defines the abstract base class for all provider adapters plus the shared
call contract: one attempt, bounded by a single timeout, with failures
returned as values instead of raised.
"""

import time
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

from katasumi.configs.logging import get_logger
from katasumi.exceptions import LLMError, LLMMissingCredentialError, LLMTimeoutError
from katasumi.models import Platform, ProviderConfig, Shortcut
from katasumi.llm.prompts import (
    build_explain_prompt,
    build_search_prompt,
    parse_explain_reply,
    parse_search_reply,
)

logger = get_logger("llm.provider")

T = TypeVar("T")


@dataclass
class LLMConfig:
    """Configuration for an LLM generation request."""

    model: Optional[str] = None  # Use provider default if None
    max_tokens: int = 1024
    temperature: float = 0.3
    timeout: float = 5.0  # seconds


@dataclass
class LLMResponse:
    """Response from an LLM provider."""

    text: str
    model: str
    tokens_used: int = 0
    latency_ms: float = 0.0
    provider: str = ""


@dataclass(frozen=True)
class ProviderResult(Generic[T]):
    """Outcome of a provider call: a value on success, the error otherwise."""

    value: Optional[T] = None
    error: Optional[LLMError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ProviderResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LLMError) -> "ProviderResult[T]":
        return cls(error=error)


class LLMProvider(ABC):
    """
    Abstract base class for LLM providers.

    Adapters implement generate() for their vendor's request and response
    envelopes. Prompt construction, reply parsing, the timeout and the
    conversion of failures into ProviderResult values live here.
    """

    requires_api_key: bool = True

    def __init__(self, config: ProviderConfig):
        self.config = config

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging and identification."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Default model to use if none configured."""
        pass

    @property
    def model(self) -> str:
        return self.config.model or self.default_model

    @property
    def api_key(self) -> Optional[str]:
        return self.config.api_key

    def is_available(self) -> bool:
        """
        Check if provider is configured.

        Returns:
            True if the provider can be used, False otherwise.
        """
        return bool(self.api_key) or not self.requires_api_key

    @abstractmethod
    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """
        Generate a completion for the given prompt.

        Args:
            prompt: The prompt text
            config: Optional configuration overrides

        Returns:
            LLMResponse with generated text and metadata

        Raises:
            LLMError: If generation fails
        """
        pass

    def _require_api_key(self) -> str:
        if not self.api_key:
            raise LLMMissingCredentialError(f"{self.name} API key is required")
        return self.api_key

    def _effective_timeout(self, deadline: Optional[float]) -> float:
        timeout = self.config.timeout_seconds
        if deadline is not None:
            timeout = min(timeout, deadline - time.monotonic())
        return timeout

    def complete(self, prompt: str, deadline: Optional[float] = None) -> ProviderResult[LLMResponse]:
        """
        Run one generate() call bounded by the configured timeout.

        The call runs on a worker thread; if it has not finished when the
        timeout (or the caller's deadline, if sooner) expires, the result is
        abandoned and an LLMTimeoutError is returned. No retry is attempted.

        Args:
            prompt: The prompt text
            deadline: Optional absolute time.monotonic() deadline

        Returns:
            ProviderResult holding the LLMResponse or the failure
        """
        if self.requires_api_key and not self.api_key:
            return ProviderResult.failure(
                LLMMissingCredentialError(f"{self.name} API key is required")
            )

        timeout = self._effective_timeout(deadline)
        if timeout <= 0:
            return ProviderResult.failure(LLMTimeoutError(f"{self.name}: deadline already passed"))

        config = LLMConfig(model=self.model, timeout=timeout)
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"katasumi-{self.name}")
        future = executor.submit(self.generate, prompt, config)
        try:
            response = future.result(timeout=timeout)
        except FutureTimeoutError:
            # The worker is abandoned, not stopped; only the transport timeout ends it
            return ProviderResult.failure(
                LLMTimeoutError(f"{self.name} timed out after {timeout*1000:.0f}ms")
            )
        except LLMError as e:
            return ProviderResult.failure(e)
        except Exception as e:
            logger.exception(f"Unexpected {self.name} failure")
            return ProviderResult.failure(LLMError(f"Unexpected {self.name} failure: {e}"))
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        logger.debug(f"{self.name} answered in {response.latency_ms:.1f}ms ({response.model})")
        return ProviderResult.success(response)

    def rank_shortcuts(
        self,
        query: str,
        shortcuts: Sequence[Shortcut],
        max_results: int,
        deadline: Optional[float] = None,
    ) -> ProviderResult[list[str]]:
        """
        Ask the model to order candidate IDs by relevance to a query.

        Returns:
            ProviderResult holding the ranked IDs or the failure
        """
        prompt = build_search_prompt(query, shortcuts, max_results)
        result = self.complete(prompt, deadline=deadline)
        if not result.ok:
            return ProviderResult.failure(result.error)
        try:
            return ProviderResult.success(parse_search_reply(result.value.text))
        except LLMError as e:
            return ProviderResult.failure(e)

    def explain_shortcut(
        self,
        shortcut: Shortcut,
        platform: Optional[Platform] = None,
        deadline: Optional[float] = None,
    ) -> ProviderResult[str]:
        """
        Ask the model for a one-sentence plain-English explanation.

        Returns:
            ProviderResult holding the explanation or the failure
        """
        prompt = build_explain_prompt(shortcut, platform)
        result = self.complete(prompt, deadline=deadline)
        if not result.ok:
            return ProviderResult.failure(result.error)
        try:
            return ProviderResult.success(parse_explain_reply(result.value.text))
        except LLMError as e:
            return ProviderResult.failure(e)
