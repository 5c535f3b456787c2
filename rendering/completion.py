"""
Chat-model backends that turn a documentation prompt into markdown text.

Every backend exposes ``complete(prompt) -> str``. Clients are built by
``create_backend()`` and handed to the backend, so nothing here keeps a
module-level API client.
"""

import hashlib
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import anthropic
import openai
from anthropic import Anthropic
from openai import OpenAI
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from rendering.config import (
    OPENAI_API_KEY,
    CLAUDE_API_KEY,
    OPENAI_MODELS,
    CLAUDE_MODELS,
    MODEL_ALIASES,
    CLAUDE_MAX_TOKENS,
    USE_MOCK_COMPLETION,
    COMPLETION_MAX_RETRIES,
    COMPLETION_RETRY_MIN_WAIT,
    COMPLETION_RETRY_MAX_WAIT,
)

logger = logging.getLogger(__name__)


class CompletionError(RuntimeError):
    """Raised when a model response carries no usable text."""


# Only retry on transient / network-related errors.
# Non-retryable errors (authentication, bad request, ...) propagate immediately.
_RETRYABLE_EXCEPTIONS = (
    openai.RateLimitError,
    openai.APIConnectionError,
    openai.APITimeoutError,
    openai.InternalServerError,
    anthropic.RateLimitError,
    anthropic.APIConnectionError,
    anthropic.APITimeoutError,
    anthropic.InternalServerError,
)

_completion_retry = retry(
    retry=retry_if_exception_type(_RETRYABLE_EXCEPTIONS),
    wait=wait_exponential(
        multiplier=1,
        min=COMPLETION_RETRY_MIN_WAIT,
        max=COMPLETION_RETRY_MAX_WAIT,
    ),
    stop=stop_after_attempt(COMPLETION_MAX_RETRIES),
    reraise=True,
)


class CompletionBackend(ABC):
    """A chat model answering a single user prompt."""

    def __init__(self, model: str):
        self.model = model

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """Return the model's text answer for ``prompt``."""


class OpenAIChatBackend(CompletionBackend):
    """OpenAI chat completions backend (``gpt3``/``gpt4`` aliases)."""

    def __init__(self, client: OpenAI, model: str):
        super().__init__(model)
        self.client = client

    @_completion_retry
    def complete(self, prompt: str) -> str:
        logger.debug("Requesting chat completion (model=%s, %d chars)", self.model, len(prompt))
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        content = response.choices[0].message.content if response.choices else None
        if not isinstance(content, str):
            raise CompletionError(f"Model {self.model} returned no text content")
        return content


class ClaudeBackend(CompletionBackend):
    """Anthropic messages backend (``claude`` alias)."""

    def __init__(self, client: Anthropic, model: str, max_tokens: int = CLAUDE_MAX_TOKENS):
        super().__init__(model)
        self.client = client
        self.max_tokens = max_tokens

    @_completion_retry
    def complete(self, prompt: str) -> str:
        logger.debug("Requesting message (model=%s, %d chars)", self.model, len(prompt))
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        blocks = response.content or []
        text = getattr(blocks[0], "text", None) if blocks else None
        if not isinstance(text, str):
            raise CompletionError(f"Model {self.model} returned no text content")
        return text


class MockBackend(CompletionBackend):
    """Deterministic offline backend; the same prompt always yields the same text."""

    def complete(self, prompt: str) -> str:
        digest = hashlib.md5(prompt.encode("utf-8")).hexdigest()[:12]
        return f"## Mock documentation\n\nGenerated offline by {self.model} (prompt {digest}).\n"


def create_backend(
    model: str,
    openai_api_key: Optional[str] = None,
    claude_api_key: Optional[str] = None,
    use_mock: Optional[bool] = None,
    **client_kwargs: Any,
) -> CompletionBackend:
    """Build the backend for a command-line model alias.

    Args:
        model: One of ``gpt3``, ``gpt4``, ``claude``.
        openai_api_key: Overrides ``OPENAI_API_KEY`` from the environment.
        claude_api_key: Overrides ``CLAUDE_API_KEY`` from the environment.
        use_mock: Overrides ``USE_MOCK_COMPLETION``.
        **client_kwargs: Extra keyword arguments for the API client.

    Returns:
        A configured CompletionBackend.

    Raises:
        ValueError: If the alias is unknown or the needed API key is empty.
    """
    if model not in MODEL_ALIASES:
        raise ValueError(f"Unknown model {model!r}; expected one of: {', '.join(MODEL_ALIASES)}")

    if USE_MOCK_COMPLETION if use_mock is None else use_mock:
        logger.info("Using MOCK completions for model alias %s", model)
        return MockBackend(model)

    if model in OPENAI_MODELS:
        api_key = openai_api_key or OPENAI_API_KEY
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY is not set. "
                "Add it to your .env file or export it as an environment variable."
            )
        backend = OpenAIChatBackend(OpenAI(api_key=api_key, **client_kwargs), OPENAI_MODELS[model])
    else:
        api_key = claude_api_key or CLAUDE_API_KEY
        if not api_key:
            raise ValueError(
                "CLAUDE_API_KEY is not set. "
                "Add it to your .env file or export it as an environment variable."
            )
        backend = ClaudeBackend(Anthropic(api_key=api_key, **client_kwargs), CLAUDE_MODELS[model])

    logger.info("Completion backend initialized (alias=%s, model=%s)", model, backend.model)
    return backend
