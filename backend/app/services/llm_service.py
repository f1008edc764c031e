"""
LLM Service — single Gemini client via LiteLLM.

Responsibilities:
  • Build one Gemini client from GEMINI_API_KEY on first use and reuse it
  • Send a plain text prompt and return the trimmed response text
  • Map provider failures to UpstreamError (provider status or 502)
"""

from __future__ import annotations

import logging
from typing import Any

import litellm
from litellm import acompletion

from app.config import settings
from app.utils.errors import ConfigurationError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs in dev
litellm.suppress_debug_info = True
litellm.set_verbose = False

_FALLBACK_ERROR_MESSAGE = "Failed to generate content with Gemini"


class GeminiClient:
    """Thin handle binding an API key and a model id for LiteLLM calls."""

    def __init__(self, api_key: str, model: str):
        if not api_key or not api_key.strip():
            raise ValueError("API key cannot be empty")
        if not model:
            raise ValueError("Model id cannot be empty")
        self.api_key = api_key.strip()
        self.model = model

    async def generate_content(self, prompt: str) -> Any:
        """Send the prompt as the only user message and return the raw response."""
        return await acompletion(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            api_key=self.api_key,
        )


# Process-wide handle, built lazily. Concurrent first use may build it twice;
# the last assignment wins and both instances are equivalent.
_client: GeminiClient | None = None


def get_client() -> GeminiClient:
    """Return the shared client, building it from settings on first use."""
    global _client
    if _client is not None:
        return _client

    api_key = settings.gemini_api_key
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY is not configured")

    try:
        client = GeminiClient(api_key=api_key, model=settings.gemini_model)
    except Exception as e:
        raise ConfigurationError(f"Failed to initialize Gemini client: {e}") from e

    logger.info(f"Gemini client initialized: model={client.model}")
    _client = client
    return _client


def reset_client() -> None:
    """Forget the shared client so the next call re-reads settings."""
    global _client
    _client = None


# ── Generation ───────────────────────────────────────────────────────────────


async def generate(prompt: Any) -> str:
    """
    Send a text prompt to Gemini and return the trimmed response text.

    Raises:
        ValidationError: prompt is not a non-empty string (no network call).
        ConfigurationError: API key missing or client construction failed.
        UpstreamError: the provider call failed.
    """
    if not isinstance(prompt, str) or not prompt.strip():
        raise ValidationError("Prompt must be a non-empty string")

    client = get_client()

    logger.info(f"LLM call: model={client.model} prompt={len(prompt)} chars")

    try:
        response = await client.generate_content(prompt)
    except Exception as e:
        status = getattr(e, "status_code", None)
        logger.error(f"Gemini API error: {e}")
        logger.error(
            f"Error details: message={getattr(e, 'message', str(e))!r} "
            f"status={status} name={type(e).__name__}"
        )
        raise UpstreamError(
            _error_message(e),
            status_code=_upstream_status(status),
        ) from e

    text = _extract_text(response)
    logger.info(f"LLM response: {len(text)} chars")
    return text


def _extract_text(response: Any) -> str:
    """Pull choices[0].message.content out of a completion, '' when absent."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if content is None:
        return ""
    return str(content).strip()


def _upstream_status(status: Any) -> int:
    """Keep the provider's status when it is an HTTP error code, else 502."""
    try:
        code = int(status)
    except (TypeError, ValueError):
        return 502
    if 400 <= code <= 599:
        return code
    return 502


def _error_message(exc: Exception) -> str:
    message = str(getattr(exc, "message", None) or exc).strip()
    return message or _FALLBACK_ERROR_MESSAGE
