"""Process-wide Anthropic client used by the chat and analysis endpoints."""

from __future__ import annotations

import logging

from anthropic import AsyncAnthropic

from config import MODEL_ID, get_api_key

logger = logging.getLogger(__name__)


class EmptyCompletionError(RuntimeError):
    """Raised when the model reply contains no text block."""


class ModelClient:
    """Thin wrapper around ``AsyncAnthropic.messages.create``.

    No retries, timeouts or rate limiting are layered on top; the SDK's own
    defaults apply and its exceptions propagate unchanged.
    """

    def __init__(self, anthropic: AsyncAnthropic, model: str = MODEL_ID):
        self.anthropic = anthropic
        self.model = model

    async def complete(self, *, system: str, messages: list[dict], max_tokens: int) -> str:
        message = await self.anthropic.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            system=system,
            messages=messages,
        )
        parts = [block.text for block in message.content if getattr(block, "type", None) == "text"]
        if not parts:
            raise EmptyCompletionError(f"Model {self.model} returned no text content")
        return "".join(parts)

    async def close(self) -> None:
        await self.anthropic.close()


_client: ModelClient | None = None


def init_client() -> ModelClient:
    """Create the shared client. Called once at app startup.

    A missing API key is not fatal here; upstream calls fail at request time.
    """
    global _client
    _client = ModelClient(AsyncAnthropic(api_key=get_api_key()))
    return _client


async def close_client() -> None:
    """Release the client's connection pool. Called at app shutdown."""
    global _client
    if _client:
        await _client.close()
        _client = None


def get_client() -> ModelClient:
    """Return the shared client. Raises if not initialized."""
    if _client is None:
        raise RuntimeError("Model client not initialized. Call init_client() first.")
    return _client
