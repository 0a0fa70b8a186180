"""Generative text model backed by Anthropic's Claude API."""

import logging
import os

import anthropic
from anthropic.types import TextBlock

from beacon.data import APICallUsage, Usage
from beacon.errors import ErrorCategory, UpstreamTransportError

logger = logging.getLogger(__name__)


class ClaudeGenerator:
    """Complete prompts with Claude.

    One request per call, no conversation state and no retries.

    Args:
        model: Anthropic model ID to use.
        api_key: API key (defaults to CLAUDE_API_KEY env var).
        max_tokens: Completion length limit.
        temperature: Sampling temperature.
    """

    def __init__(
        self,
        *,
        model: str = "claude-haiku-4-5-20251001",
        api_key: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.0,
    ) -> None:
        self._model = model
        resolved_key = api_key or os.environ.get("CLAUDE_API_KEY")
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key, max_retries=0)
        self._max_tokens = max_tokens
        self._temperature = temperature

    async def generate(self, prompt: str) -> tuple[str, Usage]:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APITimeoutError as e:
            raise UpstreamTransportError(
                "claude", "request timed out", category=ErrorCategory.TIMEOUT
            ) from e
        except anthropic.APIError as e:
            raise UpstreamTransportError("claude", str(e)) from e

        usage = Usage(
            api_calls=[
                APICallUsage(
                    model=self._model,
                    input_tokens=response.usage.input_tokens,
                    output_tokens=response.usage.output_tokens,
                ),
            ],
        )

        text = "".join(block.text for block in response.content if isinstance(block, TextBlock))
        if not text:
            logger.warning("Claude returned no text content (stop_reason=%s)", response.stop_reason)
        return (text, usage)
