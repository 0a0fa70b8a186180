"""Tests for ClaudeGenerator."""

from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import pytest
from anthropic.types import TextBlock

from beacon.data import Usage
from beacon.errors import ErrorCategory, UpstreamTransportError
from beacon.model.claude import ClaudeGenerator


def _make_mock_usage(input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Create a mock usage object."""
    usage = MagicMock()
    usage.input_tokens = input_tokens
    usage.output_tokens = output_tokens
    return usage


@pytest.fixture
def mock_response() -> MagicMock:
    """Create a mock API response with a real TextBlock."""
    response = MagicMock()
    response.content = [TextBlock(type="text", text='{"verdict": "False", "explanation": "x"}')]
    response.usage = _make_mock_usage()
    return response


@pytest.fixture
def generator(mock_response: MagicMock) -> ClaudeGenerator:
    """Create a generator with mocked API client."""
    gen = ClaudeGenerator(api_key="test-key")
    object.__setattr__(gen._client.messages, "create", AsyncMock(return_value=mock_response))
    return gen


async def test_generate_returns_text(generator: ClaudeGenerator) -> None:
    text, _ = await generator.generate("Is the sky green?")
    assert text == '{"verdict": "False", "explanation": "x"}'


async def test_generate_returns_usage(generator: ClaudeGenerator) -> None:
    _, usage = await generator.generate("prompt")

    assert isinstance(usage, Usage)
    assert len(usage.api_calls) == 1
    assert usage.input_tokens == 100
    assert usage.output_tokens == 50
    assert usage.api_calls[0].model == "claude-haiku-4-5-20251001"


async def test_generate_calls_api_with_correct_params() -> None:
    gen = ClaudeGenerator(
        api_key="test-key", model="claude-3-haiku-20240307", max_tokens=512, temperature=0.2
    )
    response = MagicMock()
    response.content = [TextBlock(type="text", text="{}")]
    response.usage = _make_mock_usage()
    object.__setattr__(gen._client.messages, "create", AsyncMock(return_value=response))

    await gen.generate("The prompt")

    mock_create: AsyncMock = gen._client.messages.create  # type: ignore[assignment]
    call_kwargs = dict(mock_create.call_args.kwargs)
    assert call_kwargs["model"] == "claude-3-haiku-20240307"
    assert call_kwargs["max_tokens"] == 512
    assert call_kwargs["temperature"] == 0.2
    assert call_kwargs["messages"] == [{"role": "user", "content": "The prompt"}]


async def test_generate_joins_text_blocks() -> None:
    gen = ClaudeGenerator(api_key="test-key")
    response = MagicMock()
    response.content = [
        TextBlock(type="text", text='{"a": '),
        TextBlock(type="text", text="1}"),
    ]
    response.usage = _make_mock_usage()
    object.__setattr__(gen._client.messages, "create", AsyncMock(return_value=response))

    text, _ = await gen.generate("prompt")
    assert text == '{"a": 1}'


async def test_timeout_maps_to_timeout_category() -> None:
    gen = ClaudeGenerator(api_key="test-key")
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    object.__setattr__(
        gen._client.messages,
        "create",
        AsyncMock(side_effect=anthropic.APITimeoutError(request=request)),
    )

    with pytest.raises(UpstreamTransportError) as exc_info:
        await gen.generate("prompt")
    assert exc_info.value.category is ErrorCategory.TIMEOUT
    assert exc_info.value.service == "claude"


async def test_connection_error_maps_to_transport_category() -> None:
    gen = ClaudeGenerator(api_key="test-key")
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    object.__setattr__(
        gen._client.messages,
        "create",
        AsyncMock(side_effect=anthropic.APIConnectionError(request=request)),
    )

    with pytest.raises(UpstreamTransportError) as exc_info:
        await gen.generate("prompt")
    assert exc_info.value.category is ErrorCategory.TRANSPORT


def test_generator_matches_protocol() -> None:
    """ClaudeGenerator structurally matches the TextGenerator protocol."""
    gen = ClaudeGenerator(api_key="test")
    assert hasattr(gen, "generate")
    assert callable(gen.generate)
