"""Tests for the LLM gateway wrapper."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.llm.gateway import CompletionResult, LLMGateway
from src.models import GenerationConfig

SAFETY = [{"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"}]


def _mock_response(content: str | None = "Hello", model: str | None = "gemini/gemini-2.5-flash") -> MagicMock:
    """Build a mock LiteLLM response object."""
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    response.model = model
    return response


@pytest.mark.asyncio
@patch("litellm.acompletion", new_callable=AsyncMock)
async def test_complete_returns_text(mock_acompletion: AsyncMock) -> None:
    """Mocked litellm.acompletion returns CompletionResult with content."""
    mock_acompletion.return_value = _mock_response(content="We lodge individual returns.")

    gw = LLMGateway(model="gemini/gemini-2.5-flash", api_key="k", safety_settings=SAFETY)
    result = await gw.complete([{"role": "user", "content": "question"}])

    assert isinstance(result, CompletionResult)
    assert result.content == "We lodge individual returns."
    assert result.model == "gemini/gemini-2.5-flash"


@pytest.mark.asyncio
@patch("litellm.acompletion", new_callable=AsyncMock)
async def test_complete_uses_settings_defaults(mock_acompletion: AsyncMock) -> None:
    """Without overrides, temperature and max_tokens come from settings."""
    mock_acompletion.return_value = _mock_response()

    gw = LLMGateway(model="gemini/gemini-2.5-flash", api_key="k", safety_settings=SAFETY)
    await gw.complete([{"role": "user", "content": "hi"}])

    call_kwargs = mock_acompletion.call_args.kwargs
    assert call_kwargs["model"] == "gemini/gemini-2.5-flash"
    assert call_kwargs["temperature"] == 0.7
    assert call_kwargs["max_tokens"] == 150
    assert call_kwargs["api_key"] == "k"
    assert call_kwargs["safety_settings"] == SAFETY
    assert "top_p" not in call_kwargs
    assert "top_k" not in call_kwargs


@pytest.mark.asyncio
@patch("litellm.acompletion", new_callable=AsyncMock)
async def test_complete_forwards_generation_overrides(mock_acompletion: AsyncMock) -> None:
    """Per-request sampling settings replace the defaults."""
    mock_acompletion.return_value = _mock_response()
    generation = GenerationConfig(temperature=0.0, top_p=0.9, top_k=40, max_output_tokens=300)

    gw = LLMGateway(model="gemini/gemini-2.5-flash", api_key="k", safety_settings=SAFETY)
    await gw.complete([{"role": "user", "content": "hi"}], generation)

    call_kwargs = mock_acompletion.call_args.kwargs
    assert call_kwargs["temperature"] == 0.0
    assert call_kwargs["top_p"] == 0.9
    assert call_kwargs["top_k"] == 40
    assert call_kwargs["max_tokens"] == 300


@pytest.mark.asyncio
@patch("litellm.acompletion", new_callable=AsyncMock)
async def test_safety_settings_only_for_google_models(mock_acompletion: AsyncMock) -> None:
    """Other providers don't accept Google-style safety settings."""
    mock_acompletion.return_value = _mock_response(model="gpt-4o-mini")

    gw = LLMGateway(model="gpt-4o-mini", api_key="k", safety_settings=SAFETY)
    result = await gw.complete([{"role": "user", "content": "hi"}])

    assert "safety_settings" not in mock_acompletion.call_args.kwargs
    assert result.model == "gpt-4o-mini"


@pytest.mark.asyncio
@patch("litellm.acompletion", new_callable=AsyncMock)
async def test_no_api_key_not_forwarded(mock_acompletion: AsyncMock) -> None:
    """An empty key leaves credential lookup to LiteLLM."""
    mock_acompletion.return_value = _mock_response(model=None)

    gw = LLMGateway(model="gemini/gemini-2.5-flash", api_key="", safety_settings=[])
    result = await gw.complete([{"role": "user", "content": "hi"}])

    assert "api_key" not in mock_acompletion.call_args.kwargs
    assert result.model == "gemini/gemini-2.5-flash"


def test_safety_settings_loaded_from_config() -> None:
    """Default safety settings come from chatbot.yaml."""
    gw = LLMGateway(model="gemini/gemini-2.5-flash", api_key="k")
    categories = {entry["category"] for entry in gw.safety_settings}
    assert "HARM_CATEGORY_DANGEROUS_CONTENT" in categories
    assert all(entry["threshold"] == "BLOCK_MEDIUM_AND_ABOVE" for entry in gw.safety_settings)


@pytest.mark.asyncio
@patch("litellm.acompletion", new_callable=AsyncMock)
async def test_upstream_error_propagates(mock_acompletion: AsyncMock) -> None:
    """Provider failures are not swallowed by the gateway."""
    mock_acompletion.side_effect = RuntimeError("503 from provider")

    gw = LLMGateway(model="gemini/gemini-2.5-flash", api_key="k", safety_settings=SAFETY)
    with pytest.raises(RuntimeError, match="503"):
        await gw.complete([{"role": "user", "content": "hi"}])
