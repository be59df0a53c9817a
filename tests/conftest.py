"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest

from src.llm.gateway import CompletionResult


@pytest.fixture
def mock_llm() -> AsyncMock:
    """Async mock of LLMGateway returning a simple text completion."""
    llm = AsyncMock()
    llm.complete.return_value = CompletionResult(
        content="We prepare individual tax returns from $150.",
        model="gemini/gemini-2.5-flash",
    )
    return llm
