"""Thin async wrapper around LiteLLM for chat completions."""

import logging
from typing import Any

import litellm
from pydantic import BaseModel

from config import load_yaml_config
from config.settings import settings
from src.models import GenerationConfig

logger = logging.getLogger(__name__)

# Providers that understand Google-style safety_settings.
_SAFETY_PREFIXES = ("gemini/", "vertex_ai/")


class CompletionResult(BaseModel):
    """Result from an LLM completion."""

    content: str | None = None
    model: str = ""


class LLMGateway:
    """Async LLM completion via LiteLLM."""

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        safety_settings: list[dict[str, str]] | None = None,
    ) -> None:
        self.model = model or settings.llm_default_model
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        if safety_settings is None:
            safety_settings = load_yaml_config("chatbot.yaml").get("safety_settings", [])
        self.safety_settings = safety_settings

    async def complete(
        self,
        messages: list[dict[str, Any]],
        generation: GenerationConfig | None = None,
    ) -> CompletionResult:
        """Send messages to the LLM and return the response.

        Args:
            messages: OpenAI-format message list (system/user/assistant).
            generation: Optional per-request sampling overrides.

        Returns:
            CompletionResult with content and the model that answered.
        """
        generation = generation or GenerationConfig()
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": (
                generation.temperature
                if generation.temperature is not None
                else settings.llm_temperature
            ),
            "max_tokens": generation.max_output_tokens or settings.llm_max_tokens,
        }
        if self.api_key:
            kwargs["api_key"] = self.api_key
        if generation.top_p is not None:
            kwargs["top_p"] = generation.top_p
        if generation.top_k is not None:
            kwargs["top_k"] = generation.top_k
        if self.safety_settings and self.model.startswith(_SAFETY_PREFIXES):
            kwargs["safety_settings"] = self.safety_settings

        logger.info("Calling LLM model=%s messages=%d", self.model, len(messages))
        response = await litellm.acompletion(**kwargs)
        message = response.choices[0].message

        return CompletionResult(
            content=message.content,
            model=response.model or self.model,
        )
