"""Chat proxy: build the prompt, call the LLM once, return a cleaned reply."""

import logging
import time

from src.llm.gateway import LLMGateway
from src.llm.postprocess import clean_answer
from src.llm.prompts import build_chat_messages, detect_topic
from src.models import ChatResponse, ChatTurn, GenerationConfig

logger = logging.getLogger(__name__)


class EmptyCompletionError(RuntimeError):
    """The LLM returned no usable text."""


class ChatProxy:
    """Relays one website chat message to the LLM with the firm's system prompt."""

    def __init__(self, llm: LLMGateway, max_history_turns: int | None = None) -> None:
        self._llm = llm
        self._max_history_turns = max_history_turns

    async def reply(
        self,
        message: str,
        history: list[ChatTurn] | None = None,
        generation: GenerationConfig | None = None,
    ) -> ChatResponse:
        """Answer a chat message.

        Args:
            message: The visitor's message.
            history: Prior turns supplied by the client, oldest first.
            generation: Optional sampling overrides.

        Returns:
            ChatResponse with the cleaned answer, model name and topic.

        Raises:
            EmptyCompletionError: If the model returned no text.
        """
        start = time.monotonic()
        topic = detect_topic(message)
        logger.info("Chat message topic=%s history=%d", topic, len(history or []))

        messages = build_chat_messages(message, history, max_turns=self._max_history_turns)
        result = await self._llm.complete(messages, generation)

        answer = clean_answer(result.content or "")
        if not answer:
            raise EmptyCompletionError(f"Empty completion from {result.model}")

        latency_ms = int((time.monotonic() - start) * 1000)
        logger.info("Chat reply model=%s latency_ms=%d", result.model, latency_ms)

        return ChatResponse(text=answer, model=result.model, topic=topic)
