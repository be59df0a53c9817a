"""System prompt and message builder for the firm's website chat assistant."""

from datetime import date
from functools import lru_cache
from typing import Any

from config import load_text_config, load_yaml_config
from config.settings import settings
from src.models import ChatTurn

_SYSTEM_PROMPT_TEMPLATE = """\
You are a professional Australian tax and accounting assistant for \
{firm_name}. Your responses should be:

1. Professional and authoritative - use proper business terminology while \
remaining clear and accessible
2. Concise - keep responses brief and to the point (max 30 words)
3. Accurate - base all answers on the provided knowledge base
4. Context-aware - consider the conversation history when responding
5. Helpful - provide actionable information when possible

<hard_rules>
- NEVER include mock conversations in your responses.
- NEVER include "User:" or "Assistant:" in your responses.
- NEVER include multiple responses in a single message.
- ALWAYS respond directly to the user's question.
- NEVER use emojis or casual language.
- If unsure, or the question needs personal advice, suggest a consultation \
with {firm_name} on {firm_phone} or at {booking_url}.
</hard_rules>

<tax_year_rules>
The current Australian income year is {current_tax_year} ({tax_year_start} \
to {tax_year_end}). Assume this year unless the user names another one.
</tax_year_rules>

<conversation_flow>
- Start with a clear, direct answer.
- If the topic is complex, break it into steps.
- End with a relevant follow-up question or next step.
- If the user switches topics, acknowledge the change.
</conversation_flow>

<firm>
{firm_name}, {firm_location} ({firm_address}). Phone {firm_phone}, \
email {firm_email}.
</firm>

<knowledge_base>
{knowledge_base}
</knowledge_base>

Remember: you are a professional advisor, not a casual friend. Guide users \
toward professional consultation when their situation needs it.\
"""


def get_tax_year_context(today: date | None = None) -> dict[str, str]:
    """Compute current Australian income year variables.

    Australian income years run 1 July to 30 June. E.g. if today is
    15 Feb 2025, the current income year is 2024-25.

    Args:
        today: Override date for testing. Defaults to date.today().

    Returns:
        Dict with current_tax_year, tax_year_start, tax_year_end.
    """
    if today is None:
        today = date.today()

    start_year = today.year - 1 if today.month < 7 else today.year
    end_year = start_year + 1

    return {
        "current_tax_year": f"{start_year}-{str(end_year)[-2:]}",
        "tax_year_start": f"1 July {start_year}",
        "tax_year_end": f"30 June {end_year}",
    }


@lru_cache(maxsize=1)
def _chatbot_config() -> dict[str, Any]:
    return load_yaml_config("chatbot.yaml")


@lru_cache(maxsize=1)
def _knowledge_base() -> str:
    return load_text_config(settings.knowledge_base_file).strip()


def format_system_prompt(today: date | None = None) -> str:
    """Build the full system prompt with firm details and knowledge base.

    Args:
        today: Override date for testing.

    Returns:
        Formatted system prompt string.
    """
    firm = _chatbot_config()["firm"]
    return _SYSTEM_PROMPT_TEMPLATE.format(
        firm_name=firm["name"],
        firm_location=firm["location"],
        firm_address=firm["address"],
        firm_phone=firm["phone"],
        firm_email=firm["email"],
        booking_url=firm["booking_url"],
        knowledge_base=_knowledge_base(),
        **get_tax_year_context(today),
    )


def detect_topic(text: str) -> str:
    """Classify a message by keyword; falls back to "general"."""
    lowered = text.lower()
    for topic, keywords in _chatbot_config()["topics"].items():
        if any(keyword in lowered for keyword in keywords):
            return topic
    return "general"


def build_chat_messages(
    message: str,
    history: list[ChatTurn] | None = None,
    max_turns: int | None = None,
    today: date | None = None,
) -> list[dict[str, str]]:
    """Build the message list for one chat completion.

    Only the most recent ``max_turns`` history entries are sent.

    Args:
        message: The user's current message.
        history: Prior turns, oldest first.
        max_turns: History cap; defaults to settings.max_history_turns.
        today: Override date for testing tax year injection.

    Returns:
        OpenAI-format messages list (system, prior turns, user).
    """
    if max_turns is None:
        max_turns = settings.max_history_turns
    recent = (history or [])[-max_turns:] if max_turns > 0 else []

    messages = [{"role": "system", "content": format_system_prompt(today)}]
    messages.extend({"role": turn.role, "content": turn.content} for turn in recent)
    messages.append({"role": "user", "content": message})
    return messages
