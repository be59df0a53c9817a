"""Clean-up of chat replies: leading role labels and invented follow-on turns."""

import re

# A leading "Assistant:" / "MG Assistant:" style label on the reply itself
_LEADING_ROLE_RE = re.compile(
    r"\A\s*(?:\*{0,2})(?:[\w ]{0,20}\s)?(?:Assistant|Bot|AI)\s*:\s*(?:\*{0,2})\s*",
    re.IGNORECASE,
)

# Start of an invented follow-on turn ("User: ...", "Client: ...", "Assistant: ...")
_MOCK_TURN_RE = re.compile(
    r"\n\s*(?:\*{0,2})(?:User|Client|Customer|Assistant)\s*:",
    re.IGNORECASE,
)


def strip_role_prefix(answer: str) -> str:
    """Remove a role label the model put in front of its own reply."""
    return _LEADING_ROLE_RE.sub("", answer, count=1)


def truncate_mock_turns(answer: str) -> str:
    """Cut the answer at the first invented conversation turn.

    Models sometimes continue the transcript with a made-up user message
    and a second reply; only the first reply is kept.
    """
    match = _MOCK_TURN_RE.search(answer)
    if match is None:
        return answer
    return answer[: match.start()]


def clean_answer(answer: str) -> str:
    """Apply all post-processing steps and trim whitespace."""
    return truncate_mock_turns(strip_role_prefix(answer)).strip()
