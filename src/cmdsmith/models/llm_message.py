"""Chat message shape sent to the completion service."""

from typing import Literal, TypedDict


class LLMMessage(TypedDict):
    """Single chat message for the LLM API."""

    role: Literal["system", "user", "assistant"]
    content: str
