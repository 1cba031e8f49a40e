"""Prompt construction for cmdsmith."""

from cmdsmith.models import LLMMessage

MAX_QUERY_LENGTH = 1000

SYSTEM_PROMPT = "You are a bash command generator. Only return the command."

# One worked example turn; the model copies its shape for the real query.
EXAMPLE_QUERY = "How to list contents of a directory in bash?"
EXAMPLE_COMMAND = "ls"


def validate_query(query: str) -> str:
    """Return the stripped query, raising when it is empty or too long."""
    query = query.strip()
    if not query:
        raise ValueError("Query is empty. Describe what you want the command to do.")
    if len(query) > MAX_QUERY_LENGTH:
        raise ValueError(
            f"Query is too long ({len(query)} characters). "
            f"Please keep queries under {MAX_QUERY_LENGTH} characters."
        )
    return query


def build_messages(query: str) -> list[LLMMessage]:
    """Build the message list for the LLM call."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": EXAMPLE_QUERY},
        {"role": "assistant", "content": EXAMPLE_COMMAND},
        {"role": "user", "content": query.strip()},
    ]
