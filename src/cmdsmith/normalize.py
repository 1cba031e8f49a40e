"""Reduce free-form model output to command lines."""


def normalize_response(raw: str) -> str:
    """Strip every line, drop the blank ones and keep the rest in order."""
    lines = (line.strip() for line in raw.splitlines())
    return "\n".join(line for line in lines if line)
