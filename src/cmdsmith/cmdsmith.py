"""Core logic for cmdsmith."""

import logging

from cmdsmith.errors import UpstreamError
from cmdsmith.llm import query_llm
from cmdsmith.models import CmdsmithConfig
from cmdsmith.normalize import normalize_response
from cmdsmith.prompt import build_messages, validate_query

log = logging.getLogger("cmdsmith")


def run_query(query: str, config: CmdsmithConfig) -> str:
    """Run the core pipeline: build the prompt, query the LLM, clean the reply."""
    query = validate_query(query)
    log.debug("query=%r", query)
    messages = build_messages(query)
    raw = query_llm(messages, config)
    command = normalize_response(raw)
    if not command:
        raise UpstreamError("the model returned an empty answer")
    return command


def run(words: list[str], config: CmdsmithConfig) -> str:
    """Join raw CLI words into one query and run the pipeline."""
    return run_query(" ".join(words), config)
