"""Model package for cmdsmith."""

from cmdsmith.models.cmdsmith_config import DEFAULT_MODEL, CmdsmithConfig
from cmdsmith.models.history_entry import HistoryEntry, HistoryLog
from cmdsmith.models.llm_message import LLMMessage

__all__ = [
    "CmdsmithConfig",
    "DEFAULT_MODEL",
    "HistoryEntry",
    "HistoryLog",
    "LLMMessage",
]
