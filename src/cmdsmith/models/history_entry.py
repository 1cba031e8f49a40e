"""History models for cmdsmith."""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class HistoryEntry(BaseModel):
    """One past query and the command it produced."""

    model_config = ConfigDict(frozen=True)

    query: str
    response: str
    timestamp: str


HistoryLog = TypeAdapter(list[HistoryEntry])
