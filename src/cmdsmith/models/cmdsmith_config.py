"""Configuration model for cmdsmith."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_MODEL = "gpt-4o-mini"


class CmdsmithConfig(BaseModel):
    """Credential and model used for every query."""

    api_key: str = Field(repr=False)
    model: str

    @field_validator("api_key", "model")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value
