"""Handler configuration."""

from pydantic import BaseModel, ConfigDict, Field


class HandlerConfig(BaseModel):
    """Decoding behaviour of the document handler."""

    model_config = ConfigDict(extra="forbid")

    strict: bool = Field(False, description="Reject unrecognized entries instead of ignoring them")
