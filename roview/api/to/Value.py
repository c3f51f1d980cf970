"""Scalar value of a member."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr

from .Link import Link


class Value(BaseModel):
    """A single typed scalar extracted from a member.

    Reference-valued properties keep the target link in ``link`` and its
    title in ``content``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    content: StrictBool | StrictInt | StrictFloat | StrictStr | None = None
    link: Link | None = None
