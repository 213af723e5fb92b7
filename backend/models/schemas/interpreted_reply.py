"""Outcome types for interpreting a raw model reply."""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from models.schemas.display_block import DisplayBlock


class ExtractionFailure(str, Enum):
    EMPTY_REPLY = "empty_reply"
    NO_JSON_FOUND = "no_json_found"
    UNPARSABLE_JSON = "unparsable_json"
    INVALID_SHAPE = "invalid_shape"


class ExtractionResult(BaseModel):
    """Either a parsed JSON value or the reason extraction failed."""
    ok: bool = False
    value: Any = None
    reason: ExtractionFailure | None = None

    @classmethod
    def success(cls, value: Any) -> "ExtractionResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: ExtractionFailure) -> "ExtractionResult":
        return cls(ok=False, reason=reason)


class StructuredReply(BaseModel):
    kind: Literal["structured"] = "structured"
    value: Any = None


class ProseReply(BaseModel):
    kind: Literal["prose"] = "prose"
    text: str = ""
    blocks: list[DisplayBlock] = []


class Unparsable(BaseModel):
    kind: Literal["unparsable"] = "unparsable"
    reason: ExtractionFailure


InterpretedReply = Annotated[
    Union[StructuredReply, ProseReply, Unparsable],
    Field(discriminator="kind"),
]
