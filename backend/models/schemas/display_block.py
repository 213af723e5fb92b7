"""Typed rendering units derived from prose model replies."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class HeaderBlock(BaseModel):
    kind: Literal["header"] = "header"
    text: str
    level: int = Field(1, ge=1, le=3)


class BulletBlock(BaseModel):
    kind: Literal["bullet"] = "bullet"
    text: str


class NumberedBlock(BaseModel):
    kind: Literal["numbered"] = "numbered"
    text: str
    index: int = Field(1, ge=1)  # display position, not the literal from the source text


class ParagraphBlock(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    text: str


DisplayBlock = Annotated[
    Union[HeaderBlock, BulletBlock, NumberedBlock, ParagraphBlock],
    Field(discriminator="kind"),
]
