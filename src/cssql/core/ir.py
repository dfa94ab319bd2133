"""
Intermediate representation for parsed stylesheets.

A Document is an ordered list of Rules; each Rule maps one selector to
the ordered field names declared in its block.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SourceLocation(BaseModel):
    """Position of a construct in the source text."""

    line: int = Field(ge=1)
    column: int = Field(ge=1)
    offset: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class Rule(BaseModel):
    """
    One ``name { fields }`` block.

    Attributes:
        name: Selector identifier, used as the SQL source name
        fields: Declared field names in source order (duplicates kept)
        location: Where the selector started, if parsed from text
    """

    name: str = Field(min_length=1)
    fields: list[str] = Field(default_factory=list)
    location: SourceLocation | None = Field(default=None, exclude=True)

    model_config = ConfigDict(frozen=True)


class Document(BaseModel):
    """Ordered rules parsed from one input."""

    rules: list[Rule] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def is_empty(self) -> bool:
        return not self.rules
