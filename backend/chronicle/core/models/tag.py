from __future__ import annotations

from pydantic import Field, field_validator

from .base import AppBaseModel, FrozenModel


class TagKey(FrozenModel):
    """Identity of a logical entity across tag occurrences."""

    type_code: str
    identifier: str

    @property
    def label(self) -> str:
        return f"{self.type_code}:{self.identifier}"


class TagOccurrence(FrozenModel):
    """One recognized `[type:identifier | data]` token."""

    type_code: str = Field(description="Short category, e.g. 'L' or 'Thread'")
    identifier: str = Field(description="Free-form entity name")
    data: str = Field(default="", description="Trailing free-form content after '|'")
    raw_text: str = Field(description="The verbatim token, brackets included")

    @property
    def key(self) -> TagKey:
        return TagKey(type_code=self.type_code, identifier=self.identifier)


class TagType(AppBaseModel):
    """A tag entry shown in the catalog: display label and insertable template."""

    label: str = Field(description="Human-readable name")
    template: str = Field(description="Notation inserted when the entry is selected")

    @field_validator("label", "template")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("cannot be blank")
        return v


class TagsForGame(AppBaseModel):
    """Tag catalog of one game, partitioned by origin.

    - config: configured tag types, sorted by label
    - active: open tags found across the game's sessions
    - notes: open tags found in the game's notes
    """

    config: list[TagType] = Field(default_factory=list)
    active: list[TagType] = Field(default_factory=list)
    notes: list[TagType] = Field(default_factory=list)


def default_tag_types() -> list[TagType]:
    """Standard notation tag types written to a fresh config file."""
    return [
        TagType(label="Clock", template="[Clock: | ]"),
        TagType(label="Event", template="[E: | ]"),
        TagType(label="Location", template="[L: | ]"),
        TagType(label="NPC", template="[N: | ]"),
        TagType(label="Player Character", template="[PC: | ]"),
        TagType(label="Scene", template="[Scene: | ]"),
        TagType(label="Thread", template="[Thread: | ]"),
        TagType(label="Timer", template="[Timer: | ]"),
        TagType(label="Track", template="[Track: | ]"),
    ]
