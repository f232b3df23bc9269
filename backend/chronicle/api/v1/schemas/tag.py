from __future__ import annotations

from pydantic import Field

from chronicle.core.models.base import AppBaseModel
from chronicle.core.models.tag import TagType  # noqa: TCH001


class TagParseRequest(AppBaseModel):
    text: str = Field(default="", max_length=1_000_000, description="Text to scan for tags")


class TagConfigRead(AppBaseModel):
    tag_types: list[TagType]
    tag_exclude_words: list[str]
    closing_hint: str = Field(description="How to close a tag with the configured words")
