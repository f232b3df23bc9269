from __future__ import annotations

from pydantic import Field, field_validator

from chronicle.core.models.base import AppBaseModel


class SearchRequest(AppBaseModel):
    term: str = Field(default="", max_length=500, description="Literal, case-insensitive search term")
    include_hits: bool = Field(default=False, description="Attach context snippets for each occurrence")

    @field_validator("term")
    @classmethod
    def strip_term(cls, v: str) -> str:
        return v.strip()
