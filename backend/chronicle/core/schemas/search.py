from __future__ import annotations

from pydantic import Field

from chronicle.core.models.base import AppBaseModel, FrozenModel

NOTES_LABEL = "Notes"


class SearchMatch(FrozenModel):
    """A document containing the search term.

    Exactly one per matched document. For the notes document `is_notes` is
    set, `session_id` is None and `session_name` is "Notes".
    """

    is_notes: bool = False
    session_id: int | None = None
    session_name: str


class SearchHit(FrozenModel):
    """One occurrence of a term within a document, with surrounding context."""

    offset: int = Field(ge=0, description="Character offset of the occurrence")
    before: str = ""
    match: str
    after: str = ""


class SearchResult(AppBaseModel):
    """API-facing search result: the match plus optional context snippets."""

    is_notes: bool
    session_id: int | None
    session_name: str
    hits: list[SearchHit] = Field(default_factory=list)
