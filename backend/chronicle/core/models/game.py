from __future__ import annotations

from pydantic import Field, field_validator

from .base import TimestampedModel


class Game(TimestampedModel):
    """A game (project) owning sessions and one notes document."""

    id: int = Field(description="Unique game identifier")
    name: str = Field(min_length=1, max_length=50, description="Game name")
    description: str | None = Field(default=None, max_length=100)
    notes: str = Field(default="", description="Free-form notes for the game")

    @field_validator("notes", mode="before")
    @classmethod
    def coerce_notes(cls, v: str | None) -> str:
        """Treat a missing notes column as an empty document."""
        return v or ""


class Session(TimestampedModel):
    """One play session's narrative text."""

    id: int = Field(description="Unique session identifier")
    game_id: int = Field(description="Owning game")
    name: str = Field(min_length=1, description="Session name")
    content: str = Field(default="", description="Session narrative")

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, v: str | None) -> str:
        return v or ""
