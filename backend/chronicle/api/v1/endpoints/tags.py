from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends

from chronicle.api.v1.schemas.tag import TagConfigRead, TagParseRequest
from chronicle.core.models.tag import TagOccurrence, TagsForGame
from chronicle.core.services.tag_parser import parse_tags
from chronicle.dependencies import get_tag_config, get_tag_service
from chronicle.utils.text import format_word_list

if TYPE_CHECKING:
    from chronicle.core.services.tag_service import TagService
    from chronicle.tag_config import TagConfig


router = APIRouter()


@router.post("/tags/parse", response_model=list[TagOccurrence])
async def parse_text_tags(payload: TagParseRequest) -> list[TagOccurrence]:
    """Return every well-formed tag in the given text, in source order."""
    return parse_tags(payload.text)


@router.get("/tags/config", response_model=TagConfigRead)
async def get_tag_configuration(tag_config: TagConfig = Depends(get_tag_config)) -> TagConfigRead:
    """Return configured tag types and the words that close a tag."""
    words = format_word_list(tag_config.tag_exclude_words, '"')
    hint = f"Add {words} to a tag's data section to close it." if words else ""
    return TagConfigRead(
        tag_types=sorted(tag_config.tag_types, key=lambda t: t.label),
        tag_exclude_words=tag_config.tag_exclude_words,
        closing_hint=hint,
    )


@router.get("/games/{game_id}/tags", response_model=TagsForGame)
async def get_game_tags(
    game_id: int,
    tag_config: TagConfig = Depends(get_tag_config),
    service: TagService = Depends(get_tag_service),
) -> TagsForGame:
    """Return the game's tag catalog: configured, active (sessions) and notes tags.

    Closed tags are omitted. Storage failures degrade to the configured tags.
    """
    return await service.load_tags_for_game(game_id, tag_config)
