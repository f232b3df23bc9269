from __future__ import annotations

from typing import TYPE_CHECKING

from chronicle.core.models.tag import TagsForGame, TagType
from chronicle.core.services.tag_parser import parse_tags
from chronicle.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from chronicle.core.models.tag import TagKey, TagOccurrence
    from chronicle.core.repositories.session_repository import GameRepository, SessionRepository
    from chronicle.tag_config import TagConfig


logger = get_logger(__name__)


def is_closed(occurrence: TagOccurrence, exclude_words: Sequence[str]) -> bool:
    """Whether the occurrence's data section contains any exclude word (case-insensitive)."""
    if not occurrence.data:
        return False
    data = occurrence.data.lower()
    return any(word.strip() and word.strip().lower() in data for word in exclude_words)


def collect_open_tags(texts: Iterable[str], exclude_words: Sequence[str]) -> list[TagType]:
    """Reduce the tags of texts, scanned in order, to one entry per open key.

    The last occurrence of a key decides both whether it is closed and which raw
    token becomes the template. Entries are sorted by label.
    """
    latest: dict[TagKey, TagOccurrence] = {}
    for text in texts:
        for occurrence in parse_tags(text):
            # Re-inserting moves the key to the end of scan order
            latest.pop(occurrence.key, None)
            latest[occurrence.key] = occurrence

    entries = [
        TagType(label=key.label, template=occurrence.raw_text)
        for key, occurrence in latest.items()
        if not is_closed(occurrence, exclude_words)
    ]
    return sorted(entries, key=lambda t: t.label)


def aggregate_tags(
    config_types: Sequence[TagType],
    exclude_words: Sequence[str],
    session_texts: Sequence[str],
    notes_text: str | None,
) -> TagsForGame:
    """Build the tag catalog of one game.

    Sessions and notes are reduced independently, so closing a tag in one never
    hides it in the other. Configured types are passed through sorted by label,
    unfiltered.
    """
    return TagsForGame(
        config=sorted((t.model_copy() for t in config_types), key=lambda t: t.label),
        active=collect_open_tags(session_texts, exclude_words),
        notes=collect_open_tags([notes_text or ""], exclude_words),
    )


class TagService:
    """Loads a game's documents from the providers and aggregates its tags."""

    def __init__(self, sessions: SessionRepository, games: GameRepository) -> None:
        self._sessions = sessions
        self._games = games

    async def load_tags_for_game(self, game_id: int | None, tag_config: TagConfig) -> TagsForGame:
        """Return configured, active and notes tags for a game.

        With no game selected only the configured tags are returned. A provider
        failure is logged and treated as an empty document set, so the configured
        tags are always available.
        """
        if game_id is None:
            return aggregate_tags(tag_config.tag_types, tag_config.tag_exclude_words, [], None)

        session_texts: list[str] = []
        try:
            sessions = await self._sessions.list_for_game(game_id)
            session_texts = [s.content for s in sessions]
        except Exception as err:
            logger.error("Failed to load sessions for game %s: %s", game_id, err)

        notes_text = ""
        try:
            game = await self._games.get(game_id)
            if game is not None:
                notes_text = game.notes
        except Exception as err:
            logger.error("Failed to load notes for game %s: %s", game_id, err)

        tags = aggregate_tags(
            tag_config.tag_types,
            tag_config.tag_exclude_words,
            session_texts,
            notes_text,
        )
        logger.debug(
            "Aggregated tags",
            extra={"game_id": game_id, "active": len(tags.active), "notes": len(tags.notes)},
        )
        return tags
