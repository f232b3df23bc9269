from __future__ import annotations

import re
from typing import TYPE_CHECKING

from chronicle.core.schemas.search import NOTES_LABEL, SearchHit, SearchMatch, SearchResult
from chronicle.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chronicle.core.models.game import Session
    from chronicle.core.repositories.session_repository import GameRepository, SessionRepository


logger = get_logger(__name__)

DEFAULT_CONTEXT_LEN = 40


class GameNotFoundError(LookupError):
    """Raised when searching a game that does not exist."""


def contains_term(text: str | None, term: str) -> bool:
    """Case-insensitive substring containment."""
    return bool(text) and term.lower() in text.lower()


def search_documents(term: str, sessions: Sequence[Session], notes_text: str | None) -> list[SearchMatch]:
    """Return one match per document containing term, sessions first, notes last.

    An empty term matches nothing.
    """
    if not term:
        return []

    matches = [
        SearchMatch(is_notes=False, session_id=s.id, session_name=s.name)
        for s in sessions
        if contains_term(s.content, term)
    ]
    if contains_term(notes_text, term):
        matches.append(SearchMatch(is_notes=True, session_name=NOTES_LABEL))
    return matches


def _single_line(s: str) -> str:
    return s.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def find_hits(term: str, text: str | None, context: int = DEFAULT_CONTEXT_LEN) -> list[SearchHit]:
    """Locate every non-overlapping occurrence of term in text with context.

    `before` and `after` hold up to `context` characters on each side, on a
    single line, prefixed/suffixed with "..." when the window is cut short.
    """
    if not term or not text:
        return []

    hits: list[SearchHit] = []
    for found in re.finditer(re.escape(term), text, re.IGNORECASE):
        offset, end = found.span()
        ctx_start = max(0, offset - context)
        ctx_end = min(len(text), end + context)

        before = _single_line(text[ctx_start:offset])
        after = _single_line(text[end:ctx_end])
        if ctx_start > 0:
            before = "..." + before
        if ctx_end < len(text):
            after = after + "..."

        hits.append(SearchHit(offset=offset, before=before, match=found.group(0), after=after))
    return hits


class SearchService:
    """Searches a game's sessions and notes for a literal term."""

    def __init__(self, sessions: SessionRepository, games: GameRepository) -> None:
        self._sessions = sessions
        self._games = games

    async def search_game(self, game_id: int, term: str, *, include_hits: bool = False) -> list[SearchResult]:
        """Search every document of a game.

        Raises:
            GameNotFoundError: if the game does not exist.
        """
        game = await self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(f"game {game_id} not found")
        if not term:
            return []

        sessions = await self._sessions.list_for_game(game_id)
        matches = search_documents(term, sessions, game.notes)
        logger.debug("Search completed", extra={"game_id": game_id, "matches": len(matches)})

        if not include_hits:
            return [SearchResult(**m.model_dump()) for m in matches]

        content_by_id = {s.id: s.content for s in sessions}
        results: list[SearchResult] = []
        for m in matches:
            text = game.notes if m.is_notes else content_by_id.get(m.session_id, "")
            results.append(SearchResult(**m.model_dump(), hits=find_hits(term, text)))
        return results
