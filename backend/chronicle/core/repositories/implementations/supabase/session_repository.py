from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from chronicle.core.models.game import Game, Session
from chronicle.core.repositories.session_repository import GameRepository, SessionRepository
from chronicle.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from supabase import Client


async def _run(func: Callable[[], Any]) -> Any:
    return await asyncio.to_thread(func)


class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation of the SessionRepository.

    Assumes a `sessions` table with columns matching the `Session` model fields.
    """

    TABLE_NAME = "sessions"

    def __init__(self, client: Client) -> None:
        self._client: Client = client

    async def list_for_game(self, game_id: int) -> Sequence[Session]:
        resp = await _run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("game_id", game_id)
            .order("created_at")
            .execute()
        )
        items: list[dict[str, Any]] = resp.data or []
        return [self._row_to_session(i) for i in items]

    @staticmethod
    def _row_to_session(row: dict[str, Any]) -> Session:
        normalized = dict(row)
        # Joined columns such as game_name are not part of the model
        normalized.pop("game_name", None)
        return Session.model_validate(normalized)


class SupabaseGameRepository(GameRepository):
    """Supabase implementation of the GameRepository (`games` table)."""

    TABLE_NAME = "games"

    def __init__(self, client: Client) -> None:
        self._client: Client = client

    async def get(self, game_id: int) -> Game | None:
        resp = await _run(
            lambda: self._client.table(self.TABLE_NAME)
            .select("*")
            .eq("id", game_id)
            .limit(1)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return Game.model_validate(items[0])
