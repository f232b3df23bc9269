from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chronicle.core.models.game import Game, Session


class SessionRepository(ABC):
    """Read-only provider of a game's session documents.

    Implementations perform I/O (database, network) and therefore expose async
    methods.
    """

    @abstractmethod
    async def list_for_game(self, game_id: int) -> Sequence[Session]:  # pragma: no cover - interface only
        """Return the game's sessions ordered by creation time ascending."""


class GameRepository(ABC):
    """Read-only provider of games and their notes document."""

    @abstractmethod
    async def get(self, game_id: int) -> Game | None:  # pragma: no cover
        """Fetch a game by id or return None if not found."""
