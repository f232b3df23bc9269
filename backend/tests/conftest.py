"""
Shared pytest fixtures for chronicle tests.

Provides in-memory repositories so no Supabase project is needed.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from chronicle.core.models.game import Game, Session
from chronicle.core.repositories.session_repository import GameRepository, SessionRepository
from chronicle.tag_config import TagConfig


class InMemorySessionRepository(SessionRepository):
    """Sessions held in a list, returned in insertion order."""

    def __init__(self, sessions: Sequence[Session] = ()) -> None:
        self.sessions = list(sessions)
        self.calls = 0

    async def list_for_game(self, game_id: int) -> Sequence[Session]:
        self.calls += 1
        return [s for s in self.sessions if s.game_id == game_id]


class InMemoryGameRepository(GameRepository):
    def __init__(self, games: Sequence[Game] = ()) -> None:
        self.games = {g.id: g for g in games}

    async def get(self, game_id: int) -> Game | None:
        return self.games.get(game_id)


class BrokenSessionRepository(SessionRepository):
    """Simulates a storage failure."""

    async def list_for_game(self, game_id: int) -> Sequence[Session]:
        raise ConnectionError("database unavailable")


class BrokenGameRepository(GameRepository):
    async def get(self, game_id: int) -> Game | None:
        raise ConnectionError("database unavailable")


@pytest.fixture
def tag_config() -> TagConfig:
    return TagConfig(
        tag_types=[
            {"label": "NPC", "template": "[N: | ]"},
            {"label": "Location", "template": "[L: | ]"},
            {"label": "Event", "template": "[E: | ]"},
        ],
        tag_exclude_words=["closed", "abandoned"],
    )


@pytest.fixture
def game() -> Game:
    return Game(
        id=1,
        name="Ironsworn",
        notes="[N:Malichi | Hostile mage]\ndragon sighted in the north",
    )


@pytest.fixture
def sessions() -> list[Session]:
    return [
        Session(id=10, game_id=1, name="Session 1", content="the dragon attacked the village\n[L:Dungeon | dark]"),
        Session(id=11, game_id=1, name="Session 2", content="[N:Malichi | Hostile mage; Closed]\n[L:Dungeon | Explored]"),
        Session(id=12, game_id=1, name="Session 3", content="nothing relevant"),
        Session(id=20, game_id=2, name="Other game", content="a dragon elsewhere [N:Other | x]"),
    ]


@pytest.fixture
def session_repo(sessions) -> InMemorySessionRepository:
    return InMemorySessionRepository(sessions)


@pytest.fixture
def game_repo(game) -> InMemoryGameRepository:
    return InMemoryGameRepository([game, Game(id=2, name="Other")])
