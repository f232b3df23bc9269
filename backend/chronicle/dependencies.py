from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends, HTTPException, status

from chronicle.config import settings
from chronicle.core.repositories.implementations.supabase.session_repository import (
    SupabaseGameRepository,
    SupabaseSessionRepository,
)
from chronicle.core.services.search_service import SearchService
from chronicle.core.services.tag_service import TagService
from chronicle.db.base import get_supabase_client
from chronicle.tag_config import ConfigError, TagConfig, load_tag_config
from chronicle.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from supabase import Client

    from chronicle.core.repositories.session_repository import GameRepository, SessionRepository


@lru_cache(maxsize=1)
def _cached_tag_config() -> TagConfig:
    return load_tag_config(settings.config_dir)


def get_tag_config() -> TagConfig:
    """Return the tag configuration, loaded once from `settings.config_dir`."""
    try:
        return _cached_tag_config()
    except ConfigError as err:
        logger.error("Tag configuration unavailable: %s", err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(err),
        ) from err


def get_client() -> Client:
    return get_supabase_client()

def get_session_repository(client: Client = Depends(get_client)) -> SessionRepository:
    """Get a session repository bound to the shared client."""
    return SupabaseSessionRepository(client)

def get_game_repository(client: Client = Depends(get_client)) -> GameRepository:
    """Get a game repository bound to the shared client."""
    return SupabaseGameRepository(client)

def get_tag_service(
    sessions: SessionRepository = Depends(get_session_repository),
    games: GameRepository = Depends(get_game_repository),
) -> TagService:
    """Get a request-scoped tag service instance."""
    return TagService(sessions, games)

def get_search_service(
    sessions: SessionRepository = Depends(get_session_repository),
    games: GameRepository = Depends(get_game_repository),
) -> SearchService:
    """Get a request-scoped search service instance."""
    return SearchService(sessions, games)
