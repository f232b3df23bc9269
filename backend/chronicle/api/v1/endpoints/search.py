from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, status

from chronicle.api.v1.schemas.search import SearchRequest
from chronicle.core.schemas.search import SearchResult
from chronicle.core.services.search_service import GameNotFoundError
from chronicle.dependencies import get_search_service
from chronicle.utils.logging import get_logger

if TYPE_CHECKING:
    from chronicle.core.services.search_service import SearchService

logger = get_logger(__name__)

router = APIRouter()


@router.post("/games/{game_id}/search", response_model=list[SearchResult])
async def search_game(
    game_id: int,
    payload: SearchRequest,
    service: SearchService = Depends(get_search_service),
):
    """Search a game's sessions and notes for a literal term.

    One result per matching document; the notes document is reported as "Notes".
    """
    try:
        return await service.search_game(game_id, payload.term, include_hits=payload.include_hits)
    except GameNotFoundError as err:
        raise HTTPException(status_code=404, detail="Game not found") from err
    except Exception as err:
        logger.error("Search failed for game %s: %s", game_id, err)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to load documents",
        ) from err
