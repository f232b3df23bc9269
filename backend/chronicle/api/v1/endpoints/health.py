from __future__ import annotations

import asyncio

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from chronicle.config import settings
from chronicle.db.base import get_supabase_client
from chronicle.tag_config import CONFIG_FILE_NAME, ConfigError, load_tag_config

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "chronicle-api",
            "version": "0.1.0"
        }
    )


@router.get("/ready")
async def readiness_check():
    """Readiness check: storage reachable and tag configuration valid."""
    db_status = "connected"
    try:
        client = get_supabase_client()
        await asyncio.to_thread(lambda: client.table("games").select("id").limit(1).execute())
    except Exception as e:
        db_status = f"error: {str(e)}"

    # Only inspect the file here; defaults are written on first real use
    config_status = "valid"
    if not (settings.config_dir / CONFIG_FILE_NAME).exists():
        config_status = "missing (defaults are created on first use)"
    else:
        try:
            load_tag_config(settings.config_dir)
        except ConfigError as e:
            config_status = f"error: {str(e)}"

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "database": db_status,
            "tag_config": config_status,
            "api_prefix": settings.api_prefix
        }
    )
