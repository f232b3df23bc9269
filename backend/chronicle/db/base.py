from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from chronicle.config import settings
from chronicle.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Return a cached Supabase client for reading sessions and games.

    The core only reads documents, so a single shared client is enough.
    """
    logger.debug("Initializing Supabase client")
    if not settings.supabase_url or not settings.supabase_key:
        raise RuntimeError("supabase_url and supabase_key are required for the Supabase client")
    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
