"""Supabase client singleton for database and storage operations."""

from functools import lru_cache
from typing import Any

from supabase import Client, create_client

from src.core.config import get_settings


@lru_cache
def get_supabase_client() -> Client:
    """Get cached Supabase client singleton.

    Uses the secret key for backend operations, which bypasses RLS at the
    PostgREST level. The same client serves table queries and storage calls.

    Returns:
        Client: Supabase client instance.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_secret_key,
    )


async def check_database_connection() -> dict[str, Any]:
    """Check if database connection is healthy.

    Returns:
        dict: Connection status with 'healthy' boolean and optional 'error' message.
    """
    try:
        client = get_supabase_client()
        client.table("profile_images").select("id").limit(1).execute()
        return {"healthy": True}
    except Exception as e:
        return {"healthy": False, "error": str(e)}


async def check_storage_connection() -> dict[str, Any]:
    """Check if the media bucket is reachable.

    Returns:
        dict: Connection status with 'healthy' boolean and optional 'error' message.
    """
    try:
        client = get_supabase_client()
        settings = get_settings()
        client.storage.from_(settings.media_bucket).list(
            settings.profile_image_folder, {"limit": 1}
        )
        return {"healthy": True}
    except Exception as e:
        return {"healthy": False, "error": str(e)}
