"""Supabase client singleton"""
from typing import Optional

from supabase import Client, create_client  # type: ignore

from mindsync.config import SUPABASE_SERVICE_ROLE_KEY, SUPABASE_URL

_supabase_client: Optional[Client] = None


class SupabaseNotConfiguredError(ValueError):
    """Raised when the Supabase URL or service key is missing"""


def get_supabase_client() -> Client:
    """Get or create Supabase client singleton"""
    global _supabase_client

    if _supabase_client is None:
        if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
            raise SupabaseNotConfiguredError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        _supabase_client = create_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)

    return _supabase_client


def set_supabase_client(client: Optional[Client]) -> None:
    """Replace the Supabase client singleton (useful for testing)"""
    global _supabase_client
    _supabase_client = client


def reset_supabase_client():
    """Reset the Supabase client singleton (useful for testing)"""
    set_supabase_client(None)
