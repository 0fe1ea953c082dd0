"""Supabase infrastructure module"""
from .client import (
    SupabaseNotConfiguredError,
    get_supabase_client,
    reset_supabase_client,
    set_supabase_client,
)

__all__ = ['SupabaseNotConfiguredError', 'get_supabase_client', 'reset_supabase_client', 'set_supabase_client']
