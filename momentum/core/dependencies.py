"""
Dependency injection for shared clients and resources
"""
from typing import Optional

from supabase import create_client, Client
from momentum.core.config import settings

# Created on first use so importing the app does not require credentials
_supabase_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """Get the shared Supabase client instance"""
    global _supabase_client

    if _supabase_client is None:
        _supabase_client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _supabase_client
