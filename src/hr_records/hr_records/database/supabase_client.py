from __future__ import annotations

from supabase import Client, ClientOptions, create_client

from ..core.enums import StoreBackend
from ..core.exceptions import ConfigurationError
from .connection import StoreSettings


def create_admin_client(settings: StoreSettings) -> Client:
    """Server-side Supabase client authenticated with the service role key.

    The service role bypasses row level security, so this client must never
    be handed to a browser. It holds no user session: nothing is persisted
    and no token refresh runs in the background.
    """
    if settings.backend != StoreBackend.SUPABASE:
        raise ConfigurationError("Supabase client requested for a non-Supabase backend")
    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
