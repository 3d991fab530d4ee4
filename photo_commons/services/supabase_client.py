"""
Supabase client accessor
Builds a fresh client per call; nothing is cached across requests
"""
from typing import Optional
from supabase import Client, ClientOptions, create_client
from ..config import config
from ..exceptions import ConfigurationError
from ..logger import logger
from ..validation_utils import get_bearer_token


def _server_options() -> ClientOptions:
    # Lambda has no session storage to persist or refresh
    return ClientOptions(auto_refresh_token=False, persist_session=False)


def _require(value: Optional[str], config_key: str) -> str:
    if not value:
        raise ConfigurationError(f"Supabase is not configured: missing {config_key}", config_key=config_key)
    return value


def get_service_role_client() -> Client:
    """
    Client authenticated with the service-role key

    Bypasses row-level policy; only for trusted server-side operations.
    """
    url = _require(config.supabase_url, 'supabase-url')
    key = _require(config.supabase_service_role_key, 'supabase-service-role-key')
    return create_client(url, key, options=_server_options())


def get_request_client(event: dict) -> Client:
    """
    Client scoped to the calling principal

    Uses the public anon key and forwards the caller's bearer token so the
    backend applies row-level policy for that user. Without a token the
    request runs as the anonymous role.
    """
    url = _require(config.supabase_url, 'supabase-url')
    key = _require(config.supabase_key, 'supabase-key')
    client = create_client(url, key, options=_server_options())

    token = get_bearer_token(event)
    if token:
        client.postgrest.auth(token)
    else:
        logger.debug("No bearer token on request, querying as anonymous role")

    return client
