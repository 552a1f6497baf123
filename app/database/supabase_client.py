import logging
from dataclasses import dataclass
from typing import Union
from urllib.parse import urlparse

from fastapi import Depends
from supabase import Client, ClientOptions, create_client

from app.config import Settings, get_settings
from app.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreUnavailable:
    """Returned instead of a client when the store cannot be configured."""
    reason: str  # missing_env | bad_url


def is_valid_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def create_store_client(url: str, key: str) -> Union[Client, StoreUnavailable]:
    """Build a stateless Supabase client, or report why one cannot be built. Never raises."""
    if not url or not key:
        return StoreUnavailable(reason="missing_env")
    if not is_valid_url(url):
        return StoreUnavailable(reason="bad_url")
    try:
        return create_client(
            url,
            key,
            options=ClientOptions(persist_session=False, auto_refresh_token=False),
        )
    except Exception as e:
        logger.error(f"Supabase client rejected configuration: {e}")
        return StoreUnavailable(reason="bad_url")


def get_supabase(settings: Settings = Depends(get_settings)) -> Client:
    client = create_store_client(settings.supabase_url, settings.supabase_key)
    if isinstance(client, StoreUnavailable):
        logger.error(f"Supabase unavailable: {client.reason}")
        raise ConfigurationError(client.reason)
    return client
