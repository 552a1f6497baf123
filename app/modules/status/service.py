import logging
import re
from typing import Any, Dict, Optional

import httpx

from app.config import Settings
from app.database.supabase_client import is_valid_url

logger = logging.getLogger(__name__)

_OFFLINE = re.compile(r"offline", re.IGNORECASE)


class StatusService:
    """Connectivity and live-stream probes. Neither touches the store's tables."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.settings.http_timeout, transport=self.transport)

    async def check_store(self) -> Dict[str, Any]:
        """Returns {"ok": True} or {"ok": False, <reason>: True}; never the underlying error."""
        url = self.settings.supabase_url
        key = self.settings.supabase_key
        if not url or not key:
            return {"ok": False, "missing_env": True}
        if not is_valid_url(url):
            return {"ok": False, "bad_url": True}

        health_endpoint = f"{url.rstrip('/')}/auth/v1/health"
        try:
            async with self._client() as client:
                response = await client.get(health_endpoint, headers={"apikey": key})
        except Exception as e:
            logger.warning(f"Supabase health check failed: {e}")
            return {"ok": False, "unreachable": True}

        if not response.is_success:
            logger.warning(f"Supabase health check returned {response.status_code}")
            return {"ok": False, "unreachable": True}
        return {"ok": True}

    async def check_live(self) -> Dict[str, bool]:
        """Whether the configured channel is streaming; any failure reads as offline"""
        try:
            async with self._client() as client:
                response = await client.get(self.settings.get_twitch_status_url())
            text = response.text
        except Exception as e:
            logger.warning(f"Live status check failed: {e}")
            return {"live": False}
        return {"live": not _OFFLINE.search(text)}
