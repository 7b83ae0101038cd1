"""
Scout enrichment client.

Calls the external Scout service, which scrapes a website and returns a
company profile with its public roster. Lookups are best-effort: any
transport or decoding failure is logged and reported as "no data".
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from orgnet.app.services.scout_service import IScoutService, ScoutProfile

logger = logging.getLogger(__name__)


class HttpScoutService(IScoutService):
    def __init__(self, base_url: str, timeout: float = 20.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def lookup(self, url: str) -> Optional[ScoutProfile]:
        if not self.base_url:
            logger.info("Scout service not configured, skipping lookup")
            return None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.post(
                    f"{self.base_url}/scout", json={"url": url}
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Scout lookup failed for {url}: {e}")
            return None

        try:
            return ScoutProfile.model_validate(data.get("data", data))
        except (ValidationError, AttributeError) as e:
            logger.warning(f"Scout returned an unexpected payload for {url}: {e}")
            return None
