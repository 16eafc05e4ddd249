"""Google Maps Platform provider: real HTTP dispatch.

API key loaded from settings (GOOGLE_MAPS_API_KEY).
Retries on HTTP 429 and 5xx, honouring Retry-After.
"""
import asyncio
import logging
from typing import Optional

import httpx

from core.config import settings
from core.errors import MapsApiError, RetriesExhaustedError
from providers.base import BaseMapsProvider

logger = logging.getLogger(__name__)


def _is_retryable(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


class GoogleMapsProvider(BaseMapsProvider):
    def __init__(
        self,
        api_key: Optional[str] = None,
        maps_base_url: Optional[str] = None,
        roads_base_url: Optional[str] = None,
        max_retries: Optional[int] = None,
        retry_base_delay: Optional[float] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(api_key, maps_base_url, roads_base_url)
        self._max_retries = settings.max_retries if max_retries is None else max_retries
        self._retry_base_delay = settings.retry_base_delay if retry_base_delay is None else retry_base_delay
        self._timeout = settings.request_timeout_seconds if timeout is None else timeout
        # Tests inject httpx.MockTransport here
        self._transport = transport

    def _retry_delay(self, resp: httpx.Response, attempt: int) -> float:
        retry_after = resp.headers.get("retry-after")
        if retry_after is not None:
            try:
                return float(retry_after)
            except ValueError:
                logger.warning("Ignoring non-numeric Retry-After header: %s", retry_after)
        return self._retry_base_delay * 2 ** attempt

    @staticmethod
    def _raise_for_error_body(resp: httpx.Response) -> None:
        """Roads-style errors: a 4xx with {"error": {"status": ..., "message": ...}}."""
        try:
            body = resp.json()
        except ValueError:
            body = None
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            raise MapsApiError(str(error.get("status", resp.status_code)), error.get("message", ""))
        resp.raise_for_status()

    async def fetch(self, family: str, url: str) -> dict:
        attempts = self._max_retries + 1

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            for attempt in range(attempts):
                resp = await client.get(url)
                if _is_retryable(resp.status_code):
                    if attempt + 1 == attempts:
                        break
                    delay = self._retry_delay(resp, attempt)
                    logger.warning(
                        "Maps API %s returned %d, retrying after %.1fs (attempt %d)",
                        family, resp.status_code, delay, attempt + 1,
                    )
                    await asyncio.sleep(delay)
                    continue
                if resp.status_code >= 400:
                    self._raise_for_error_body(resp)
                try:
                    return resp.json()
                except ValueError:
                    raise MapsApiError("INVALID_RESPONSE", f"{family} response body is not JSON")

        raise RetriesExhaustedError(family, attempts)
