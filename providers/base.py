"""Base provider ABC: turns a validated request into a typed response."""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from core.config import settings
from core.errors import MapsApiError, NotValidatedError
from core.request_core import RequestCore

logger = logging.getLogger(__name__)


class BaseMapsProvider(ABC):
    """Unified dispatch interface for every request family.

    Subclasses only implement ``fetch``; URL building, response parsing and
    status checks live here.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        maps_base_url: Optional[str] = None,
        roads_base_url: Optional[str] = None,
    ):
        self._api_key = api_key if api_key is not None else settings.google_maps_api_key
        self._base_urls = {
            "maps": maps_base_url or settings.maps_base_url,
            "roads": roads_base_url or settings.roads_base_url,
        }

    def request_url(self, request: RequestCore) -> str:
        """Full URL for ``request``, without the API key."""
        return request.url(self._base_urls[request.api])

    async def send(self, request: RequestCore):
        if not request.validated:
            raise NotValidatedError(request.family)

        url = self.request_url(request)
        logger.debug("Sending %s request: %s", request.family, url)
        key_param = httpx.QueryParams({"key": self._api_key})
        data = await self.fetch(request.family, f"{url}&{key_param}")

        response = request.response_model.model_validate(data)
        status = getattr(response, "status", None)
        if status is not None and not status.is_success:
            raise MapsApiError(status.code, response.error_message or "")
        return response

    @abstractmethod
    async def fetch(self, family: str, url: str) -> dict:
        pass
