"""HTTP client for the public menu and catalog endpoints."""

import logging
from typing import Dict, List, Optional

import httpx

from app.schemas import CatalogItem, DailyMenuPayload, DisplayMenu, GeneratedImageOut

logger = logging.getLogger(__name__)


class MenuClientError(Exception):
    """The menu server could not be reached or answered with an error."""


class MenuClient:
    """Async client used by display screens and the tv-export command."""

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout

    async def _get(self, path: str):
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, transport=self.transport, timeout=self.timeout
            ) as client:
                response = await client.get(path)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            raise MenuClientError(f"GET {path} failed: {e}") from e

    async def get_menu(self, date: str) -> DailyMenuPayload:
        return DailyMenuPayload.model_validate(await self._get(f"/api/menu/{date}"))

    async def get_latest_published(self) -> Optional[DailyMenuPayload]:
        body = await self._get("/api/menu/latest-published")
        return DailyMenuPayload.model_validate(body) if body else None

    async def get_display_menu(self, date: str) -> DisplayMenu:
        return DisplayMenu.model_validate(await self._get(f"/api/menu/{date}/display"))

    async def get_custom_items(self) -> List[CatalogItem]:
        return [CatalogItem.model_validate(item) for item in await self._get("/api/custom-items")]

    async def get_generated_images(self) -> Dict[str, str]:
        images = [
            GeneratedImageOut.model_validate(image)
            for image in await self._get("/api/generated-images")
        ]
        return {image.item_id: image.image_url for image in images}
