"""
Menu item image generation via an OpenAI-compatible images endpoint.

A URL returned by the provider is externally hosted and is recorded as the
item's generated image. A base64 payload is written to the local upload
directory instead; such images are usable in drafts but do not pass the
publish gate, so they are not recorded.
"""

import asyncio
import base64
import binascii
import logging
import random
import uuid
from dataclasses import dataclass
from functools import wraps
from typing import Optional

import httpx
from sqlalchemy.orm import Session

from app.config import settings
from app.services.catalog_service import CatalogService, is_hosted_image_url
from app.services.file_service import file_service

logger = logging.getLogger(__name__)


class ImageGenerationError(Exception):
    """The provider returned an error or an unusable response."""


class ServiceUnavailableError(ImageGenerationError):
    """Image provider is temporarily unavailable."""


class RateLimitError(ImageGenerationError):
    """Rate limit exceeded."""


def retry_on_connection_error(max_attempts=3, base_delay=1.0):
    """
    Retry decorator for provider calls that may fail on transient network issues.

    Args:
        max_attempts: Maximum retry attempts (default 3)
        base_delay: Base delay in seconds for exponential backoff (default 1.0)
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            last_exception = None

            for attempt in range(max_attempts):
                try:
                    return await func(*args, **kwargs)
                except (httpx.ConnectError, httpx.ConnectTimeout) as e:
                    last_exception = e

                    if attempt < max_attempts - 1:
                        delay = base_delay * (2**attempt)
                        jitter = delay * 0.1 * (2 * random.random() - 1)
                        sleep_time = delay + jitter

                        logger.warning(
                            "Connection error on attempt %d/%d, retrying in %.1fs...",
                            attempt + 1,
                            max_attempts,
                            sleep_time,
                        )
                        await asyncio.sleep(sleep_time)
                    else:
                        logger.error("All %d attempts failed", max_attempts)

            raise ServiceUnavailableError(
                "Image service temporarily unavailable after retries"
            ) from last_exception

        return wrapper

    return decorator


@dataclass
class GeneratedImageResult:
    url: str
    saved: bool
    is_hosted: bool


class ImageGenerationService:
    """Client for the image provider."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.transport = transport
        self.timeout = httpx.Timeout(
            timeout=settings.image_timeout,
            connect=settings.image_connect_timeout,
        )
        self.model = settings.image_model

    @retry_on_connection_error()
    async def _request(self, prompt: str, size: str) -> dict:
        if not settings.image_api_key:
            raise ServiceUnavailableError("Image generation is not configured")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            response = await client.post(
                settings.image_api_url,
                headers={"Authorization": f"Bearer {settings.image_api_key}"},
                json={"model": self.model, "prompt": prompt, "size": size, "n": 1},
            )

        if response.status_code == 429:
            raise RateLimitError("Image provider rate limit exceeded")
        if response.status_code >= 500:
            raise ServiceUnavailableError(f"Image provider error {response.status_code}")
        if response.status_code >= 400:
            raise ImageGenerationError(
                f"Image request rejected ({response.status_code}): {response.text[:200]}"
            )
        return response.json()

    async def generate(
        self,
        db: Session,
        prompt: str,
        size: str = "1024x1024",
        item_id: Optional[str] = None,
    ) -> GeneratedImageResult:
        """
        Generate an image for a menu item.

        Raises:
            ImageGenerationError: provider failure or unusable response
        """
        body = await self._request(prompt, size)
        data = (body.get("data") or [{}])[0]
        image_id = item_id or uuid.uuid4().hex

        remote_url = data.get("url")
        if remote_url and is_hosted_image_url(remote_url):
            if item_id:
                CatalogService.save_generated_image(db, item_id, remote_url)
            logger.info("Generated hosted image for %s", image_id)
            return GeneratedImageResult(url=remote_url, saved=bool(item_id), is_hosted=True)

        encoded = data.get("b64_json")
        if not encoded:
            raise ImageGenerationError("Image provider returned no image")
        try:
            raw = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ImageGenerationError("Image provider returned invalid base64") from e

        path = file_service.save_image_bytes(image_id, raw)
        url = file_service.get_file_url(path)
        logger.info("Generated image for %s stored locally at %s", image_id, path)
        return GeneratedImageResult(url=url, saved=True, is_hosted=False)


image_generation_service = ImageGenerationService()
