"""
Unit tests for ImageGenerationService.

Provider responses are simulated with httpx.MockTransport.
"""
import base64
import json
from pathlib import Path
from unittest.mock import AsyncMock

import httpx
import pytest
from sqlalchemy.orm import Session

from app.config import settings
from app.models import GeneratedImage
from app.services.image_service import (
    ImageGenerationError,
    ImageGenerationService,
    RateLimitError,
    ServiceUnavailableError,
)

PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="
)


@pytest.fixture(autouse=True)
def image_api_configured(monkeypatch):
    monkeypatch.setattr(settings, "image_api_key", "sk-test")


@pytest.fixture
def no_sleep(monkeypatch):
    sleep = AsyncMock()
    monkeypatch.setattr("app.services.image_service.asyncio.sleep", sleep)
    return sleep


def provider(status_code=200, body=None, requests=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, json=body or {})

    return ImageGenerationService(transport=httpx.MockTransport(handler))


class TestGenerate:
    async def test_hosted_url_is_recorded_for_item(self, db: Session):
        requests = []
        service = provider(body={"data": [{"url": "https://cdn.example.com/s6.png"}]}, requests=requests)

        result = await service.generate(db, "A bowl of chili", item_id="s6")

        assert result.url == "https://cdn.example.com/s6.png"
        assert result.saved is True
        assert result.is_hosted is True
        assert db.get(GeneratedImage, "s6").image_url == "https://cdn.example.com/s6.png"
        body = json.loads(requests[0].content)
        assert body["prompt"] == "A bowl of chili"
        assert body["size"] == "1024x1024"
        assert requests[0].headers["authorization"] == "Bearer sk-test"

    async def test_hosted_url_without_item_is_not_saved(self, db: Session):
        service = provider(body={"data": [{"url": "https://cdn.example.com/x.png"}]})

        result = await service.generate(db, "Soup")

        assert result.saved is False
        assert db.query(GeneratedImage).count() == 0

    async def test_base64_image_is_stored_locally_not_recorded(self, db: Session):
        encoded = base64.b64encode(PNG_BYTES).decode()
        service = provider(body={"data": [{"b64_json": encoded}]})

        result = await service.generate(db, "Soup", item_id="custom-1")

        assert result.is_hosted is False
        assert result.url.startswith("/uploads/items/")
        stored = Path(settings.upload_dir) / Path(result.url).name
        assert stored.read_bytes() == PNG_BYTES
        assert db.get(GeneratedImage, "custom-1") is None

    async def test_empty_response_raises(self, db: Session):
        with pytest.raises(ImageGenerationError):
            await provider(body={"data": []}).generate(db, "Soup")

    async def test_invalid_base64_raises(self, db: Session):
        with pytest.raises(ImageGenerationError):
            await provider(body={"data": [{"b64_json": "@@not base64@@"}]}).generate(db, "Soup")


class TestProviderErrors:
    async def test_missing_api_key(self, db: Session, monkeypatch):
        monkeypatch.setattr(settings, "image_api_key", "")

        with pytest.raises(ServiceUnavailableError):
            await provider().generate(db, "Soup")

    async def test_rate_limit(self, db: Session):
        with pytest.raises(RateLimitError):
            await provider(status_code=429).generate(db, "Soup")

    async def test_server_error(self, db: Session):
        with pytest.raises(ServiceUnavailableError):
            await provider(status_code=503).generate(db, "Soup")

    async def test_rejected_request(self, db: Session):
        with pytest.raises(ImageGenerationError) as exc:
            await provider(status_code=400, body={"error": "bad prompt"}).generate(db, "Soup")

        assert not isinstance(exc.value, ServiceUnavailableError)

    async def test_connection_errors_are_retried(self, db: Session, no_sleep):
        attempts = []

        def handler(request):
            attempts.append(request)
            raise httpx.ConnectError("refused", request=request)

        service = ImageGenerationService(transport=httpx.MockTransport(handler))

        with pytest.raises(ServiceUnavailableError):
            await service.generate(db, "Soup")

        assert len(attempts) == 3
        assert no_sleep.await_count == 2
