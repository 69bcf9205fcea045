"""
Unit tests for FileService.

Tests file handling including:
- File type and size validation
- Image optimization
- Deletion confined to the upload directory
"""
import os
import tempfile
from io import BytesIO
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import UploadFile
from PIL import Image

from app.config import settings
from app.services.file_service import MAX_UPLOAD_BYTES, FileService


class TestFileServiceInit:
    def test_creates_upload_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            upload_dir = os.path.join(tmpdir, "uploads", "items")
            FileService(upload_dir=upload_dir)

            assert os.path.exists(upload_dir)

    def test_uses_configured_directory(self):
        assert FileService().upload_dir == Path(settings.upload_dir)


class TestFileTypeValidation:
    """Tests for file type validation."""

    @pytest.mark.parametrize(
        "content_type,filename",
        [
            ("image/jpeg", "melt.jpg"),
            ("image/png", "melt.png"),
            ("image/webp", "melt.webp"),
        ],
    )
    async def test_accepts_images(self, tmp_path, content_type, filename):
        service = FileService(upload_dir=str(tmp_path))

        path = await service.save_item_image(
            "custom-1", create_mock_upload_file(content_type, filename)
        )

        assert os.path.exists(path)

    @pytest.mark.parametrize("content_type", ["application/pdf", "text/plain", "image/gif"])
    async def test_rejects_invalid_type(self, tmp_path, content_type):
        service = FileService(upload_dir=str(tmp_path))

        with pytest.raises(ValueError, match="Invalid file type"):
            await service.save_item_image(
                "custom-1", create_mock_upload_file(content_type, "file.bin", content=b"x")
            )

    async def test_rejects_empty_file(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))

        with pytest.raises(ValueError, match="empty"):
            await service.save_item_image(
                "custom-1", create_mock_upload_file("image/png", "a.png", content=b"")
            )

    async def test_rejects_oversized_file(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))
        huge = b"\0" * (MAX_UPLOAD_BYTES + 1)

        with pytest.raises(ValueError, match="10 MB"):
            await service.save_item_image(
                "custom-1", create_mock_upload_file("image/png", "a.png", content=huge)
            )

        assert list(tmp_path.iterdir()) == []


class TestImageContentDetection:
    async def test_rejects_markup_declared_as_image(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))
        upload = create_mock_upload_file(
            "image/png", "evil.html", content=b"<script>alert(document.cookie)</script>"
        )

        with pytest.raises(ValueError, match="not a valid"):
            await service.save_item_image("custom-x", upload)

        assert list(tmp_path.iterdir()) == []

    async def test_rejects_unsupported_format(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))
        buffer = BytesIO()
        Image.new("RGB", (10, 10)).save(buffer, format="GIF")

        with pytest.raises(ValueError, match="Unsupported image format"):
            await service.save_item_image(
                "custom-x", create_mock_upload_file("image/png", "a.png", content=buffer.getvalue())
            )

        assert list(tmp_path.iterdir()) == []

    @pytest.mark.parametrize(
        "content_type,filename,expected",
        [
            ("image/jpeg", "melt.html", ".jpg"),
            ("image/png", "melt", ".png"),
            ("image/webp", "melt.svg", ".webp"),
        ],
    )
    async def test_extension_follows_detected_format(
        self, tmp_path, content_type, filename, expected
    ):
        service = FileService(upload_dir=str(tmp_path))

        path = await service.save_item_image(
            "custom-1", create_mock_upload_file(content_type, filename)
        )

        assert Path(path).suffix == expected


class TestFileSaving:
    async def test_generates_unique_filename(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))

        path1 = await service.save_item_image("custom-1", create_mock_upload_file("image/jpeg", "a.jpg"))
        path2 = await service.save_item_image("custom-1", create_mock_upload_file("image/jpeg", "a.jpg"))

        assert path1 != path2

    async def test_filename_uses_sanitized_item_id(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))

        path = await service.save_item_image(
            "../../etc/passwd", create_mock_upload_file("image/png", "x.png")
        )

        assert Path(path).parent == tmp_path
        assert Path(path).name.startswith("etcpasswd_")
        assert path.endswith(".png")

    def test_save_image_bytes(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))

        path = service.save_image_bytes("s6", b"\x89PNG data")

        assert Path(path).read_bytes() == b"\x89PNG data"
        assert path.endswith(".png")


class TestImageOptimization:
    def test_optimizes_large_image(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))
        large_image_path = tmp_path / "large.jpg"
        Image.new("RGB", (4000, 3000), color="red").save(large_image_path)

        service._optimize_image(large_image_path, max_width=1600)

        with Image.open(large_image_path) as optimized:
            assert optimized.width == 1600
            assert optimized.height == 1200

    def test_preserves_small_image(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))
        small_image_path = tmp_path / "small.jpg"
        Image.new("RGB", (800, 600), color="blue").save(small_image_path)

        service._optimize_image(small_image_path)

        with Image.open(small_image_path) as optimized:
            assert optimized.size == (800, 600)

    def test_handles_corrupt_image_gracefully(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))
        corrupt_path = tmp_path / "corrupt.jpg"
        corrupt_path.write_bytes(b"not an image")

        service._optimize_image(corrupt_path)

        assert corrupt_path.read_bytes() == b"not an image"


class TestFileDeletion:
    def test_deletes_file_by_url(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))
        path = service.save_image_bytes("s6", b"data")

        assert service.delete_file(service.get_file_url(path)) is True
        assert not os.path.exists(path)

    def test_returns_false_for_nonexistent_file(self, tmp_path):
        service = FileService(upload_dir=str(tmp_path))

        assert service.delete_file(str(tmp_path / "nonexistent.jpg")) is False

    def test_ignores_files_outside_upload_dir(self, tmp_path):
        upload_dir = tmp_path / "uploads"
        outside = tmp_path / "keep.txt"
        outside.write_text("keep")
        service = FileService(upload_dir=str(upload_dir))

        assert service.delete_file(str(outside)) is False
        assert outside.exists()


class TestFileUrlConversion:
    def test_converts_path_to_url(self):
        assert FileService().get_file_url("uploads/items/test.jpg") == "/uploads/items/test.jpg"

    @pytest.mark.parametrize("path", [None, ""])
    def test_returns_none_for_missing_path(self, path):
        assert FileService().get_file_url(path) is None


def create_mock_upload_file(content_type: str, filename: str, content: bytes = None) -> UploadFile:
    """Create a mock UploadFile; defaults to a small valid image."""
    if content is None:
        img = Image.new("RGB", (100, 100), color="red")
        buffer = BytesIO()
        if "png" in content_type:
            img.save(buffer, format="PNG")
        elif "webp" in content_type:
            img.save(buffer, format="WEBP")
        else:
            img.save(buffer, format="JPEG")
        content = buffer.getvalue()

    mock_file = MagicMock(spec=UploadFile)
    mock_file.content_type = content_type
    mock_file.filename = filename
    mock_file.read = AsyncMock(return_value=content)
    return mock_file
