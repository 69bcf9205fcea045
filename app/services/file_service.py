"""File handling service for menu item images."""
import logging
import uuid
from datetime import datetime, timezone
from io import BytesIO
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from app.config import settings

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp")
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
UPLOAD_URL_PREFIX = "/uploads/items"
# Pillow format name -> stored file extension
IMAGE_FORMATS = {"JPEG": ".jpg", "PNG": ".png", "WEBP": ".webp"}


class FileService:
    """Stores item images under the local upload directory."""

    def __init__(self, upload_dir: Optional[str] = None):
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def _new_filename(self, item_id: str, extension: str) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        unique_id = uuid.uuid4().hex[:8]
        safe_id = "".join(c for c in item_id if c.isalnum() or c in "-_")[:40]
        return f"{safe_id or 'item'}_{timestamp}_{unique_id}{extension}"

    async def save_item_image(self, item_id: str, file: UploadFile) -> str:
        """
        Save an uploaded item image to disk.

        The stored extension comes from the format Pillow detects in the
        bytes, never from the client filename.

        Returns:
            Relative path to saved file

        Raises:
            ValueError: If the file type or size is invalid
        """
        if file.content_type not in ALLOWED_CONTENT_TYPES:
            raise ValueError(
                f"Invalid file type: {file.content_type}. Allowed: {list(ALLOWED_CONTENT_TYPES)}"
            )

        contents = await file.read()
        if not contents:
            raise ValueError("Uploaded file is empty")
        if len(contents) > MAX_UPLOAD_BYTES:
            raise ValueError("Uploaded file is larger than 10 MB")

        extension = self._detect_extension(contents)
        file_path = self.upload_dir / self._new_filename(item_id, extension)
        file_path.write_bytes(contents)

        self._optimize_image(file_path)
        logger.info("Stored image for %s at %s", item_id, file_path)
        return str(file_path)

    def _detect_extension(self, contents: bytes) -> str:
        try:
            with Image.open(BytesIO(contents)) as img:
                image_format = img.format
                img.verify()
        except Exception as e:
            logger.info("Rejected upload that is not a readable image: %s", e)
            raise ValueError("Uploaded file is not a valid JPEG, PNG or WEBP image")

        if image_format not in IMAGE_FORMATS:
            raise ValueError(f"Unsupported image format: {image_format}")
        return IMAGE_FORMATS[image_format]

    def save_image_bytes(self, item_id: str, data: bytes, extension: str = ".png") -> str:
        """Write already-decoded image bytes (e.g. a base64 provider response)."""
        file_path = self.upload_dir / self._new_filename(item_id, extension)
        file_path.write_bytes(data)
        return str(file_path)

    def _optimize_image(self, file_path: Path, max_width: int = 1600):
        """Downscale wide images and re-encode; keeps the original on failure."""
        try:
            with Image.open(file_path) as img:
                if img.mode in ("RGBA", "P") and file_path.suffix.lower() in (".jpg", ".jpeg"):
                    img = img.convert("RGB")

                if img.width > max_width:
                    ratio = max_width / img.width
                    img = img.resize(
                        (max_width, int(img.height * ratio)), Image.Resampling.LANCZOS
                    )

                img.save(file_path, optimize=True, quality=85)
        except (OSError, UnidentifiedImageError) as e:
            logger.warning("Could not optimize image %s: %s", file_path, e)

    def delete_file(self, file_path: str) -> bool:
        """
        Delete a stored image given its path or served URL.

        Only files directly inside the upload directory are touched.
        """
        try:
            path = self.upload_dir / Path(file_path).name
            if path.is_file():
                path.unlink()
                return True
            return False
        except OSError as e:
            logger.error("Error deleting file %s: %s", file_path, e)
            return False

    def get_file_url(self, file_path: Optional[str]) -> Optional[str]:
        """Stored uploads are served under /uploads/items (not production-image-safe)."""
        if not file_path:
            return None
        return f"{UPLOAD_URL_PREFIX}/{Path(file_path).name}"


# Singleton instance
file_service = FileService()
