"""Catalog API: merged catalog, custom items and item images."""

import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas import (
    CatalogItem,
    CustomItemIn,
    GenerateImageRequest,
    GenerateImageResponse,
    GeneratedImageIn,
    GeneratedImageOut,
)
from app.seed_catalog import is_builtin
from app.services.auth.dependencies import require_admin
from app.services.catalog_service import CatalogService, is_hosted_image_url
from app.services.file_service import file_service
from app.services.image_service import (
    ImageGenerationError,
    RateLimitError,
    ServiceUnavailableError,
    image_generation_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["catalog"])


def _find_custom_item(db: Session, item_id: str):
    return next(
        (item for item in CatalogService.list_custom_items(db) if item.id == item_id), None
    )


@router.get("/catalog", response_model=List[CatalogItem])
async def get_catalog(db: Session = Depends(get_db)):
    """Seed catalog merged with custom items and generated images."""
    return CatalogService.get_catalog(db)


@router.get("/custom-items", response_model=List[CatalogItem])
async def list_custom_items(db: Session = Depends(get_db)):
    return CatalogService.list_custom_items(db)


@router.post("/custom-items", response_model=CatalogItem)
async def save_custom_item(
    data: CustomItemIn,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    if data.id and is_builtin(data.id):
        raise HTTPException(status_code=400, detail="Built-in items cannot be overwritten")
    return CatalogService.save_custom_item(db, data)


@router.delete("/custom-items/{item_id}")
async def delete_custom_item(
    item_id: str,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    existing = _find_custom_item(db, item_id)
    if existing is None or not CatalogService.delete_custom_item(db, item_id):
        raise HTTPException(status_code=404, detail="Custom item not found")
    if existing.image_url and not is_hosted_image_url(existing.image_url):
        file_service.delete_file(existing.image_url)
    return {"success": True}


@router.post("/custom-items/{item_id}/image", response_model=CatalogItem)
async def upload_item_image(
    item_id: str,
    image: UploadFile = File(...),
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """
    Store an uploaded image locally and attach it to a custom item.

    Locally served images work for drafts but do not satisfy the publish gate.
    A previously uploaded local image is removed.
    """
    existing = _find_custom_item(db, item_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Custom item not found")

    try:
        path = await file_service.save_item_image(item_id, image)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    updated = CatalogService.set_item_image(db, item_id, file_service.get_file_url(path))
    if existing.image_url and not is_hosted_image_url(existing.image_url):
        file_service.delete_file(existing.image_url)
    return updated


@router.get("/generated-images", response_model=List[GeneratedImageOut])
async def list_generated_images(db: Session = Depends(get_db)):
    return [
        GeneratedImageOut(item_id=image.item_id, image_url=image.image_url)
        for image in CatalogService.list_generated_images(db)
    ]


@router.post("/generated-images", response_model=GeneratedImageOut)
async def save_generated_image(
    data: GeneratedImageIn,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    image = CatalogService.save_generated_image(
        db, data.item_id, data.image_url, data.item_data
    )
    return GeneratedImageOut(item_id=image.item_id, image_url=image.image_url)


@router.post("/generate-image", response_model=GenerateImageResponse)
async def generate_image(
    data: GenerateImageRequest,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        result = await image_generation_service.generate(
            db, data.prompt, size=data.size, item_id=data.item_id
        )
    except RateLimitError:
        raise HTTPException(status_code=429, detail="Image service is busy, try again shortly")
    except ServiceUnavailableError:
        raise HTTPException(status_code=503, detail="Image service temporarily unavailable")
    except ImageGenerationError as e:
        logger.error("Image generation failed: %s", e)
        raise HTTPException(status_code=502, detail="Failed to generate image")

    return GenerateImageResponse(url=result.url, saved=result.saved, is_hosted=result.is_hosted)
