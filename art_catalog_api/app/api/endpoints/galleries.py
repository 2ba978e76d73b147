"""
Gallery endpoints.

List all galleries or the galleries located in one country.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from art_catalog_api.app.schemas.error import ErrorResponse
from art_catalog_api.app.schemas.gallery import GalleryRead
from art_catalog_api.app.services.gallery_service import GalleryService

router = APIRouter()


@router.get("", response_model=List[GalleryRead])
async def list_galleries() -> List[GalleryRead]:
    return await GalleryService.list_galleries()


@router.get(
    "/{country}",
    response_model=List[GalleryRead],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def list_galleries_by_country(country: str) -> List[GalleryRead]:
    """Return the galleries located in ``country`` (case‑insensitive)."""
    country = country.lower()
    galleries = await GalleryService.list_by_country(country)
    if not galleries:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No galleries found within the country: {country}",
        )
    return galleries
