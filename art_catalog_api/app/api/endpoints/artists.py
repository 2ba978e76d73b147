"""
Artist endpoints.

List all artists or the artists of one nationality.  The country is
matched case‑insensitively against the ``Nationality`` field.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from art_catalog_api.app.schemas.artist import ArtistRead
from art_catalog_api.app.schemas.error import ErrorResponse
from art_catalog_api.app.services.artist_service import ArtistService

router = APIRouter()


@router.get("", response_model=List[ArtistRead])
async def list_artists() -> List[ArtistRead]:
    """Return every artist in the catalog."""
    return await ArtistService.list_artists()


@router.get(
    "/{country}",
    response_model=List[ArtistRead],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def list_artists_by_country(country: str) -> List[ArtistRead]:
    """Return the artists of a nationality.

    Raises 404 if no artist has this nationality.
    """
    country = country.lower()
    artists = await ArtistService.list_by_country(country)
    if not artists:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No artists found within the country: {country}",
        )
    return artists
