"""
Painting endpoints.

These routes return paintings from the static catalog, either the
whole collection or the subset matching a single filter: painting ID,
gallery ID, artist ID, year range, title text or dominant color name.
Filters that match nothing respond with HTTP 404 and a message;
non‑numeric IDs or years respond with HTTP 400.
"""

import re
from typing import List, Tuple

from fastapi import APIRouter, HTTPException, status

from art_catalog_api.app.schemas.error import ErrorResponse
from art_catalog_api.app.schemas.painting import PaintingRead
from art_catalog_api.app.services.painting_service import PaintingService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}

# Plain ASCII integers only: no whitespace, underscores or non-ASCII digits.
YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")


def _not_found(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def _parse_year_range(min_year: str, max_year: str) -> Tuple[int, int]:
    """Convert the raw path segments to integers or fail with HTTP 400."""
    if not (YEAR_PATTERN.fullmatch(min_year) and YEAR_PATTERN.fullmatch(max_year)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid min/max year format",
        )
    return int(min_year), int(max_year)


@router.get("/paintings", response_model=List[PaintingRead])
async def list_paintings() -> List[PaintingRead]:
    """Return every painting in the catalog."""
    return await PaintingService.list_paintings()


@router.get(
    "/painting/{painting_id}",
    response_model=PaintingRead,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def get_painting(painting_id: int) -> PaintingRead:
    """Retrieve a single painting by its ID.

    Raises 404 if no painting has this ID.
    """
    painting = await PaintingService.get_painting(painting_id)
    if painting is None:
        raise _not_found(f"Painting with the id: {painting_id} is not found")
    return painting


@router.get(
    "/painting/gallery/{gallery_id}",
    response_model=List[PaintingRead],
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def list_paintings_by_gallery(gallery_id: int) -> List[PaintingRead]:
    """Return the paintings held by a gallery."""
    paintings = await PaintingService.list_by_gallery(gallery_id)
    if not paintings:
        raise _not_found(f"No paintings found for the gallery ID: {gallery_id}")
    return paintings


@router.get(
    "/painting/artist/{artist_id}",
    response_model=List[PaintingRead],
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def list_paintings_by_artist(artist_id: int) -> List[PaintingRead]:
    """Return the paintings created by an artist."""
    paintings = await PaintingService.list_by_artist(artist_id)
    if not paintings:
        raise _not_found(f"No paintings found for the artist ID: {artist_id}")
    return paintings


@router.get(
    "/painting/year/{min_year}/{max_year}",
    response_model=List[PaintingRead],
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def list_paintings_by_year_range(min_year: str, max_year: str) -> List[PaintingRead]:
    """Return paintings created between two years, both inclusive.

    - **min_year**, **max_year**: integer years; anything else is
      rejected with HTTP 400.
    """
    lower, upper = _parse_year_range(min_year, max_year)
    paintings = await PaintingService.list_by_year_range(lower, upper)
    if not paintings:
        raise _not_found(
            f"No paintings found within the given year range of min: {lower} and max: {upper}"
        )
    return paintings


@router.get(
    "/painting/title/{text:path}",
    response_model=List[PaintingRead],
    responses=NOT_FOUND,
)
async def search_paintings_by_title(text: str) -> List[PaintingRead]:
    """Return paintings whose title contains ``text`` (case‑insensitive).

    The text may contain slashes; an empty text matches nothing.
    """
    search_text = text.lower()
    paintings = await PaintingService.search_by_title(search_text) if search_text else []
    if not paintings:
        raise _not_found(f"No paintings found with the provided title text: {search_text}")
    return paintings


@router.get(
    "/painting/color/{name:path}",
    response_model=List[PaintingRead],
    responses=NOT_FOUND,
)
async def list_paintings_by_color(name: str) -> List[PaintingRead]:
    """Return paintings having a dominant color called ``name`` (case‑insensitive)."""
    color_name = name.lower()
    paintings = await PaintingService.list_by_color(color_name)
    if not paintings:
        raise _not_found(f"No paintings found with the provided color name: {color_name}")
    return paintings
