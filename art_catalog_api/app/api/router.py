"""
Top‑level router of the API.

This router aggregates the collection routers under a unified
prefix.  Painting routes define their own paths because the
collection (``/paintings``) and single‑item filters (``/painting/...``)
use different path segments.
"""

from fastapi import APIRouter

from .endpoints import artists, galleries, paintings

router = APIRouter()

router.include_router(paintings.router, tags=["paintings"])
router.include_router(artists.router, prefix="/artists", tags=["artists"])
router.include_router(galleries.router, prefix="/galleries", tags=["galleries"])
