"""
Queries over the galleries collection.
"""

from typing import List

from ..core.catalog import get_catalog
from ..schemas.gallery import GalleryRead


class GalleryService:
    """Read‑only access to galleries."""

    @classmethod
    async def list_galleries(cls) -> List[GalleryRead]:
        """Return all galleries."""
        return list(get_catalog().galleries)

    @classmethod
    async def list_by_country(cls, country: str) -> List[GalleryRead]:
        """Return galleries located in ``country`` (case‑insensitive)."""
        wanted = country.lower()
        return [g for g in get_catalog().galleries if g.gallery_country.lower() == wanted]
