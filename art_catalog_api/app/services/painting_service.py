"""
Queries over the paintings collection.

Every query is a single pass over the paintings loaded from
``paintings-nested.json`` and returns matches in source order.
Text comparisons (title, color name) are case‑insensitive.
"""

import logging
from typing import List, Optional

from ..core.catalog import get_catalog
from ..schemas.painting import PaintingRead

logger = logging.getLogger(__name__)


class PaintingService:
    """Read‑only access to paintings."""

    @classmethod
    async def list_paintings(cls) -> List[PaintingRead]:
        """Return all paintings."""
        return list(get_catalog().paintings)

    @classmethod
    async def get_painting(cls, painting_id: int) -> Optional[PaintingRead]:
        """Return the painting with the given ID or ``None``."""
        for painting in get_catalog().paintings:
            if painting.painting_id == painting_id:
                return painting
        logger.info("Painting %s not found", painting_id)
        return None

    @classmethod
    async def list_by_gallery(cls, gallery_id: int) -> List[PaintingRead]:
        """Return paintings held by the gallery with the given ID."""
        return [p for p in get_catalog().paintings if p.gallery.gallery_id == gallery_id]

    @classmethod
    async def list_by_artist(cls, artist_id: int) -> List[PaintingRead]:
        """Return paintings created by the artist with the given ID."""
        return [p for p in get_catalog().paintings if p.artist.artist_id == artist_id]

    @classmethod
    async def list_by_year_range(cls, min_year: int, max_year: int) -> List[PaintingRead]:
        """Return paintings with ``min_year <= yearOfWork <= max_year``.

        Both bounds are inclusive.  An inverted range (``min_year``
        greater than ``max_year``) matches nothing.
        """
        return [p for p in get_catalog().paintings if min_year <= p.year_of_work <= max_year]

    @classmethod
    async def search_by_title(cls, text: str) -> List[PaintingRead]:
        """Return paintings whose title contains ``text``."""
        needle = text.lower()
        return [p for p in get_catalog().paintings if needle in p.title.lower()]

    @classmethod
    async def list_by_color(cls, color_name: str) -> List[PaintingRead]:
        """Return paintings with a dominant color named exactly ``color_name``."""
        return [p for p in get_catalog().paintings if p.has_color(color_name)]
