"""
Queries over the artists collection.
"""

from typing import List

from ..core.catalog import get_catalog
from ..schemas.artist import ArtistRead


class ArtistService:
    """Read‑only access to artists."""

    @classmethod
    async def list_artists(cls) -> List[ArtistRead]:
        """Return all artists."""
        return list(get_catalog().artists)

    @classmethod
    async def list_by_country(cls, country: str) -> List[ArtistRead]:
        """Return artists whose nationality equals ``country`` (case‑insensitive)."""
        wanted = country.lower()
        return [a for a in get_catalog().artists if a.nationality.lower() == wanted]
