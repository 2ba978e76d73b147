"""
Pydantic models for artist records from ``artists.json``.
"""

from pydantic import BaseModel, Field


class ArtistRead(BaseModel):
    """Schema for reading an artist from the API."""

    artist_id: int = Field(..., alias="ArtistID", examples=[1])
    nationality: str = Field(..., alias="Nationality", examples=["Netherlands"])

    model_config = {"extra": "allow", "populate_by_name": True}
