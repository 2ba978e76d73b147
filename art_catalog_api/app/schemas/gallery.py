"""
Pydantic models for gallery records from ``galleries.json``.
"""

from pydantic import BaseModel, Field


class GalleryRead(BaseModel):
    """Schema for reading a gallery from the API."""

    gallery_id: int = Field(..., alias="GalleryID", examples=[1])
    gallery_country: str = Field(..., alias="GalleryCountry", examples=["Netherlands"])

    model_config = {"extra": "allow", "populate_by_name": True}
