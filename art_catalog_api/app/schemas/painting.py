"""
Pydantic models for painting records.

A painting record from ``paintings-nested.json`` embeds a summary of
its artist and gallery as well as image annotation details, including
the list of dominant colors detected in the image.
"""

from typing import List

from pydantic import BaseModel, Field


class DominantColor(BaseModel):
    """A dominant color of the painting's image (RGB, web value, name)."""

    name: str = Field(..., examples=["Goldenrod"])

    model_config = {"extra": "allow"}


class PaintingAnnotation(BaseModel):
    dominant_colors: List[DominantColor] = Field(..., alias="dominantColors")

    model_config = {"extra": "allow", "populate_by_name": True}


class PaintingDetails(BaseModel):
    annotation: PaintingAnnotation

    model_config = {"extra": "allow"}


class PaintingArtist(BaseModel):
    """Artist summary nested in a painting record."""

    artist_id: int = Field(..., alias="artistID", examples=[1])

    model_config = {"extra": "allow", "populate_by_name": True}


class PaintingGallery(BaseModel):
    """Gallery summary nested in a painting record."""

    gallery_id: int = Field(..., alias="galleryID", examples=[1])

    model_config = {"extra": "allow", "populate_by_name": True}


class PaintingRead(BaseModel):
    """Schema for reading a painting from the API."""

    painting_id: int = Field(..., alias="paintingID", examples=[1])
    title: str = Field(..., examples=["The Milkmaid"])
    year_of_work: int = Field(..., alias="yearOfWork", examples=[1658])
    artist: PaintingArtist
    gallery: PaintingGallery
    details: PaintingDetails

    model_config = {"extra": "allow", "populate_by_name": True}

    def has_color(self, name: str) -> bool:
        """Return ``True`` if any dominant color is called ``name`` (case‑insensitive)."""
        wanted = name.lower()
        return any(color.name.lower() == wanted for color in self.details.annotation.dominant_colors)
