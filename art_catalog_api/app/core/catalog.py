"""
In‑memory art catalog loaded from static JSON fixtures.

This module provides functions for loading the three catalog
collections (``load_catalog``), installing them once on application
start (``init_catalog``) and retrieving them from request handlers
(``get_catalog``).  The fixture files are read from the directory
configured by ``settings.data_dir``:

* ``paintings-nested.json`` – paintings with nested artist, gallery
  and annotation details;
* ``artists.json`` – artists;
* ``galleries.json`` – galleries.

Records are validated into Pydantic models and stored as tuples.  The
catalog is never mutated after loading, so it can be shared by all
requests without locking.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import get_data_dir
from ..schemas.artist import ArtistRead
from ..schemas.gallery import GalleryRead
from ..schemas.painting import PaintingRead

PAINTINGS_FILE = "paintings-nested.json"
ARTISTS_FILE = "artists.json"
GALLERIES_FILE = "galleries.json"

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class CatalogLoadError(RuntimeError):
    """Raised when a fixture file is missing, unreadable or malformed."""


@dataclass(frozen=True)
class Catalog:
    """The three read‑only collections of the catalog, in source order."""

    paintings: Tuple[PaintingRead, ...]
    artists: Tuple[ArtistRead, ...]
    galleries: Tuple[GalleryRead, ...]


_catalog: Optional[Catalog] = None


def _load_records(path: Path, model: Type[RecordT]) -> Tuple[RecordT, ...]:
    """Read a JSON array from ``path`` and validate each item as ``model``."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {e}") from e
    try:
        records = TypeAdapter(Tuple[model, ...]).validate_json(raw)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid catalog file {path}: {e}") from e
    return records


def load_catalog(data_dir: Union[str, Path, None] = None) -> Catalog:
    """Load and validate all fixture files from ``data_dir``.

    Relative directories are resolved against the package directory;
    when omitted, ``settings.data_dir`` is used.

    Raises
    ------
    CatalogLoadError
        If any of the files is missing or does not match its schema.
    """
    directory = get_data_dir(str(data_dir) if data_dir is not None else None)
    return Catalog(
        paintings=_load_records(directory / PAINTINGS_FILE, PaintingRead),
        artists=_load_records(directory / ARTISTS_FILE, ArtistRead),
        galleries=_load_records(directory / GALLERIES_FILE, GalleryRead),
    )


def init_catalog(data_dir: Union[str, Path, None] = None) -> Catalog:
    """Load the catalog and install it as the process‑wide instance."""
    global _catalog
    catalog = load_catalog(data_dir)
    _catalog = catalog
    logger.info(
        "Catalog loaded: %d paintings, %d artists, %d galleries",
        len(catalog.paintings),
        len(catalog.artists),
        len(catalog.galleries),
    )
    return catalog


def get_catalog() -> Catalog:
    """Return the installed catalog, loading it on first use."""
    if _catalog is None:
        return init_catalog()
    return _catalog
