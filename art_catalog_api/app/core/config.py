"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API runs out of the box against the fixtures bundled with the
package.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# art_catalog_api/
PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Art Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Directory holding paintings-nested.json, artists.json and
    # galleries.json.  Relative paths are resolved against the package
    # directory by ``get_data_dir``.
    data_dir: str = os.getenv("DATA_DIR", "data")


def get_data_dir(data_dir: Optional[str] = None) -> Path:
    """Compute the directory containing the catalog fixture files.

    If ``data_dir`` (or ``settings.data_dir`` when omitted) is an
    absolute path, use it directly.  Otherwise resolve it relative to
    the ``art_catalog_api`` package directory.
    """
    path = Path(data_dir if data_dir is not None else settings.data_dir)
    if path.is_absolute():
        return path
    return (PACKAGE_DIR / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
