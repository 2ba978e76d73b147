"""
Top‑level package for the Art Catalog API.

This file makes ``art_catalog_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``art_catalog_api.app.main``.  The bundled JSON fixtures live in the
``data`` directory next to this file.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
