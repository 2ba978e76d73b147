"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each collection of the catalog (paintings, artists and
galleries) has its own schema module, service and router defined in
``api/endpoints``.  All routes are grouped by ``api/router.py`` and
mounted under the ``/api`` prefix.
"""

from .main import app  # noqa: F401
