"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes the
routers of all catalog collections.  The application mounts it under
the ``/api`` prefix.
"""
