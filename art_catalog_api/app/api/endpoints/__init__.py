"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one catalog
collection (paintings, artists, galleries).  The routers are
aggregated in ``api/router.py`` and then included in the main
application.
"""
