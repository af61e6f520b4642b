"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one concern
(planet lookups, operational probes, API docs, the landing page).  The
routers are aggregated in ``api/router.py``.
"""
