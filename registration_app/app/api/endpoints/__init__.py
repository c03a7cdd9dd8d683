"""
Endpoint subpackage for the JSON API.

Each module in this package defines an APIRouter for a specific
domain (submissions, statistics).  The routers are aggregated in
``api/router.py``.
"""
