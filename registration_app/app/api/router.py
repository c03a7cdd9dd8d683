"""
Top‑level router for the JSON API.

This router aggregates the domain routers.  The application mounts it
under ``/api``, giving ``/api/submissions`` and ``/api/stats``.
"""

from fastapi import APIRouter

from .endpoints import statistics, submissions

router = APIRouter()

router.include_router(submissions.router, prefix="/submissions", tags=["submissions"])
router.include_router(statistics.router, prefix="/stats", tags=["statistics"])
