"""
Statistics endpoint.

``GET /api/stats`` returns counts by country and gender, the average
age and the age histogram, recomputed from every stored submission.
"""

from fastapi import APIRouter, Depends

from registration_app.app.api.deps import get_submission_service
from registration_app.app.schemas.stats import StatsEnvelope
from registration_app.app.services.submission_service import SubmissionService

router = APIRouter()


@router.get("", response_model=StatsEnvelope)
async def get_stats(service: SubmissionService = Depends(get_submission_service)) -> StatsEnvelope:
    """Return aggregated statistics over all submissions."""
    return StatsEnvelope(data=service.statistics())
