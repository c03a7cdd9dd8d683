"""
Submission endpoints.

These routes provide a CRUD API over registration submissions plus a
bulk delete.  Every response is an envelope with a ``success`` flag;
failures are raised as domain errors by ``SubmissionService`` and
converted to ``{"success": false, "message": ..., "errors": [...]}``
by the exception handlers registered in ``main.create_app``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from registration_app.app.api.deps import get_submission_service
from registration_app.app.core.config import settings
from registration_app.app.schemas.submission import (
    BulkDeleteEnvelope,
    BulkDeleteRequest,
    ErrorEnvelope,
    SubmissionCreate,
    SubmissionEnvelope,
    SubmissionListEnvelope,
    SubmissionPatch,
    SubmissionRead,
)
from registration_app.app.services.query_service import SubmissionFilters
from registration_app.app.services.submission_service import SubmissionService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}}


@router.post(
    "",
    response_model=SubmissionEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_submission(
    payload: SubmissionCreate,
    service: SubmissionService = Depends(get_submission_service),
) -> SubmissionEnvelope:
    """Create a submission.

    All field rules are checked and every failure is reported in
    ``errors``.  The password, when present, is validated but not
    stored.
    """
    submission = service.create_submission(payload)
    return SubmissionEnvelope(
        message="Submission created successfully",
        data=SubmissionRead.model_validate(submission),
    )


@router.get("", response_model=SubmissionListEnvelope, responses=BAD_REQUEST)
async def list_submissions(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    country: Optional[str] = Query(None),
    gender: Optional[str] = Query(None),
    min_age: Optional[int] = Query(None, alias="minAge"),
    max_age: Optional[int] = Query(None, alias="maxAge"),
    search: Optional[str] = Query(None),
    service: SubmissionService = Depends(get_submission_service),
) -> SubmissionListEnvelope:
    """List submissions with filters and pagination.

    - **page**, **limit**: 1‑indexed page and page size (default from
      ``DEFAULT_PAGE_LIMIT``).  A page past the end is empty.
    - **country**, **gender**: case‑insensitive exact match.
    - **minAge**, **maxAge**: inclusive age bounds.
    - **search**: case‑insensitive substring of first name, last name
      or email.

    ``count`` and ``totalPages`` describe the filtered set.
    """
    limit = limit or settings.default_page_limit
    filters = SubmissionFilters(
        country=country,
        gender=gender,
        min_age=min_age,
        max_age=max_age,
        search=search,
    )
    result = service.list_submissions(filters, page=page, limit=limit)
    return SubmissionListEnvelope(
        count=result.count,
        page=page,
        limit=limit,
        total_pages=result.total_pages,
        data=[SubmissionRead.model_validate(item) for item in result.items],
    )


@router.post("/bulk-delete", response_model=BulkDeleteEnvelope, responses=BAD_REQUEST)
async def bulk_delete_submissions(
    payload: BulkDeleteRequest,
    service: SubmissionService = Depends(get_submission_service),
) -> BulkDeleteEnvelope:
    """Delete several submissions by id.

    Ids that do not exist are ignored; ``deletedCount`` tells how many
    records were actually removed.
    """
    deleted = service.bulk_delete(payload.ids)
    return BulkDeleteEnvelope(
        message=f"{deleted} submission(s) deleted successfully",
        deleted_count=deleted,
    )


@router.get(
    "/{submission_id}",
    response_model=SubmissionEnvelope,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
async def get_submission(
    submission_id: int,
    service: SubmissionService = Depends(get_submission_service),
) -> SubmissionEnvelope:
    """Retrieve a single submission by its id."""
    submission = service.get_submission(submission_id)
    return SubmissionEnvelope(data=SubmissionRead.model_validate(submission))


@router.put("/{submission_id}", response_model=SubmissionEnvelope, responses={**NOT_FOUND, **BAD_REQUEST})
async def replace_submission(
    submission_id: int,
    payload: SubmissionCreate,
    service: SubmissionService = Depends(get_submission_service),
) -> SubmissionEnvelope:
    """Replace every field of a submission, with full validation."""
    submission = service.replace_submission(submission_id, payload)
    return SubmissionEnvelope(
        message="Submission updated successfully",
        data=SubmissionRead.model_validate(submission),
    )


@router.patch("/{submission_id}", response_model=SubmissionEnvelope, responses=NOT_FOUND)
async def patch_submission(
    submission_id: int,
    payload: SubmissionPatch,
    service: SubmissionService = Depends(get_submission_service),
) -> SubmissionEnvelope:
    """Update only the provided fields.

    Values are stored as sent; field rules are *not* applied here, so a
    PATCH can store data that POST or PUT would reject.
    """
    submission = service.patch_submission(submission_id, payload)
    return SubmissionEnvelope(
        message="Submission updated partially",
        data=SubmissionRead.model_validate(submission),
    )


@router.delete("/{submission_id}", response_model=SubmissionEnvelope, responses=NOT_FOUND)
async def delete_submission(
    submission_id: int,
    service: SubmissionService = Depends(get_submission_service),
) -> SubmissionEnvelope:
    """Delete a submission and return the removed record."""
    submission = service.delete_submission(submission_id)
    return SubmissionEnvelope(
        message="Submission deleted successfully",
        data=SubmissionRead.model_validate(submission),
    )
