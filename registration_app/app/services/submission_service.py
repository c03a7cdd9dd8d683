"""
Service layer for submissions.

This module implements the create / read / update / delete operations
behind the ``/api/submissions`` routes and the legacy HTML form.
Writes that create or fully replace a record run the validator first
and raise ``SubmissionValidationError`` with every failed rule.
Unknown ids raise ``SubmissionNotFoundError``.  Partial updates are
applied verbatim without business‑rule validation.

Accepted values are normalised before storage: names and phone are
trimmed, the email is trimmed and lower‑cased, the age is stored as an
integer, ``interests`` always becomes a list and ``bio`` a (possibly
empty) trimmed string.  The password is validated but never stored.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from registration_app.app.core.errors import (
    MalformedRequestError,
    SubmissionNotFoundError,
    SubmissionValidationError,
)
from registration_app.app.core.store import Submission, SubmissionStore
from registration_app.app.schemas.stats import Stats
from registration_app.app.schemas.submission import SubmissionCreate, SubmissionPatch
from registration_app.app.services.query_service import QueryResult, SubmissionFilters, query
from registration_app.app.services.statistics_service import StatisticsService
from registration_app.app.services.validation_service import (
    parse_age,
    validate_registration_form,
    validate_submission,
)


logger = logging.getLogger(__name__)


def _strip(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _as_id(value: Any) -> Optional[int]:
    # JSON 2.0 is the same number as 2; "2" and true are not ids.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def normalize_submission(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Turn validated raw values into the stored representation."""
    interests = data.get("interests")
    if isinstance(interests, list):
        interests = list(interests)
    elif interests:
        interests = [interests]
    else:
        interests = []
    return {
        "first_name": _strip(data.get("first_name")),
        "last_name": _strip(data.get("last_name")),
        "email": _strip(data.get("email")).lower(),
        "phone": _strip(data.get("phone")),
        "age": parse_age(data.get("age")),
        "country": data.get("country"),
        "gender": data.get("gender"),
        "interests": interests,
        "bio": _strip(data.get("bio")),
    }


class SubmissionService:
    """CRUD operations over a ``SubmissionStore``."""

    def __init__(self, store: SubmissionStore) -> None:
        self.store = store

    def create_submission(self, payload: SubmissionCreate) -> Submission:
        """Validate and store a new submission."""
        data = payload.model_dump()
        self._ensure_valid(data, validate_submission)
        submission = self.store.insert(normalize_submission(data))
        logger.info("Created submission %s", submission.id)
        return submission

    def register_from_form(self, data: Mapping[str, Any]) -> Submission:
        """Validate the HTML registration form and store the submission.

        ``data`` uses snake_case keys and includes ``confirm_password``
        and ``terms`` in addition to the submission fields.
        """
        self._ensure_valid(data, validate_registration_form)
        submission = self.store.insert(normalize_submission(data))
        logger.info("Created submission %s from the registration form", submission.id)
        return submission

    def list_submissions(
        self,
        filters: SubmissionFilters | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> QueryResult:
        """Return one page of submissions matching ``filters``."""
        return query(self.store.list(), filters, page=page, limit=limit)

    def get_submission(self, submission_id: int) -> Submission:
        submission = self.store.find_by_id(submission_id)
        if submission is None:
            raise SubmissionNotFoundError(submission_id)
        return submission

    def replace_submission(self, submission_id: int, payload: SubmissionCreate) -> Submission:
        """Overwrite every field of an existing submission.

        The id is checked before the payload, so an unknown id yields a
        not‑found error even for an invalid body.
        """
        if self.store.find_by_id(submission_id) is None:
            raise SubmissionNotFoundError(submission_id)
        data = payload.model_dump()
        self._ensure_valid(data, validate_submission)
        submission = self.store.replace(submission_id, normalize_submission(data))
        if submission is None:
            raise SubmissionNotFoundError(submission_id)
        logger.info("Replaced submission %s", submission_id)
        return submission

    def patch_submission(self, submission_id: int, payload: SubmissionPatch) -> Submission:
        """Apply the fields present in ``payload`` as they are."""
        changes = {
            name: value
            for name, value in payload.model_dump(exclude_unset=True).items()
            if value is not None
        }
        submission = self.store.patch(submission_id, changes)
        if submission is None:
            raise SubmissionNotFoundError(submission_id)
        logger.info("Patched submission %s (%s)", submission_id, ", ".join(sorted(changes)) or "no fields")
        return submission

    def delete_submission(self, submission_id: int) -> Submission:
        submission = self.store.remove(submission_id)
        if submission is None:
            raise SubmissionNotFoundError(submission_id)
        logger.info("Deleted submission %s", submission_id)
        return submission

    def bulk_delete(self, ids: Any) -> int:
        """Delete every listed id that exists and return how many were removed.

        ``ids`` must be a non‑empty list.  Entries that are not integer
        ids (strings, booleans, fractions) or match no record are
        skipped.
        """
        if not isinstance(ids, list) or not ids:
            raise MalformedRequestError("Invalid or empty IDs array")
        deleted = 0
        for value in ids:
            submission_id = _as_id(value)
            if submission_id is not None and self.store.remove(submission_id) is not None:
                deleted += 1
        logger.info("Bulk deleted %s of %s requested submissions", deleted, len(ids))
        return deleted

    def statistics(self) -> Stats:
        return StatisticsService.aggregate(self.store.list())

    @staticmethod
    def _ensure_valid(data: Mapping[str, Any], validator) -> None:
        errors = validator(data)
        if errors:
            logger.warning("Rejected submission: %s", "; ".join(errors))
            raise SubmissionValidationError(errors)
