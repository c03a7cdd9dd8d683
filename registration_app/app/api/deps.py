"""
API dependencies.

Handlers never reach for the store directly; they receive a
``SubmissionService`` bound to the store attached to the running
application, which lets tests and alternative deployments inject their
own store through ``create_app``.
"""

from fastapi import Depends

from registration_app.app.core.store import SubmissionStore, get_store
from registration_app.app.services.submission_service import SubmissionService


def get_submission_service(store: SubmissionStore = Depends(get_store)) -> SubmissionService:
    return SubmissionService(store)
