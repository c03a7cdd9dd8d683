"""
Domain errors and their conversion to JSON envelopes.

Services raise subclasses of ``RegistrationError``; the handlers
registered by ``register_exception_handlers`` turn them into the
``{"success": false, ...}`` envelope with the matching status code.
Request validation failures detected by FastAPI itself (bad JSON,
wrong types, non‑integer path parameters) are converted the same way
so that every API response keeps the envelope shape.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class RegistrationError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None) -> None:
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_envelope(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        return body


class SubmissionValidationError(RegistrationError):
    """One or more field rules failed; ``errors`` lists every failure."""

    default_message = "Validation failed"

    def __init__(self, errors: List[str]) -> None:
        super().__init__(errors=list(errors))


class SubmissionNotFoundError(RegistrationError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Submission not found"

    def __init__(self, submission_id: Optional[int] = None) -> None:
        self.submission_id = submission_id
        super().__init__()


class MalformedRequestError(RegistrationError):
    default_message = "Malformed request"


def _format_request_error(error: Dict[str, Any]) -> str:
    # ``loc`` looks like ("body", "age") or ("path", "submission_id").
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def registration_error_handler(request: Request, exc: RegistrationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [_format_request_error(error) for error in exc.errors()]
    logger.warning("Rejected malformed request to %s: %s", request.url.path, errors)
    envelope = MalformedRequestError(errors=errors).to_envelope()
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=envelope)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope‑producing handlers to ``app``."""
    app.add_exception_handler(RegistrationError, registration_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
