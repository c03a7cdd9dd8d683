"""Registration API client.

This module defines a small client wrapper around the registration REST
API.  The client uses the ``requests`` library internally and exposes
one method per endpoint:

* :meth:`create_submission` – register a new user.
* :meth:`list_submissions` – fetch one filtered page of submissions.
* :meth:`iter_submissions` – walk every page of a filtered listing.
* :meth:`get_submission` – fetch a single submission by id.
* :meth:`update_submission` – replace a submission (full validation).
* :meth:`patch_submission` – change selected fields of a submission.
* :meth:`delete_submission` – delete a submission.
* :meth:`bulk_delete` – delete several submissions at once.
* :meth:`get_stats` – fetch the aggregated statistics.

Every method returns a ``(data, error)`` tuple.  On success ``error`` is
``None``.  On failure ``data`` is ``None`` (or empty) and ``error`` is a
dictionary with ``status_code``, ``message`` and ``errors`` taken from
the response envelope, or from the transport exception when the server
could not be reached.

Any object with a ``requests.Session`` compatible ``request`` method can
be passed as ``session``; the test suite passes FastAPI's
``TestClient``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

# Python keyword -> query parameter name used by the API.
FILTER_PARAMS = {
    "country": "country",
    "gender": "gender",
    "min_age": "minAge",
    "max_age": "maxAge",
    "search": "search",
}


class RegistrationAPI:
    """Client for interacting with the registration API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[Any] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.  The
                ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to ``/api`` (e.g. ``/submissions``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(envelope, error)``.
        """
        url = f"{self.base_url}/api{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "errors": []}

        try:
            body = response.json() if response.content else {}
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {"data": body}

        if response.status_code >= 400 or body.get("success") is False:
            message = body.get("message") or body.get("detail") or response.text or f"HTTP {response.status_code}"
            error = {
                "status_code": response.status_code,
                "message": message,
                "errors": list(body.get("errors") or []),
            }
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, error
        return body, None

    def _data(self, method: str, path: str, **kwargs: Any) -> Tuple[Optional[Any], Optional[Error]]:
        envelope, error = self._request(method, path, **kwargs)
        if error:
            return None, error
        return envelope.get("data"), None

    # ------------------------------------------------------------------
    # Submission operations
    # ------------------------------------------------------------------
    def create_submission(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a submission.

        Args:
            payload: Registration fields using the API's camelCase names.
        Returns:
            A tuple ``(submission, error)``.  Validation failures carry
            the list of failed rules in ``error["errors"]``.
        """
        return self._data("POST", "/submissions", json_body=payload)

    def list_submissions(
        self, page: int = 1, limit: int = 10, **filters: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve one page of submissions.

        Args:
            page: 1‑indexed page number.
            limit: Page size.
            **filters: Any of ``country``, ``gender``, ``min_age``,
                ``max_age`` and ``search``.  Empty values are ignored.
        Returns:
            A tuple ``(listing, error)`` where ``listing`` is the full
            envelope (``count``, ``page``, ``limit``, ``totalPages``,
            ``data``).
        """
        params: Dict[str, Any] = {"page": page, "limit": limit}
        for key, value in filters.items():
            if key not in FILTER_PARAMS:
                raise TypeError(f"Unknown filter: {key}")
            if value not in (None, ""):
                params[FILTER_PARAMS[key]] = value
        return self._request("GET", "/submissions", params=params)

    def iter_submissions(self, limit: int = 50, **filters: Any) -> Iterator[Dict[str, Any]]:
        """Yield every submission matching ``filters``, page by page.

        Stops at the first failed request after logging it.
        """
        page = 1
        while True:
            listing, error = self.list_submissions(page=page, limit=limit, **filters)
            if error or listing is None:
                return
            yield from listing.get("data", [])
            if page >= listing.get("totalPages", 0):
                return
            page += 1

    def get_submission(self, submission_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._data("GET", f"/submissions/{submission_id}")

    def update_submission(
        self, submission_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace all fields of a submission."""
        return self._data("PUT", f"/submissions/{submission_id}", json_body=payload)

    def patch_submission(
        self, submission_id: Any, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Change only the given fields of a submission.

        Empty values are dropped before sending, as the browser form
        does.
        """
        body = {key: value for key, value in changes.items() if value not in (None, "")}
        return self._data("PATCH", f"/submissions/{submission_id}", json_body=body)

    def delete_submission(self, submission_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a submission and return the removed record."""
        return self._data("DELETE", f"/submissions/{submission_id}")

    def bulk_delete(self, ids: List[int]) -> Tuple[int, Optional[Error]]:
        """Delete several submissions.

        Returns:
            A tuple ``(deleted_count, error)``.
        """
        envelope, error = self._request("POST", "/submissions/bulk-delete", json_body={"ids": list(ids)})
        if error:
            return 0, error
        return envelope.get("deletedCount", 0), None

    def get_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve the aggregated statistics."""
        return self._data("GET", "/stats")
