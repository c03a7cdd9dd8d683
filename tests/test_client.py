"""Tests for the requests-based API client, run against the app in-process."""

import pytest
import requests

from registration_app.client import RegistrationAPI


@pytest.fixture
def api(client):
    return RegistrationAPI(base_url="http://testserver", session=client)


def test_create_and_get(api, valid_payload):
    created, error = api.create_submission(valid_payload)
    assert error is None
    assert created["id"] == 1

    fetched, error = api.get_submission(created["id"])
    assert error is None
    assert fetched == created


def test_validation_error_is_returned_as_error(api, make_payload):
    data, error = api.create_submission(make_payload(age=17))
    assert data is None
    assert error["status_code"] == 400
    assert error["message"] == "Validation failed"
    assert error["errors"] == ["Age must be between 18 and 120"]


def test_not_found(api):
    data, error = api.get_submission(404)
    assert data is None
    assert error == {"status_code": 404, "message": "Submission not found", "errors": []}


def test_list_with_filters_and_iteration(api, make_payload):
    for i in range(5):
        api.create_submission(make_payload(country="UK" if i % 2 else "USA"))

    listing, error = api.list_submissions(page=1, limit=2, country="usa", search="", min_age=None)
    assert error is None
    assert listing["count"] == 3
    assert listing["totalPages"] == 2
    assert [s["id"] for s in listing["data"]] == [1, 3]

    assert [s["id"] for s in api.iter_submissions(limit=2, country="usa")] == [1, 3, 5]
    assert len(list(api.iter_submissions())) == 5


def test_list_rejects_unknown_filter(api):
    with pytest.raises(TypeError):
        api.list_submissions(city="Paris")


def test_update_patch_delete(api, make_payload):
    created, _ = api.create_submission(make_payload())

    updated, error = api.update_submission(created["id"], make_payload(firstName="Mary"))
    assert error is None
    assert updated["firstName"] == "Mary"

    patched, error = api.patch_submission(created["id"], {"country": "Canada", "bio": ""})
    assert error is None
    assert patched["country"] == "Canada"
    assert patched["bio"] == updated["bio"]

    deleted, error = api.delete_submission(created["id"])
    assert error is None
    assert deleted["id"] == created["id"]

    _, error = api.delete_submission(created["id"])
    assert error["status_code"] == 404


def test_bulk_delete_and_stats(api, make_payload):
    for country in ("USA", "USA", "UK"):
        api.create_submission(make_payload(country=country))

    stats, error = api.get_stats()
    assert error is None
    assert stats["byCountry"] == {"USA": 2, "UK": 1}

    deleted, error = api.bulk_delete([1, 2, 42])
    assert (deleted, error) == (2, None)

    deleted, error = api.bulk_delete([])
    assert deleted == 0
    assert error["message"] == "Invalid or empty IDs array"


class _BrokenSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_transport_errors_are_reported():
    api = RegistrationAPI(base_url="http://localhost:1", session=_BrokenSession())
    data, error = api.get_stats()
    assert data is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
