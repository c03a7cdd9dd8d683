"""Shared fixtures: a fresh application and store for every test."""

import pytest
from fastapi.testclient import TestClient

from registration_app.app.core.store import InMemorySubmissionStore
from registration_app.app.main import create_app


@pytest.fixture
def store():
    return InMemorySubmissionStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def valid_payload():
    """A registration payload that passes every rule."""
    return {
        "firstName": "John",
        "lastName": "Smith",
        "email": "John.Smith@Example.COM",
        "phone": "+1 (555) 123-4567",
        "password": "Secret@123",
        "age": "30",
        "country": "USA",
        "gender": "male",
        "interests": ["music", "sports"],
        "bio": "  Hello there  ",
    }


@pytest.fixture
def make_payload(valid_payload):
    """Build a valid payload with some fields overridden."""

    def _make(**overrides):
        payload = dict(valid_payload)
        payload.update(overrides)
        return payload

    return _make
