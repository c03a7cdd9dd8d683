"""Tests for the in-memory submission store."""

import pytest

from registration_app.app.core.store import InMemorySubmissionStore


def _data(**overrides):
    data = {
        "first_name": "John",
        "last_name": "Smith",
        "email": "john@example.com",
        "phone": "5551234567",
        "age": 30,
        "country": "USA",
        "gender": "male",
        "interests": ["music"],
        "bio": "",
    }
    data.update(overrides)
    return data


@pytest.fixture
def store():
    return InMemorySubmissionStore()


def test_insert_assigns_increasing_ids_and_timestamps(store):
    first = store.insert(_data())
    second = store.insert(_data(first_name="Mary"))
    assert (first.id, second.id) == (1, 2)
    assert first.created_at == first.updated_at
    assert [r.id for r in store.list()] == [1, 2]


def test_ids_are_never_reused(store):
    store.insert(_data())
    store.insert(_data())
    store.remove(2)
    assert store.insert(_data()).id == 3


def test_find_by_id(store):
    created = store.insert(_data())
    assert store.find_by_id(created.id) == created
    assert store.find_by_id(99) is None


def test_returned_records_are_copies(store):
    created = store.insert(_data())
    created.interests.append("hacked")
    created.first_name = "Changed"
    stored = store.find_by_id(created.id)
    assert stored.first_name == "John"
    assert stored.interests == ["music"]


def test_replace_keeps_id_and_created_at(store):
    created = store.insert(_data())
    replaced = store.replace(created.id, _data(first_name="Mary", age=40, interests=[]))
    assert replaced.id == created.id
    assert replaced.created_at == created.created_at
    assert replaced.updated_at >= created.created_at
    assert (replaced.first_name, replaced.age, replaced.interests) == ("Mary", 40, [])
    assert store.replace(99, _data()) is None


def test_patch_merges_only_given_fields(store):
    created = store.insert(_data())
    patched = store.patch(created.id, {"age": "abc", "unknown": "ignored"})
    assert patched.age == "abc"
    assert patched.first_name == "John"
    assert not hasattr(patched, "unknown")
    assert patched.updated_at >= patched.created_at
    assert store.patch(99, {"age": 20}) is None


def test_remove_returns_deleted_record(store):
    created = store.insert(_data())
    assert store.remove(created.id) == created
    assert store.remove(created.id) is None
    assert store.list() == []
