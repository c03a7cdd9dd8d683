"""Tests for filtering and pagination."""

import math

import pytest

from registration_app.app.core.store import Submission
from registration_app.app.services.query_service import SubmissionFilters, query


def _record(id, first, last, email, age, country="USA", gender="male"):
    return Submission(
        id=id,
        first_name=first,
        last_name=last,
        email=email,
        phone="5551234567",
        age=age,
        country=country,
        gender=gender,
    )


@pytest.fixture
def records():
    return [
        _record(1, "John", "Smith", "john@example.com", 22, "USA", "male"),
        _record(2, "Mary", "Johnson", "mary@example.com", 35, "uk", "female"),
        _record(3, "Alex", "Brown", "alex@sample.org", 51, "UK", "other"),
        _record(4, "Eve", "Stone", "eve@example.com", 40, "Canada", "Female"),
        _record(5, "Bob", "Black", "bob@sample.org", "abc", "USA", "male"),
    ]


def test_no_filters_returns_first_page(records):
    result = query(records, page=1, limit=2)
    assert [r.id for r in result.items] == [1, 2]
    assert result.count == 5
    assert result.total_pages == 3


def test_country_and_gender_are_case_insensitive(records):
    result = query(records, SubmissionFilters(country="Uk"))
    assert [r.id for r in result.items] == [2, 3]

    result = query(records, SubmissionFilters(gender="FEMALE"))
    assert [r.id for r in result.items] == [2, 4]


def test_age_bounds_are_inclusive_and_skip_non_numeric_ages(records):
    result = query(records, SubmissionFilters(min_age=35, max_age=51))
    assert [r.id for r in result.items] == [2, 3, 4]

    result = query(records, SubmissionFilters(max_age=22))
    assert [r.id for r in result.items] == [1]


def test_search_matches_first_name_last_name_or_email(records):
    result = query(records, SubmissionFilters(search="JOHN"))
    assert [r.id for r in result.items] == [1, 2]

    result = query(records, SubmissionFilters(search="sample.org"))
    assert [r.id for r in result.items] == [3, 5]


def test_filters_are_combined(records):
    filters = SubmissionFilters(country="usa", gender="male", search="o", max_age=30)
    assert [r.id for r in query(records, filters).items] == [1]


def test_empty_filter_values_are_ignored(records):
    filters = SubmissionFilters(country="", gender="", search="")
    assert query(records, filters).count == 5


def test_page_past_the_end_is_empty(records):
    result = query(records, page=10, limit=2)
    assert result.items == []
    assert result.count == 5
    assert result.total_pages == 3


def test_empty_result_has_zero_pages(records):
    result = query(records, SubmissionFilters(country="France"))
    assert result.items == []
    assert result.total_pages == 0


@pytest.mark.parametrize("limit", [1, 2, 3, 4, 7])
def test_pages_reconstruct_the_filtered_set(records, limit):
    filters = SubmissionFilters(search="e")
    expected = [r.id for r in query(records, filters, limit=100).items]
    first = query(records, filters, page=1, limit=limit)
    assert first.total_pages == math.ceil(len(expected) / limit)

    collected = []
    for page in range(1, first.total_pages + 1):
        collected.extend(r.id for r in query(records, filters, page=page, limit=limit).items)
    assert collected == expected


def test_rejects_non_positive_page_or_limit(records):
    with pytest.raises(ValueError):
        query(records, page=0)
    with pytest.raises(ValueError):
        query(records, limit=0)
