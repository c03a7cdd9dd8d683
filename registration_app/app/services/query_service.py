"""
Filtering and pagination over submissions.

Filtering and paging are done in Python over the list returned by the
store.  Filters are combined with logical AND; a filter left as
``None`` (or an empty string) is not applied.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from registration_app.app.core.store import Submission
from registration_app.app.services.validation_service import parse_age


@dataclass
class SubmissionFilters:
    """Optional criteria for ``query``.

    - ``country`` / ``gender``: case‑insensitive exact match.
    - ``min_age`` / ``max_age``: inclusive bounds.  Records whose age
      is not an integer never satisfy a bound.
    - ``search``: case‑insensitive substring of first name, last name
      or email.
    """

    country: Optional[str] = None
    gender: Optional[str] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    search: Optional[str] = None

    def matches(self, record: Submission) -> bool:
        if self.country and str(record.country).lower() != self.country.lower():
            return False
        if self.gender and str(record.gender).lower() != self.gender.lower():
            return False
        if self.min_age is not None or self.max_age is not None:
            age = parse_age(record.age)
            if age is None:
                return False
            if self.min_age is not None and age < self.min_age:
                return False
            if self.max_age is not None and age > self.max_age:
                return False
        if self.search:
            needle = self.search.lower()
            haystacks = (record.first_name, record.last_name, record.email)
            if not any(needle in str(value).lower() for value in haystacks):
                return False
        return True


@dataclass
class QueryResult:
    items: List[Submission]
    count: int
    total_pages: int


def query(
    records: Iterable[Submission],
    filters: Optional[SubmissionFilters] = None,
    page: int = 1,
    limit: int = 10,
) -> QueryResult:
    """Filter ``records`` and return one page of the result.

    ``page`` is 1‑indexed.  The page covers positions
    ``[(page - 1) * limit, page * limit)`` of the filtered list, and
    ``total_pages`` is ``ceil(count / limit)``.  A page past the end is
    simply empty.
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive integers")
    filters = filters or SubmissionFilters()
    matching = [record for record in records if filters.matches(record)]
    start = (page - 1) * limit
    return QueryResult(
        items=matching[start : start + limit],
        count=len(matching),
        total_pages=math.ceil(len(matching) / limit),
    )
