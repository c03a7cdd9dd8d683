"""
Submission storage.

``SubmissionStore`` is the interface the services depend on.
``InMemorySubmissionStore`` keeps records in a Python list in insertion
order, with an integer id counter that starts at 1 and is never
rewound, so ids of deleted records are not reused.  Everything lives
in process memory and is lost on restart.

The store owns its records: every method returns a copy, so callers
cannot mutate stored state behind the store's back.  There is no
locking; the application handles one request at a time on a single
event loop and none of these methods await.
"""

from __future__ import annotations

import abc
import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from fastapi import Request


MUTABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "age",
    "country",
    "gender",
    "interests",
    "bio",
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Submission:
    """A single registration record."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    # Normally an int in [18, 120]; PATCH stores whatever the caller sent.
    age: Any
    country: str
    gender: str
    interests: List[str] = field(default_factory=list)
    bio: str = ""
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


class SubmissionStore(abc.ABC):
    """Interface for submission persistence."""

    @abc.abstractmethod
    def insert(self, data: Mapping[str, Any]) -> Submission:
        """Store a new record and return it with its assigned id."""

    @abc.abstractmethod
    def find_by_id(self, submission_id: int) -> Optional[Submission]:
        """Return the record with ``submission_id`` or ``None``."""

    @abc.abstractmethod
    def replace(self, submission_id: int, data: Mapping[str, Any]) -> Optional[Submission]:
        """Overwrite every mutable field; ``None`` if the id is unknown."""

    @abc.abstractmethod
    def patch(self, submission_id: int, changes: Mapping[str, Any]) -> Optional[Submission]:
        """Overwrite only the given fields; ``None`` if the id is unknown."""

    @abc.abstractmethod
    def remove(self, submission_id: int) -> Optional[Submission]:
        """Delete the record and return it; ``None`` if the id is unknown."""

    @abc.abstractmethod
    def list(self) -> List[Submission]:
        """Return all records in insertion order."""


class InMemorySubmissionStore(SubmissionStore):
    """List backed store with a monotonic id counter."""

    def __init__(self) -> None:
        self._records: List[Submission] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def insert(self, data: Mapping[str, Any]) -> Submission:
        now = utcnow()
        values = {name: data[name] for name in MUTABLE_FIELDS if name in data}
        record = Submission(id=self._next_id, created_at=now, updated_at=now, **values)
        self._next_id += 1
        self._records.append(record)
        return copy.deepcopy(record)

    def find_by_id(self, submission_id: int) -> Optional[Submission]:
        index = self._index_of(submission_id)
        if index is None:
            return None
        return copy.deepcopy(self._records[index])

    def replace(self, submission_id: int, data: Mapping[str, Any]) -> Optional[Submission]:
        index = self._index_of(submission_id)
        if index is None:
            return None
        current = self._records[index]
        values = {name: data[name] for name in MUTABLE_FIELDS}
        record = Submission(
            id=current.id,
            created_at=current.created_at,
            updated_at=utcnow(),
            **values,
        )
        self._records[index] = record
        return copy.deepcopy(record)

    def patch(self, submission_id: int, changes: Mapping[str, Any]) -> Optional[Submission]:
        index = self._index_of(submission_id)
        if index is None:
            return None
        record = self._records[index]
        for name in MUTABLE_FIELDS:
            if name in changes:
                setattr(record, name, copy.deepcopy(changes[name]))
        record.updated_at = utcnow()
        return copy.deepcopy(record)

    def remove(self, submission_id: int) -> Optional[Submission]:
        index = self._index_of(submission_id)
        if index is None:
            return None
        return copy.deepcopy(self._records.pop(index))

    def list(self) -> List[Submission]:
        return copy.deepcopy(self._records)

    def _index_of(self, submission_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == submission_id:
                return index
        return None


def get_store(request: Request) -> SubmissionStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
