"""
Pydantic models for submission payloads and responses.

Field names are snake_case in Python and camelCase on the wire
(``firstName``, ``createdAt``...).  Request models are deliberately
permissive about *values*: business rules (name length, email format,
age range...) are checked by ``services.validation_service`` so that
every failing rule can be reported at once instead of stopping at the
first type error.  Request models only pin down the *shape* of the
body.
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases for every field."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


AgeValue = Union[int, float, str]


class SubmissionCreate(CamelModel):
    """Body of ``POST /api/submissions`` and ``PUT /api/submissions/{id}``.

    Every field is optional at the schema level; missing values are
    reported by the validator with the same messages as invalid ones.
    """

    first_name: Optional[str] = Field(None, examples=["John"])
    last_name: Optional[str] = Field(None, examples=["Smith"])
    email: Optional[str] = Field(None, examples=["john.smith@example.com"])
    phone: Optional[str] = Field(None, examples=["+1 (555) 123-4567"])
    # Accepted but never stored.
    password: Optional[str] = Field(None, examples=["Secret@123"])
    age: Optional[AgeValue] = Field(None, examples=[30])
    country: Optional[str] = Field(None, examples=["USA"])
    gender: Optional[str] = Field(None, examples=["male"])
    # A single string is treated as a one element list.
    interests: Optional[Union[List[str], str]] = Field(None, examples=[["music", "sports"]])
    bio: Optional[str] = Field(None, examples=["Hello there"])


class SubmissionPatch(CamelModel):
    """Body of ``PATCH /api/submissions/{id}``.

    Only the fields present in the body are applied, verbatim and
    without business‑rule validation.  ``null`` values are ignored.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    age: Optional[AgeValue] = None
    country: Optional[str] = None
    gender: Optional[str] = None
    interests: Optional[List[str]] = None
    bio: Optional[str] = None


class SubmissionRead(CamelModel):
    """A stored submission as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    # An int unless a PATCH stored something else.
    age: AgeValue
    country: str
    gender: str
    interests: List[str]
    bio: str
    created_at: datetime
    updated_at: datetime


class SubmissionEnvelope(CamelModel):
    success: bool = True
    message: Optional[str] = None
    data: SubmissionRead


class SubmissionListEnvelope(CamelModel):
    """Envelope of ``GET /api/submissions``."""

    success: bool = True
    count: int = Field(..., description="Number of records matching the filters")
    page: int
    limit: int
    total_pages: int
    data: List[SubmissionRead]


class BulkDeleteRequest(CamelModel):
    """Body of ``POST /api/submissions/bulk-delete``."""

    # Checked by the service: anything but a non-empty list is rejected
    # and entries that are not integer ids are skipped.
    ids: Any = Field(None, examples=[[1, 2, 3]])


class BulkDeleteEnvelope(CamelModel):
    success: bool = True
    message: str
    deleted_count: int


class ErrorEnvelope(CamelModel):
    """Envelope of every 4xx response."""

    success: bool = False
    message: str
    errors: Optional[List[str]] = None
