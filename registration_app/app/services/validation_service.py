"""
Field validation for registration data.

All functions here are pure: they take a mapping of snake_case field
names to raw values and return a list of human‑readable error
messages, one per failed rule, in a fixed order.  An empty list means
the data is valid.  Every rule is evaluated; nothing short‑circuits.

The same rules are enforced by the browser form; the server is the
authority.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Mapping, Optional

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_RE = re.compile(r"\+?[0-9\s\-()]{10,}")
PASSWORD_RE = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{8,}")
# Leading integer, the way browsers parse a number typed into a text box.
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")

MIN_AGE = 18
MAX_AGE = 120
MIN_NAME_LENGTH = 2

PASSWORD_RULES = {
    "length": "At least 8 characters",
    "uppercase": "One uppercase letter",
    "lowercase": "One lowercase letter",
    "number": "One number",
    "special": "One special character",
}


def parse_age(value: Any) -> Optional[int]:
    """Return ``value`` as an integer age, or ``None`` if it has none.

    Strings are read up to the first non‑digit (``"25 years"`` is 25),
    floats are truncated.  Booleans and anything else yield ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def is_valid_email(value: Any) -> bool:
    return EMAIL_RE.fullmatch(_text(value)) is not None


def is_valid_phone(value: Any) -> bool:
    return PHONE_RE.fullmatch(_text(value)) is not None


def is_valid_password(value: Any) -> bool:
    return PASSWORD_RE.fullmatch(_text(value)) is not None


def password_rule_checks(password: Any) -> Dict[str, bool]:
    """Evaluate each password rule separately.

    Keys match ``PASSWORD_RULES``.  Used to show which requirements a
    rejected password missed.
    """
    text = _text(password)
    return {
        "length": len(text) >= 8,
        "uppercase": re.search(r"[A-Z]", text) is not None,
        "lowercase": re.search(r"[a-z]", text) is not None,
        "number": re.search(r"[0-9]", text) is not None,
        "special": re.search(r"[@$!%*?&]", text) is not None,
    }


def _field_errors(data: Mapping[str, Any], form: bool) -> List[str]:
    errors: List[str] = []

    if len(_text(data.get("first_name")).strip()) < MIN_NAME_LENGTH:
        errors.append("First name must be at least 2 characters")

    if len(_text(data.get("last_name")).strip()) < MIN_NAME_LENGTH:
        errors.append("Last name must be at least 2 characters")

    if not is_valid_email(data.get("email")):
        errors.append("Invalid email address")

    if not is_valid_phone(data.get("phone")):
        errors.append("Invalid phone number")

    password = data.get("password")
    if (form or password) and not is_valid_password(password):
        errors.append("Password does not meet security requirements")

    if form and password != data.get("confirm_password"):
        errors.append("Passwords do not match")

    age = parse_age(data.get("age"))
    if age is None or age < MIN_AGE or age > MAX_AGE:
        errors.append("Age must be between 18 and 120")

    if not data.get("country"):
        errors.append("Country is required")

    if not data.get("gender"):
        errors.append("Gender is required")

    if form and not data.get("terms"):
        errors.append("You must agree to the terms and conditions")

    return errors


def validate_submission(data: Mapping[str, Any]) -> List[str]:
    """Validate an API payload.

    The password is optional here and only checked when non‑empty.
    """
    return _field_errors(data, form=False)


def validate_registration_form(data: Mapping[str, Any]) -> List[str]:
    """Validate the HTML registration form.

    Same rules as ``validate_submission`` but the password is
    mandatory, must match ``confirm_password``, and ``terms`` must be
    ticked.
    """
    return _field_errors(data, form=True)
