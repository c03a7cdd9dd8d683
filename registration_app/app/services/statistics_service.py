"""
Service layer for statistics.

Statistics are recomputed from the full list of submissions on every
call; nothing is cached or maintained incrementally.
"""

from __future__ import annotations

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional

from registration_app.app.core.store import Submission
from registration_app.app.schemas.stats import Stats
from registration_app.app.services.validation_service import parse_age

AGE_BUCKETS = ("18-25", "26-35", "36-50", "51+")


def _one_decimal(value: float) -> float:
    # Exact halves round away from zero (30.25 -> 30.3), not to even.
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def age_bucket(age: int) -> str:
    """Return the histogram bucket for ``age``.

    ``51+`` is the fallthrough: any age outside the first three ranges
    lands there, including ages below 18.
    """
    if 18 <= age <= 25:
        return "18-25"
    if 26 <= age <= 35:
        return "26-35"
    if 36 <= age <= 50:
        return "36-50"
    return "51+"


class StatisticsService:
    """Aggregated figures over the submissions."""

    @classmethod
    def aggregate(cls, records: Iterable[Submission]) -> Stats:
        """Compute totals, per‑country and per‑gender counts and age figures.

        Records whose age is not an integer (only possible after a
        PATCH) count towards ``total``, ``by_country`` and
        ``by_gender`` but are left out of ``average_age`` and
        ``age_distribution``.
        """
        records = list(records)
        by_country: Counter = Counter(str(record.country) for record in records)
        by_gender: Counter = Counter(str(record.gender) for record in records)
        distribution: Dict[str, int] = {bucket: 0 for bucket in AGE_BUCKETS}

        ages: List[int] = []
        for record in records:
            age: Optional[int] = parse_age(record.age)
            if age is None:
                continue
            ages.append(age)
            distribution[age_bucket(age)] += 1

        average_age = _one_decimal(sum(ages) / len(ages)) if ages else 0

        return Stats(
            total=len(records),
            by_country=dict(by_country),
            by_gender=dict(by_gender),
            average_age=average_age,
            age_distribution=distribution,
        )
