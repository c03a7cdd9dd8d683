"""
Pydantic models for submission statistics.
"""

from typing import Dict

from pydantic import Field

from .submission import CamelModel


class Stats(CamelModel):
    """Aggregated figures over every stored submission."""

    total: int = Field(..., examples=[3])
    by_country: Dict[str, int] = Field(default_factory=dict, examples=[{"USA": 2, "UK": 1}])
    by_gender: Dict[str, int] = Field(default_factory=dict, examples=[{"female": 2, "male": 1}])
    average_age: float = Field(0, examples=[31.7])
    age_distribution: Dict[str, int] = Field(
        default_factory=dict,
        examples=[{"18-25": 1, "26-35": 1, "36-50": 1, "51+": 0}],
    )


class StatsEnvelope(CamelModel):
    success: bool = True
    data: Stats
