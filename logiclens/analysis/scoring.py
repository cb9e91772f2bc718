"""
ⒸAngelaMos | 2026
analysis/scoring.py
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from logiclens.models import CounterSet


WEIGHTS: dict[str, float] = {
    "if_": 1.0,
    "else_if": 0.5,
    "else_": 0.3,
    "for_": 2.0,
    "while_": 2.0,
    "do_while": 2.0,
    "switch": 1.5,
    "ternary": 0.5,
}

# && and || share one weight applied to their combined count
LOGICAL_WEIGHT = 0.2

BRANCH_FIELDS = ("if_", "else_if", "switch", "for_", "while_", "do_while")

MAINTAINABILITY_MAX = 100
MAINTAINABILITY_MAX_PENALTY = 50


def round_half_up(value: float, digits: int = 1) -> float:
    """
    Round with halves going up, matching the report format
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def complexity_score(counters: CounterSet) -> float:
    """
    Weighted construct score rounded to one decimal
    """
    raw = sum(getattr(counters, field) * weight for field, weight in WEIGHTS.items())
    raw += (counters.logical_and + counters.logical_or) * LOGICAL_WEIGHT
    return round_half_up(raw)


def score(counters: CounterSet) -> CounterSet:
    """
    Return a copy of the counters with the complexity score filled in
    """
    return counters.model_copy(update={"complexity_score": complexity_score(counters)})


def cyclomatic_complexity(counters: CounterSet) -> int:
    """
    Branch constructs plus one
    """
    return sum(getattr(counters, field) for field in BRANCH_FIELDS) + 1


def maintainability_index(counters: CounterSet) -> float:
    """
    0-100 index that drops with branching and construct volume
    """
    penalty = min(
        cyclomatic_complexity(counters) * 2 + counters.total * 0.5,
        MAINTAINABILITY_MAX_PENALTY,
    )
    return max(0, MAINTAINABILITY_MAX - penalty)


@dataclass(frozen=True)
class ComplexityMetrics:
    """
    Derived metrics for a scored counter set
    """
    total: int
    complexity_score: float
    cyclomatic_complexity: int
    maintainability_index: float

    HIGH_THRESHOLD: ClassVar[float] = 10
    MODERATE_THRESHOLD: ClassVar[float] = 5

    @property
    def complexity_rating(self) -> str:
        """
        Human readable complexity rating
        """
        if self.complexity_score > self.HIGH_THRESHOLD:
            return "high"
        if self.complexity_score > self.MODERATE_THRESHOLD:
            return "moderate"
        return "low"

    @property
    def is_complex(self) -> bool:
        return self.complexity_score > self.HIGH_THRESHOLD

    def to_dict(self) -> dict:
        return {
            "totalConstructs": self.total,
            "complexityScore": self.complexity_score,
            "cyclomaticComplexity": self.cyclomatic_complexity,
            "maintainabilityIndex": self.maintainability_index,
            "rating": self.complexity_rating,
        }


def evaluate(counters: CounterSet) -> ComplexityMetrics:
    """
    Compute every derived metric for a counter set
    The score is recomputed so unscored counters evaluate correctly
    """
    return ComplexityMetrics(
        total=counters.total,
        complexity_score=complexity_score(counters),
        cyclomatic_complexity=cyclomatic_complexity(counters),
        maintainability_index=maintainability_index(counters),
    )
