"""
ⒸAngelaMos | 2026
analysis/aggregate.py
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from logiclens.analysis.scoring import ComplexityMetrics, evaluate, round_half_up, score
from logiclens.models import PRIMITIVE_FIELDS, CounterSet, UnitAnalysis

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


DEFAULT_TOP_N = 10


@dataclass(frozen=True)
class ProjectAnalysis:
    """
    Ranked unit results plus one aggregate over every unit
    """
    units: tuple[UnitAnalysis, ...]
    aggregate: CounterSet

    @property
    def unit_count(self) -> int:
        return len(self.units)

    @property
    def average_complexity(self) -> float:
        """
        Mean of the per-unit scores, 0.0 for an empty project
        """
        if not self.units:
            return 0.0
        return sum(u.complexity for u in self.units) / len(self.units)

    @property
    def metrics(self) -> ComplexityMetrics:
        return evaluate(self.aggregate)

    def top(self, n: int = DEFAULT_TOP_N) -> tuple[UnitAnalysis, ...]:
        """
        Most complex units for display, the aggregate is unaffected
        """
        return self.units[:n]

    def to_dict(self, top_n: int | None = None) -> dict:
        units = self.units if top_n is None else self.top(top_n)
        return {
            "unit_count": self.unit_count,
            "average_complexity": round_half_up(self.average_complexity),
            "aggregate": self.aggregate.to_dict(),
            "metrics": self.metrics.to_dict(),
            "units": [u.to_dict() for u in units],
        }


def sum_counters(counter_sets: Iterable[CounterSet]) -> CounterSet:
    """
    Add primitive counters together and rebuild the total
    The result is unscored
    """
    sums = dict.fromkeys(PRIMITIVE_FIELDS, 0)
    for counters in counter_sets:
        for name in PRIMITIVE_FIELDS:
            sums[name] += getattr(counters, name)
    return CounterSet(**sums, total=sum(sums.values()))


def rank(units: Iterable[UnitAnalysis]) -> tuple[UnitAnalysis, ...]:
    """
    Sort by complexity, highest first, keeping scan order on ties
    """
    return tuple(sorted(units, key=lambda u: u.complexity, reverse=True))


def aggregate(units: Sequence[UnitAnalysis]) -> ProjectAnalysis:
    """
    Combine unit results into a project analysis
    The aggregate score comes from the summed counters, never from unit scores
    """
    units = tuple(units)
    return ProjectAnalysis(
        units=rank(units),
        aggregate=score(sum_counters(u.counters for u in units)),
    )
