"""
ⒸAngelaMos | 2026
analysis/__init__.py
"""
from logiclens.analysis.aggregate import ProjectAnalysis, aggregate, rank, sum_counters
from logiclens.analysis.analyzer import (
    CancellationToken,
    ScanResult,
    TextUnit,
    UnitFailure,
    UnitSource,
    analyze,
    analyze_unit,
    analyze_units,
)
from logiclens.analysis.counter import RULES, ConstructRule, count
from logiclens.analysis.preprocessor import sanitize
from logiclens.analysis.scanner import ScannedFile, SourceScanner
from logiclens.analysis.scoring import (
    ComplexityMetrics,
    complexity_score,
    cyclomatic_complexity,
    evaluate,
    maintainability_index,
    score,
)


__all__ = [
    "RULES",
    "CancellationToken",
    "ComplexityMetrics",
    "ConstructRule",
    "ProjectAnalysis",
    "ScanResult",
    "ScannedFile",
    "SourceScanner",
    "TextUnit",
    "UnitFailure",
    "UnitSource",
    "aggregate",
    "analyze",
    "analyze_unit",
    "analyze_units",
    "complexity_score",
    "count",
    "cyclomatic_complexity",
    "evaluate",
    "maintainability_index",
    "rank",
    "sanitize",
    "score",
    "sum_counters",
]
