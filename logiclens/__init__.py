"""
ⒸAngelaMos | 2026
__init__.py
"""
from logiclens.analysis import (
    CancellationToken,
    ProjectAnalysis,
    aggregate,
    analyze,
    analyze_units,
    count,
    sanitize,
    score,
)
from logiclens.export import ReportOptions, ReportOptionsError, render, render_project
from logiclens.models import CounterSet, Theme, UnitAnalysis

__version__ = "0.1.0"
__all__ = [
    "CancellationToken",
    "CounterSet",
    "ProjectAnalysis",
    "ReportOptions",
    "ReportOptionsError",
    "Theme",
    "UnitAnalysis",
    "__version__",
    "aggregate",
    "analyze",
    "analyze_units",
    "count",
    "render",
    "render_project",
    "sanitize",
    "score",
]
