"""
ⒸAngelaMos | 2026
export/__init__.py
"""
from logiclens.export.visx import (
    ReportOptions,
    ReportOptionsError,
    escape_xml,
    render,
    render_project,
)


__all__ = [
    "ReportOptions",
    "ReportOptionsError",
    "escape_xml",
    "render",
    "render_project",
]
