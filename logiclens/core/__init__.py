"""
ⒸAngelaMos | 2026
core/__init__.py
"""
from logiclens.core.config import (
    HistorySettings,
    LogicLensSettings,
    ReportSettings,
    ScanSettings,
    get_settings,
    load_settings,
)
from logiclens.core.logging import configure_logging, get_logger, scan_context
from logiclens.core.state import ExportHistory, ExportRecord


__all__ = [
    "ExportHistory",
    "ExportRecord",
    "HistorySettings",
    "LogicLensSettings",
    "ReportSettings",
    "ScanSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "load_settings",
    "scan_context",
]
