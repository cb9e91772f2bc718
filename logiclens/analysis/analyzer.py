"""
ⒸAngelaMos | 2026
analysis/analyzer.py
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from logiclens.analysis.aggregate import ProjectAnalysis, aggregate
from logiclens.analysis.counter import count
from logiclens.analysis.preprocessor import sanitize
from logiclens.analysis.scoring import score
from logiclens.core.logging import get_logger, scan_context
from logiclens.models import CounterSet, UnitAnalysis

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class UnitSource(Protocol):
    """
    Anything that can supply a unit identifier and its raw text
    """
    @property
    def identifier(self) -> str: ...

    def read_text(self) -> str: ...


@dataclass(frozen=True)
class TextUnit:
    """
    In-memory text source, e.g. an open editor buffer
    """
    identifier: str
    text: str

    def read_text(self) -> str:
        return self.text


class CancellationToken:
    """
    Cooperative cancellation flag checked between units
    """
    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass(frozen=True)
class UnitFailure:
    """
    A unit whose text could not be read
    """
    identifier: str
    error: str


@dataclass
class ScanResult:
    """
    Outcome of a batch scan
    project is None only when a cancelled scan discards partial results
    """
    project: ProjectAnalysis | None
    failures: list[UnitFailure] = field(default_factory=list)
    cancelled: bool = False
    attempted: int = 0

    @property
    def analyzed(self) -> int:
        return self.project.unit_count if self.project else 0


def analyze(text: str) -> CounterSet:
    """
    Sanitize, count and score a piece of source text
    """
    return score(count(sanitize(text)))


def analyze_unit(identifier: str, text: str) -> UnitAnalysis:
    return UnitAnalysis(identifier=identifier, counters=analyze(text))


def analyze_units(
    sources: Iterable[UnitSource],
    cancel_token: CancellationToken | None = None,
    on_progress: Callable[[int, int | None, str], None] | None = None,
    discard_partial: bool = False,
    total: int | None = None,
) -> ScanResult:
    """
    Analyze units in order and aggregate them

    Read failures are recorded per unit and skipped.
    Cancellation is checked before each unit; units analyzed so far are
    kept unless discard_partial is set.
    """
    logger = get_logger("analyzer")
    units: list[UnitAnalysis] = []
    failures: list[UnitFailure] = []
    attempted = 0
    cancelled = False

    if total is None and hasattr(sources, "__len__"):
        total = len(sources)

    with scan_context(scan_total = total):
        for source in sources:
            if cancel_token is not None and cancel_token.cancelled:
                cancelled = True
                break

            attempted += 1
            identifier = source.identifier
            try:
                text = source.read_text()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("unit_read_failed", unit = identifier, error = str(e))
                failures.append(UnitFailure(identifier=identifier, error=str(e)))
            else:
                units.append(analyze_unit(identifier, text))
                logger.debug("unit_analyzed", unit = identifier, complexity = units[-1].complexity)

            if on_progress is not None:
                on_progress(attempted, total, identifier)

        if cancelled:
            logger.info(
                "scan_cancelled",
                analyzed = len(units),
                discarded = discard_partial,
            )
            if discard_partial:
                return ScanResult(project=None, failures=failures, cancelled=True, attempted=attempted)

        logger.info("scan_complete", analyzed = len(units), failed = len(failures))

    return ScanResult(
        project=aggregate(units),
        failures=failures,
        cancelled=cancelled,
        attempted=attempted,
    )
