"""
ⒸAngelaMos | 2026
logging.py
"""
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import orjson
import structlog
from rich.console import Console


err_console = Console(stderr = True)


def _resolve_level(debug: bool, quiet: bool) -> int:
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    json_mode: bool | None = None,
    debug: bool = False,
    quiet: bool = False,
) -> None:
    """
    Configure structlog for the command line host
    Logs go to stderr so reports and JSON on stdout stay clean
    JSON mode is picked from the TTY when not given
    """
    if json_mode is None:
        json_mode = not sys.stderr.isatty()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt = "iso",
                                         utc = True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer: structlog.types.Processor
    if json_mode:
        renderer = structlog.processors.JSONRenderer(serializer = _json_serializer)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors = err_console.is_terminal)

    structlog.configure(
        processors = [*shared_processors,
                      renderer],
        wrapper_class = structlog.make_filtering_bound_logger(
            _resolve_level(debug,
                           quiet)
        ),
        context_class = dict,
        logger_factory = structlog.PrintLoggerFactory(file = sys.stderr),
        cache_logger_on_first_use = False,
    )


def _json_serializer(obj: dict, **kwargs) -> str:
    """
    Serialize log entries to JSON using orjson
    """
    return orjson.dumps(obj, default = str).decode("utf-8")


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a bound logger instance
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(component = name)
    return logger


@contextmanager
def scan_context(**values: object) -> Iterator[None]:
    """
    Attach key/values to every log line emitted inside a batch scan
    """
    with structlog.contextvars.bound_contextvars(**values):
        yield
