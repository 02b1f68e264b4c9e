"""structlog wiring for result logging.

Every event, whether it comes from structlog or a plain stdlib logger,
leaves through one stderr handler, either as console text or as one JSON
object per line (``--log-json``). Events carry a ``severity`` field in the
result-logging vocabulary (verbose, information, warning, error,
critical) next to structlog's own ``level``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

PACKAGE_LOGGER = "opresult"

_SEVERITY_NAMES: dict[int, str] = {
    logging.DEBUG: "verbose",
    logging.INFO: "information",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


def add_severity(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Name the event's level the way ``ResultLogger`` callers do."""
    level = event_dict.get("level")
    if isinstance(level, str):
        number = logging.getLevelName(level.upper())
        if isinstance(number, int):
            event_dict.setdefault("severity", _SEVERITY_NAMES.get(number, level))
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_severity,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to stderr.

    Safe to call repeatedly; the root logger keeps exactly one handler.

    Args:
        verbose: Let ``opresult.*`` loggers emit DEBUG; otherwise WARNING+.
        log_json: Render JSON lines instead of console text.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
