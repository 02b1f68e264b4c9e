"""Result logging — structured log events for failed envelopes.

The logger reads ``message``, ``errors``, ``exception``, ``metadata``,
``status_code`` and ``succeeded`` and never writes to the envelope. The
exception is stripped from the serialized details unless
``include_exception`` is set, so exception text does not leave the
process by default.

Console echo failures are swallowed: logging never breaks the caller.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, TypeVar

import structlog
from rich.markup import escape

from opresult.output.console import severity_style
from opresult.results.result import Result, require_result

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Result)


class Severity(StrEnum):
    VERBOSE = "verbose"
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self]


_LOG_LEVELS: dict[Severity, int] = {
    Severity.VERBOSE: logging.DEBUG,
    Severity.INFORMATION: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.CRITICAL: logging.CRITICAL,
}


class ResultLogger:
    """Log messages and failed envelopes under an *area* label.

    Args:
        area: Label prefixed to every message (usually the calling component).
        include_exception: Keep the exception in serialized details.
        console: When given, each message is also echoed there in the
            severity's color.
    """

    def __init__(
        self,
        area: str = "opresult",
        *,
        include_exception: bool = False,
        console: Console | None = None,
    ) -> None:
        self.area = area
        self.include_exception = include_exception
        self._console = console

    def log(
        self,
        message: str,
        level: Severity = Severity.ERROR,
        exception: BaseException | None = None,
    ) -> None:
        log = structlog.get_logger("opresult.results")
        if exception is not None:
            log.log(
                level.log_level,
                message,
                area=self.area,
                exception_type=type(exception).__name__,
                exception=str(exception),
            )
        else:
            log.log(level.log_level, message, area=self.area)
        self._echo(message, level, exception)

    def log_result(
        self,
        result: Result,
        area: str | None = None,
        level: Severity = Severity.ERROR,
    ) -> None:
        """Log *result* if it failed; successful envelopes are ignored."""
        require_result(result)
        if result.succeeded:
            return
        summary = result.get_message_or_error().strip().replace("\n", " ")
        details = result.to_json(include_exception=self.include_exception)
        self.log(
            f"[{area or self.area}] {summary} | Details: {details}",
            level,
            result.exception if self.include_exception else None,
        )

    def _echo(self, message: str, level: Severity, exception: BaseException | None) -> None:
        if self._console is None:
            return
        style = severity_style(level.value)
        try:
            self._console.print(
                f"[{style}]\\[{level.name}][/{style}] {escape(message)}", soft_wrap=True
            )
            if exception is not None:
                self._console.print(f"Exception: {escape(str(exception))}", soft_wrap=True)
        except Exception:
            logger.debug("Console echo failed", exc_info=True)


def with_log(
    result: R,
    result_logger: ResultLogger,
    area: str | None = None,
    level: Severity = Severity.ERROR,
) -> R:
    """Log *result* through *result_logger* and hand it back unchanged."""
    require_result(result)
    result_logger.log_result(result, area, level)
    return result
