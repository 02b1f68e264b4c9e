"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and centralizes envelope emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from opresult.config.logging import configure_logging
from opresult.output.formatters import format_result
from opresult.output.result_log import ResultLogger, Severity

if TYPE_CHECKING:
    from opresult.config.settings import OpresultSettings
    from opresult.results.result import Result


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: OpresultSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        self.result_logger = ResultLogger(
            "cli", include_exception=settings.logging.include_exception
        )

    @property
    def log_level(self) -> Severity:
        return Severity(self.settings.logging.level)

    def emit(self, result: Result, *, public: bool = False) -> None:
        """Format and output an envelope with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: logs the envelope, writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            public=public,
            include_exception=self.settings.logging.include_exception,
        )
        if result.succeeded:
            click.echo(output)
            return
        self.result_logger.log_result(result, level=self.log_level)
        click.echo(output, err=True)
        raise SystemExit(1)
