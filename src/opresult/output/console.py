"""Rich console and theme for envelope output.

Consoles render into a StringIO buffer so formatters return plain
strings. Colors are dropped automatically when output is not a TTY.
"""

from __future__ import annotations

from http import HTTPStatus
from io import StringIO

from rich.console import Console
from rich.theme import Theme

OPRESULT_THEME = Theme(
    {
        # outcome of an envelope
        "opr.ok": "bold green",
        "opr.warn": "bold yellow",
        "opr.fail": "bold red",
        "opr.status": "bold cyan",
        "opr.key": "dim",
        # ResultLogger severities
        "opr.verbose": "grey50",
        "opr.information": "cyan",
        "opr.warning": "yellow",
        "opr.error": "red",
        "opr.critical": "bold dark_red",
    }
)


def outcome_label(succeeded: bool, status_code: HTTPStatus | None = None) -> tuple[str, str]:
    """Return ``(label, style)`` for an envelope's outcome.

    A successful envelope carrying 204 is a warning.
    """
    if not succeeded:
        return "FAIL", "opr.fail"
    if status_code == HTTPStatus.NO_CONTENT:
        return "WARN", "opr.warn"
    return "OK", "opr.ok"


def severity_style(severity: str) -> str:
    """Theme style for a ResultLogger severity name, e.g. ``"error"``."""
    style = f"opr.{severity}"
    return style if style in OPRESULT_THEME.styles else "opr.error"


def create_console(*, no_color: bool = False, width: int = 120) -> Console:
    """Console writing to a StringIO buffer; read it back with :func:`get_output`."""
    return Console(
        file=StringIO(),
        theme=OPRESULT_THEME,
        no_color=no_color,
        highlight=False,
        width=width,
    )


def get_output(console: Console) -> str:
    if not isinstance(console.file, StringIO):
        raise TypeError("console was not created by create_console()")
    return console.file.getvalue()
