"""Tests for Rich Console factory and theme."""

import sys
from http import HTTPStatus
from io import StringIO

import pytest
from rich.console import Console

from opresult.output.console import (
    OPRESULT_THEME,
    create_console,
    get_output,
    outcome_label,
    severity_style,
)


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[opr.fail]FAIL[/opr.fail]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "FAIL" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_theme_styles(self) -> None:
        for name in ("opr.ok", "opr.warn", "opr.fail", "opr.error", "opr.critical"):
            assert name in OPRESULT_THEME.styles


class TestOutcomeLabel:
    def test_failure(self) -> None:
        assert outcome_label(False, HTTPStatus.OK) == ("FAIL", "opr.fail")

    def test_warning(self) -> None:
        assert outcome_label(True, HTTPStatus.NO_CONTENT) == ("WARN", "opr.warn")

    def test_success(self) -> None:
        assert outcome_label(True, HTTPStatus.OK) == ("OK", "opr.ok")
        assert outcome_label(True) == ("OK", "opr.ok")


class TestSeverityStyle:
    def test_known(self) -> None:
        assert severity_style("critical") == "opr.critical"

    def test_unknown_falls_back_to_error(self) -> None:
        assert severity_style("loud") == "opr.error"


def test_get_output_rejects_foreign_console() -> None:
    with pytest.raises(TypeError):
        get_output(Console(file=sys.stderr))
