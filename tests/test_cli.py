"""Tests for the root opresult CLI."""

import pytest
from click.testing import CliRunner

from opresult import __version__
from opresult.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "opresult" in result.output
    assert "page" in result.output
    assert "inspect" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-opresult.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_cwd")
def test_missing_config_file_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "missing.toml", "page"])
    assert result.exit_code != 0
    assert "Config file not found" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_env_var_enables_json_output(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("OPRESULT_JSON_OUTPUT", "true")
    result = cli_runner.invoke(cli, ["page", "--total", "3"])
    assert result.exit_code == 0
    assert '"succeeded": true' in result.output
