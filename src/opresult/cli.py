"""Root CLI group for opresult with global flags and command registration."""

from __future__ import annotations

import click

from opresult import __version__
from opresult.commands import register_commands
from opresult.commands._context import AppContext
from opresult.config.settings import OpresultSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="opresult")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """opresult — inspect and exercise operation-result envelopes."""
    flags = {"json_output": json_output, "verbose": verbose, "log_json": log_json}
    settings = OpresultSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
