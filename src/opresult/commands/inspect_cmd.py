"""Command: load a serialized envelope and render it."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from opresult.commands._base import OprCommand

if TYPE_CHECKING:
    from opresult.commands._context import AppContext


@click.command(
    "inspect",
    cls=OprCommand,
    examples="""\
  opresult inspect result.json
  opresult inspect --public result.json
  opresult --json inspect --public result.json""",
)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--public", is_flag=True, help="Render the public projection only.")
@click.pass_obj
def inspect_cmd(app: AppContext, path: Path, public: bool) -> None:
    """Render the envelope stored as JSON in PATH.

    Exits 1 when the envelope describes a failure.
    """
    from pydantic import ValidationError

    from opresult.results.result import DataResult

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"{path} is not valid JSON: {exc.msg}"
        raise click.ClickException(msg) from exc
    try:
        result = DataResult[Any].model_validate(raw)
    except ValidationError as exc:
        msg = f"{path} is not a valid result envelope: {exc.error_count()} error(s)"
        raise click.ClickException(msg) from exc
    app.emit(result, public=public)
