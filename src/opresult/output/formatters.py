"""Rich/JSON output helpers.

The CLI renders envelopes for humans (colored status line, errors,
metadata, data) or machines (--json). ``public=True`` renders the
:class:`PublicResult` projection instead of the internal envelope.
"""

from __future__ import annotations

import json as _json
from typing import Any

from rich.markup import escape

from opresult.output.console import create_console, get_output, outcome_label
from opresult.results.public import PublicDataResult, PublicResult
from opresult.results.result import DataResult, Result, require_result


def _compact(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _format_public(projection: PublicResult, *, json_output: bool, no_color: bool) -> str:
    if json_output:
        return projection.to_json(indent=2)
    console = create_console(no_color=no_color)
    label, style = outcome_label(projection.succeeded)
    line = f"[{style}]{label}[/{style}]"
    if projection.message:
        line += f" {escape(projection.message)}"
    console.print(line)
    for error in projection.errors or []:
        console.print(f"  - {escape(error)}")
    payload = projection.to_dict().get("data")
    if payload is not None:
        console.print(f"  [opr.key]data:[/opr.key] {escape(_compact(payload))}", soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_result(
    result: Result,
    *,
    json_output: bool = False,
    public: bool = False,
    include_exception: bool = False,
    no_color: bool = False,
) -> str:
    """Format an envelope for display.

    Args:
        result: The envelope to format.
        json_output: Return JSON instead of human-readable text.
        public: Render the public projection (no status, metadata or exception).
        include_exception: Keep the exception in JSON output.
        no_color: Disable ANSI escape codes.
    """
    require_result(result)
    if public:
        projection = (
            PublicDataResult.from_result(result)
            if isinstance(result, DataResult)
            else PublicResult.from_result(result)
        )
        return _format_public(projection, json_output=json_output, no_color=no_color)
    if json_output:
        return result.to_json(include_exception=include_exception, indent=2)

    console = create_console(no_color=no_color)
    label, style = outcome_label(result.succeeded, result.status_code)
    status = result.status_code.name if result.status_code is not None else "UNSET"
    line = f"[{style}]{label}[/{style}] [opr.status]{status}[/opr.status]"
    if result.message:
        line += f" {escape(result.message)}"
    console.print(line)
    for error in result.errors:
        console.print(f"  - {escape(str(error))}")
    if result.exception is not None and include_exception:
        console.print(f"  [opr.key]exception:[/opr.key] {escape(repr(result.exception))}")
    dumped = result.to_dict(include_exception=False)
    for key, value in (dumped.get("metadata") or {}).items():
        console.print(f"  [opr.key]{escape(key)}:[/opr.key] {escape(_compact(value))}", soft_wrap=True)
    if dumped.get("data") is not None:
        console.print(f"  [opr.key]data:[/opr.key] {escape(_compact(dumped['data']))}", soft_wrap=True)
    return get_output(console).rstrip("\n")
