"""Text and JSON rendering of ServiceResult.

Three modes:
- JSON (--json): the full result model, indented
- Quiet (-q): bare values only, one per line, for piping
- Human (default): Rich-styled summary
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.markup import escape

from domaincrafters_std.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from domaincrafters_std.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering flags derived from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _quiet_lines(data: dict[str, Any]) -> list[str]:
    if "uuids" in data:
        return list(data["uuids"])
    if "uuid" in data:
        return [data["uuid"]]
    if "results" in data:
        return [entry["value"] for entry in data["results"]]
    return [str(value) for value in data.values()]


def _render_results(console: Console, results: list[dict[str, Any]]) -> None:
    for entry in results:
        if entry["valid"]:
            style, label = "std.valid", "valid"
        else:
            style, label = "std.invalid", "invalid"
        console.print(f"  [{style}]{label:>7}[/{style}]  {escape(str(entry['value']))}")


def _render_data(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if key == "results" and isinstance(value, list):
            _render_results(console, value)
        elif key == "uuids":
            for item in value:
                console.print(f"  [std.uuid]{item}[/std.uuid]")
        elif key == "uuid":
            console.print(f"  [std.uuid]{value}[/std.uuid]")
        else:
            console.print(f"  [std.key]{key}:[/std.key] {escape(str(value))}")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet and result.ok:
        return "\n".join(_quiet_lines(result.data))

    console = create_console(no_color=no_color)
    if result.ok:
        console.print(f"[std.ok]OK[/std.ok] [std.op]{result.op}[/std.op]")
        _render_data(console, result.data)
    else:
        message = result.error.message if result.error else "Unknown error"
        code = result.error.code if result.error else "ERROR"
        console.print(
            f"[std.error]ERROR[/std.error] [std.op]{result.op}[/std.op] "
            f"{escape(f'[{code}]')} {escape(message)}"
        )
        if result.error and settings.verbose:
            _render_data(console, result.error.detail)
        elif result.error and "results" in result.error.detail:
            _render_results(console, result.error.detail["results"])
    return get_output(console).rstrip("\n")
