"""Root CLI group for dcstd with global flags and command registration."""

from __future__ import annotations

import click

from domaincrafters_std import __version__
from domaincrafters_std.commands import register_commands
from domaincrafters_std.commands._context import AppContext
from domaincrafters_std.config.settings import StdSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dcstd")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare values only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error details.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """dcstd — domaincrafters-std utilities."""
    settings = StdSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
