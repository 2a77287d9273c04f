"""Command group: generate, parse and validate UUIDs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domaincrafters_std.services.ids import IdService

if TYPE_CHECKING:
    from domaincrafters_std.commands._context import AppContext


@click.group("uuid")
def uuid_group() -> None:
    """Generate, parse and validate version-4 UUIDs."""


@uuid_group.command("new")
@click.option("-n", "--count", type=int, default=1, show_default=True, help="How many to generate.")
@click.pass_obj
def new(app: AppContext, count: int) -> None:
    """Generate random UUIDs."""
    app.emit(IdService(max_generate=app.settings.max_generate).create(count))


@uuid_group.command("parse")
@click.argument("value")
@click.pass_obj
def parse(app: AppContext, value: str) -> None:
    """Parse VALUE and print its canonical lowercase form."""
    app.emit(IdService().parse(value))


@uuid_group.command("validate")
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, values: tuple[str, ...]) -> None:
    """Check that every VALUE is a valid UUID."""
    app.emit(IdService().validate(list(values)))


@uuid_group.command("empty")
@click.pass_obj
def empty(app: AppContext) -> None:
    """Print the nil UUID."""
    app.emit(IdService().empty())
