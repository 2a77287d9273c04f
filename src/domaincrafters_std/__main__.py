"""Allow ``python -m domaincrafters_std``."""

from domaincrafters_std.cli import cli

cli()
