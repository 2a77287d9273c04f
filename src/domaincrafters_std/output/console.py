"""Rich Console factory and theme for dcstd output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. Rich drops color codes outside a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STD_THEME = Theme(
    {
        "std.ok": "bold green",
        "std.error": "bold red",
        "std.warning": "bold yellow",
        "std.op": "bold cyan",
        "std.key": "dim",
        "std.uuid": "bold blue",
        "std.valid": "green",
        "std.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=STD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
