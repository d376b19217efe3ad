"""Rich Console factory and theme for reachstat output.

Creates Console instances that render to a StringIO buffer, so renderers
return plain strings. In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

REACH_THEME = Theme(
    {
        "reach.ok": "bold green",
        "reach.error": "bold red",
        "reach.warning": "bold yellow",
        "reach.op": "bold cyan",
        "reach.key": "dim",
        "reach.node": "bold blue",
        "reach.path": "dim",
        "reach.metric": "magenta",
        "reach.unreachable": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=REACH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
