"""Rich Console factory and theme for merryctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MERRY_THEME = Theme(
    {
        "merry.ok": "bold green",
        "merry.error": "bold red",
        "merry.warning": "bold yellow",
        "merry.op": "bold cyan",
        "merry.key": "dim",
        "merry.group": "bold",
        "merry.container": "bold blue",
        "merry.status.running": "green",
        "merry.status.stopped": "dim red",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "running": "merry.status.running",
    "stopped": "merry.status.stopped",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=MERRY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a container status."""
    return _STATUS_STYLES.get(status, "")
