"""Rich Console factory and theme for gqlts output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GQLTS_THEME = Theme(
    {
        "gqlts.ok": "bold green",
        "gqlts.error": "bold red",
        "gqlts.warning": "bold yellow",
        "gqlts.op": "bold cyan",
        "gqlts.key": "dim",
        "gqlts.graphql": "magenta",
        "gqlts.ts": "bold blue",
        "gqlts.path": "dim",
    }
)


def create_console() -> Console:
    """Create a 120-column Console that renders to a StringIO buffer."""
    return Console(file=StringIO(), theme=GQLTS_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
