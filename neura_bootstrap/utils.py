"""Shared utility functions for the bootstrap run.

Provides the Rich console used for every status line, a few coloured message
helpers, a summary table and small file-system helpers.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Status glyphs
# ---------------------------------------------------------------------------

GLYPHS: dict[str, str] = {
    "start": "🚀",
    "service": "⚙️ ",
    "sync": "🔁",
    "dashboard": "📊",
    "done": "✅",
    "error": "❌",
}


def print_status(kind: str, message: str) -> None:
    """Print a single status line prefixed with the glyph for *kind*."""
    glyph = GLYPHS.get(kind, "•")
    console.print(f"{glyph} {escape(message)}", highlight=False)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, object], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{GLYPHS['done']} {escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{GLYPHS['error']} {escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The directory as a ``Path``.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path
