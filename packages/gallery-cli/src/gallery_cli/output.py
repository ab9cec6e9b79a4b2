"""Rich console output utilities for gallery-cli.

Colored status lines, JSON/HTML rendering of compile output, and a summary
table for validated galleries. Respects the NO_COLOR environment variable
and the global --no-color flag.
"""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from gallery_core import ImageEntry

# Rich already honours NO_COLOR; the flag is tracked so --no-color can force it
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console with the requested color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR.

    Returns:
        Configured Console instance.
    """
    disabled = no_color or _force_no_color
    return Console(force_terminal=False if disabled else None, no_color=disabled)


console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("Gallery valid (2 images)")
        ✓ Gallery valid (2 images)
    """
    console.print(f"[green]✓[/green] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X."""
    console.print(f"[red]✗[/red] {message}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print a warning message with yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {message}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print an informational message."""
    console.print(message, **kwargs)


def print_json(data: Any, **kwargs: Any) -> None:
    """Print JSON-serialisable data with syntax highlighting.

    Example:
        >>> print_json({"columnCount": 2, "items": []})
        {
          "columnCount": 2,
          "items": []
        }
    """
    console.print_json(json.dumps(data), **kwargs)


def print_html(markup: str) -> None:
    """Print an HTML fragment with syntax highlighting."""
    console.print(Syntax(markup, "html", word_wrap=True))


def print_gallery_table(entries: Sequence[ImageEntry]) -> None:
    """Print a summary table of validated gallery entries.

    Absent captions are shown dimmed as "(none)"; empty captions as "".

    Args:
        entries: Validated image entries in gallery order.
    """
    table = Table(title="Gallery")
    table.add_column("#", justify="right")
    table.add_column("Source")
    table.add_column("Size", justify="right")
    table.add_column("Caption")

    for index, entry in enumerate(entries):
        if entry.caption is None:
            caption = "[dim](none)[/dim]"
        else:
            caption = f'"{escape(entry.caption)}"'
        table.add_row(str(index), escape(entry.src), f"{entry.width}×{entry.height}", caption)

    console.print(table)


def set_no_color(no_color: bool) -> None:
    """Replace the module console to enable/disable colors.

    Args:
        no_color: If True, disable colored output.
    """
    global console
    console = create_console(no_color=no_color)
