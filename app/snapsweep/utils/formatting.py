"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from snapsweep.core.theme import get_theme

if TYPE_CHECKING:
    from snapsweep.screenshots.models import ScreenshotItem
    from snapsweep.trash.models import UndoEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_screenshot_table(
    items: list[ScreenshotItem],
    title: str = "Screenshots",
) -> Table:
    """Create a table listing screenshot files.

    Args:
        items: Screenshots to display.
        title: Table title.

    Returns:
        Rich Table with one row per screenshot.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("#", style="muted", justify="right", width=4)
    table.add_column("Name", no_wrap=True)
    table.add_column("Modified", style="muted")
    table.add_column("Size", style="info", justify="right")

    for index, item in enumerate(items, start=1):
        table.add_row(
            str(index),
            f"[text]{escape(item.file_name)}[/]",
            item.modified_at or "-",
            item.size_human,
        )
    return table


def create_undo_table(entries: list[UndoEntry], title: str, style: str) -> Table:
    """Create a table of trashed or restored files.

    Args:
        entries: Undo entries to display.
        title: Table title.
        style: Theme style for the file name column ("trashed" or "restored").

    Returns:
        Rich Table with one row per entry.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("File", no_wrap=True)
    table.add_column("Original Path", style="muted")
    table.add_column("Trash Path", style="muted")

    for entry in entries:
        table.add_row(
            f"[{style}]{escape(entry.file_name)}[/{style}]",
            escape(entry.original_path),
            escape(entry.trashed_path),
        )
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
