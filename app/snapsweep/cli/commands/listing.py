"""List command for showing screenshots.

This module provides the `snapsweep list` command, which prints the
screenshot files found in the screenshot directory.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from snapsweep.screenshots.models import ListOptions, ScreenshotItem, SortBy
from snapsweep.screenshots.scanner import ScreenshotScanner
from snapsweep.utils.formatting import console, create_screenshot_table, print_success

app = typer.Typer(
    name="list",
    help="List screenshots in the screenshot directory.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options for the screenshot listing."""

    TABLE = "table"
    JSON = "json"


# Options shared with the clean command
DirectoryOption = Annotated[
    Path | None,
    typer.Option(
        "--dir",
        "-d",
        help="Directory to scan (default: $SNAPSWEEP_SCREENSHOT_DIR or ~/Desktop).",
        file_okay=False,
    ),
]
SortOption = Annotated[
    SortBy,
    typer.Option("--sort", "-s", help="Sort key.", case_sensitive=False),
]
DescendingOption = Annotated[
    bool,
    typer.Option("--desc", help="Sort in descending order."),
]
LimitOption = Annotated[
    int | None,
    typer.Option("--limit", "-l", min=1, help="Limit number of screenshots."),
]


def collect_screenshots(
    directory: Path | None,
    sort: SortBy,
    descending: bool,
    limit: int | None,
) -> list[ScreenshotItem]:
    """Scan for screenshots and apply ordering and limit.

    Args:
        directory: Optional directory override.
        sort: Sort key.
        descending: Sort in descending order.
        limit: Maximum number of screenshots to return.

    Returns:
        Ordered, limited list of screenshots.
    """
    scanner = ScreenshotScanner(directory)
    items = scanner.scan(ListOptions(sort_by=sort, descending=descending))
    return items[:limit] if limit else items


@app.callback(invoke_without_command=True)
def list_screenshots(
    ctx: typer.Context,
    directory: DirectoryOption = None,
    sort: SortOption = SortBy.MODIFIED_AT,
    descending: DescendingOption = False,
    limit: LimitOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List screenshots in the screenshot directory.

    Examples:
        snapsweep list                      # Oldest first by modification time
        snapsweep list --sort size --desc   # Largest first
        snapsweep list -f json              # Machine-readable output
    """
    if ctx.invoked_subcommand is not None:
        return

    items = collect_screenshots(directory, sort, descending, limit)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([item.to_dict() for item in items]))
        return

    if not items:
        print_success("No screenshots found.")
        return

    console.print(create_screenshot_table(items))

    total_size = sum(item.size_bytes or 0 for item in items)
    console.print(f"\n[dim]{len(items)} screenshot(s), {total_size} bytes total[/dim]")
