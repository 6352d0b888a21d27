"""Clean command for trashing screenshots with in-session undo.

This module provides the `snapsweep clean` command. It moves the listed
screenshots to the system trash and then offers to undo any number of
those deletions before the process exits, since the undo ledger lives
only as long as the process.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from snapsweep.cli.commands.listing import (
    DescendingOption,
    DirectoryOption,
    LimitOption,
    SortOption,
    collect_screenshots,
)
from snapsweep.screenshots.models import SortBy
from snapsweep.trash.errors import DisposalFailedError, TrashError
from snapsweep.trash.service import TrashService
from snapsweep.utils.formatting import (
    console,
    create_screenshot_table,
    create_undo_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="clean",
    help="Move screenshots to the trash, with undo.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean(
    ctx: typer.Context,
    directory: DirectoryOption = None,
    sort: SortOption = SortBy.MODIFIED_AT,
    descending: DescendingOption = False,
    limit: LimitOption = None,
    trash_dir: Annotated[
        Path | None,
        typer.Option(
            "--trash-dir",
            help="Trash directory to search (default: $SNAPSWEEP_TRASH_DIR or system trash).",
            file_okay=False,
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation prompt.",
        ),
    ] = False,
    undo_prompt: Annotated[
        bool,
        typer.Option(
            "--undo/--no-undo",
            help="Offer to undo deletions afterwards.",
        ),
    ] = True,
) -> None:
    """Move screenshots to the trash and optionally undo.

    Examples:
        snapsweep clean                 # Trash all screenshots, confirm first
        snapsweep clean -l 5 --desc     # Trash the 5 most recent screenshots
        snapsweep clean -y --no-undo    # Non-interactive
    """
    if ctx.invoked_subcommand is not None:
        return

    items = collect_screenshots(directory, sort, descending, limit)
    if not items:
        print_success("No screenshots found. Nothing to clean.")
        return

    console.print(create_screenshot_table(items, title="Screenshots to Trash"))

    if not yes:
        confirmed = typer.confirm(
            f"\nMove {len(items)} screenshot(s) to the trash?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    service = TrashService(trash_dir=trash_dir)
    failed = False

    try:
        trashed = service.dispose_batch([item.path for item in items])
    except DisposalFailedError as e:
        print_error(escape(str(e)))
        failed = True
    else:
        console.print(create_undo_table(trashed, title="Moved to Trash", style="trashed"))
        print_success(f"Moved {len(trashed)} screenshot(s) to the trash.")

    if failed and service.pending:
        print_warning(f"{service.pending} screenshot(s) were trashed before the failure.")

    if undo_prompt:
        _undo_loop(service)

    if failed:
        raise typer.Exit(code=1)


def _undo_loop(service: TrashService) -> None:
    """Prompt for undo counts until the user finishes or nothing is left.

    Args:
        service: Trash service holding this session's undo ledger.
    """
    while service.pending:
        count = typer.prompt(
            f"Undo how many deletions? (0-{service.pending}, 0 to finish)",
            default=0,
            type=int,
        )
        if count <= 0:
            return

        try:
            restored = service.undo(count)
        except TrashError as e:
            print_error(escape(str(e)))
            raise typer.Exit(code=1) from e

        console.print(create_undo_table(restored, title="Restored", style="restored"))
        print_success(f"Restored {len(restored)} screenshot(s).")
