"""Restoration engine: moves trashed files back where they came from.

Undo pops entries from the shared ledger, most recent first, and renames
each trashed file back to its original path. An occupied original path
is never overwritten; the file is restored next to it under a
"(restored)" name instead.
"""

import logging
from pathlib import Path

from snapsweep.trash.errors import RestoreFailedError, RestorePermissionError
from snapsweep.trash.ledger import UndoLedger
from snapsweep.trash.matcher import best_trash_candidate
from snapsweep.trash.models import UndoEntry

logger = logging.getLogger(__name__)

RESTORED_SUFFIX = " (restored)"

# freedesktop.org trash keeps one record per file in a sibling "info" directory
TRASH_INFO_SUFFIX = ".trashinfo"


def remove_trash_info(trashed_path: Path) -> None:
    """Delete the .trashinfo record left for a file taken out of a freedesktop trash.

    Files in "<trash>/files/<name>" are described by
    "<trash>/info/<name>.trashinfo". Other trash layouts have no such
    record and are left alone.

    Args:
        trashed_path: Location the file had inside the trash.
    """
    if trashed_path.parent.name != "files":
        return

    info = trashed_path.parent.parent / "info" / f"{trashed_path.name}{TRASH_INFO_SUFFIX}"
    try:
        info.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove trash record %s: %s", info, e)
        return

    logger.debug("Removed trash record %s", info)


def restore_target(original_path: Path) -> Path:
    """Pick a free destination for restoring a file.

    Returns the original path when it is free. Otherwise the file goes
    next to it as "<stem> (restored)<ext>", falling back to
    "<stem> (restored 2)<ext>", "<stem> (restored 3)<ext>", ... when
    that name is taken as well.

    Args:
        original_path: Path the file occupied before it was trashed.

    Returns:
        Path that does not currently exist.
    """
    if not original_path.exists():
        return original_path

    parent = original_path.parent
    stem = original_path.stem or "restored"
    suffix = original_path.suffix

    candidate = parent / f"{stem}{RESTORED_SUFFIX}{suffix}"
    counter = 2
    while candidate.exists():
        candidate = parent / f"{stem} (restored {counter}){suffix}"
        counter += 1
    return candidate


class RestorationEngine:
    """Undoes recent disposals by restoring files from the trash.

    Attributes:
        _ledger: Shared undo ledger the entries are popped from.
        _trash_dir: Trash directory searched when a recorded path is stale.
    """

    def __init__(self, ledger: UndoLedger, trash_dir: Path) -> None:
        """Initialize the RestorationEngine.

        Args:
            ledger: Undo ledger shared with the disposal engine.
            trash_dir: Trash directory searched for trashed files.
        """
        self._ledger = ledger
        self._trash_dir = trash_dir

    def undo(self, count: int = 1) -> list[UndoEntry]:
        """Restore the most recently trashed files.

        Every popped entry is consumed, whether or not its file could be
        located. An entry whose file is found neither at the recorded
        trash path nor by fuzzy matching is still returned.

        Args:
            count: Number of disposals to undo. Capped at the ledger size.

        Returns:
            Processed entries, most recently trashed first.

        Raises:
            ValueError: If count is not positive.
            RestorePermissionError: If a rename is denied by permissions.
            RestoreFailedError: If a rename fails for another reason.
        """
        if count < 1:
            msg = f"Undo count must be positive, got {count}"
            raise ValueError(msg)

        processed: list[UndoEntry] = []
        n = min(count, len(self._ledger))

        for _ in range(n):
            entry = self._ledger.pop()
            if entry is None:
                # Drained by a concurrent caller
                break

            self._restore_single(entry)
            processed.append(entry)

        return processed

    def _restore_single(self, entry: UndoEntry) -> None:
        """Move one trashed file back to its original location.

        Args:
            entry: Entry popped from the ledger.

        Raises:
            RestorePermissionError: If the rename is denied by permissions.
            RestoreFailedError: If the rename fails for another reason.
        """
        target = restore_target(Path(entry.original_path))
        source = Path(entry.trashed_path)

        if not source.exists():
            candidate = best_trash_candidate(self._trash_dir, entry.file_name, entry.deleted_at_ms)
            if candidate is None or not candidate.exists():
                logger.warning(
                    "Could not locate %s in trash, nothing restored for %s",
                    entry.file_name,
                    entry.original_path,
                )
                return
            source = candidate

        try:
            source.rename(target)
        except PermissionError as e:
            raise RestorePermissionError(str(target), e) from e
        except OSError as e:
            raise RestoreFailedError(str(target), e) from e

        remove_trash_info(source)
        logger.info("Restored %s -> %s", source, target)
