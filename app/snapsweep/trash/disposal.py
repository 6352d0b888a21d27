"""Disposal engine: moves files to the system trash.

Each file is handed to the trash primitive (send2trash by default), then
its resulting location inside the trash is looked up by fuzzy matching
so that the move can be undone later.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from send2trash import send2trash

from snapsweep.trash.errors import DisposalFailedError
from snapsweep.trash.ledger import UndoLedger
from snapsweep.trash.matcher import best_trash_candidate
from snapsweep.trash.models import UndoEntry, now_ms

logger = logging.getLogger(__name__)

TrashPrimitive = Callable[[str], None]


def _base_name(path: str) -> str | None:
    """Final path component, or None if the path has none."""
    name = Path(path).name
    if not name or name in (".", ".."):
        return None
    return name


class DisposalEngine:
    """Moves batches of files to the trash and records undo entries.

    Attributes:
        _ledger: Shared undo ledger receiving one entry per trashed file.
        _trash_dir: Directory the trash primitive moves files into.
        _move_to_trash: Callable that moves a single path to the trash.
    """

    def __init__(
        self,
        ledger: UndoLedger,
        trash_dir: Path,
        move_to_trash: TrashPrimitive = send2trash,
    ) -> None:
        """Initialize the DisposalEngine.

        Args:
            ledger: Undo ledger shared with the restoration engine.
            trash_dir: Trash directory searched for trashed files.
            move_to_trash: Trash primitive; raises OSError on failure.
        """
        self._ledger = ledger
        self._trash_dir = trash_dir
        self._move_to_trash = move_to_trash

    def dispose_batch(self, paths: list[str]) -> list[UndoEntry]:
        """Move files to the trash, in order, recording undo entries.

        Paths without a final component are skipped. The first failing
        path aborts the batch; entries recorded for earlier paths stay
        in the ledger.

        Args:
            paths: Absolute paths of the files to trash.

        Returns:
            Undo entries for the files that were trashed.

        Raises:
            DisposalFailedError: If the trash primitive fails for a path.
        """
        results: list[UndoEntry] = []

        for path in paths:
            file_name = _base_name(path)
            if file_name is None:
                logger.debug("Skipping path without a file name: %r", path)
                continue

            deleted_at_ms = now_ms()
            try:
                self._move_to_trash(path)
            except OSError as e:
                raise DisposalFailedError(path, e) from e

            candidate = best_trash_candidate(self._trash_dir, file_name, deleted_at_ms)
            if candidate is None:
                logger.debug("No trash entry found for %s, guessing location", file_name)
                candidate = self._trash_dir / file_name

            entry = UndoEntry(
                original_path=path,
                trashed_path=str(candidate),
                file_name=file_name,
                deleted_at_ms=deleted_at_ms,
            )
            self._ledger.push(entry)
            results.append(entry)
            logger.info("Trashed %s -> %s", path, entry.trashed_path)

        return results
