"""Trash service wiring both engines to one ledger."""

from pathlib import Path

from send2trash import send2trash

from snapsweep.core.paths import get_trash_dir
from snapsweep.trash.disposal import DisposalEngine, TrashPrimitive
from snapsweep.trash.ledger import UndoLedger
from snapsweep.trash.models import UndoEntry
from snapsweep.trash.restoration import RestorationEngine


class TrashService:
    """Entry point for trashing files and undoing it within one process.

    Creates a single UndoLedger and shares it between a DisposalEngine
    and a RestorationEngine that look at the same trash directory.

    Attributes:
        trash_dir: Trash directory used for lookups.
    """

    def __init__(
        self,
        trash_dir: Path | None = None,
        move_to_trash: TrashPrimitive = send2trash,
    ) -> None:
        """Initialize the TrashService.

        Args:
            trash_dir: Optional override for the trash directory.
                      Default: see snapsweep.core.paths.get_trash_dir
            move_to_trash: Trash primitive used for disposal.
        """
        self.trash_dir = trash_dir if trash_dir is not None else get_trash_dir()
        self._ledger = UndoLedger()
        self._disposal = DisposalEngine(self._ledger, self.trash_dir, move_to_trash)
        self._restoration = RestorationEngine(self._ledger, self.trash_dir)

    @property
    def pending(self) -> int:
        """Number of disposals that can still be undone."""
        return len(self._ledger)

    def dispose_batch(self, paths: list[str]) -> list[UndoEntry]:
        """Move files to the trash. See DisposalEngine.dispose_batch."""
        return self._disposal.dispose_batch(paths)

    def undo(self, count: int = 1) -> list[UndoEntry]:
        """Restore recently trashed files. See RestorationEngine.undo."""
        return self._restoration.undo(count)
