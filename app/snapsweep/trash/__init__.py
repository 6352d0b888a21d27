"""Trash and undo module.

This module provides disposal of files to the system trash, fuzzy
lookup of trashed files, an in-process undo ledger, and restoration of
trashed files to their original location.
"""

from snapsweep.trash.disposal import DisposalEngine
from snapsweep.trash.errors import (
    DisposalFailedError,
    RestoreFailedError,
    RestorePermissionError,
    TrashError,
)
from snapsweep.trash.ledger import UndoLedger
from snapsweep.trash.matcher import best_trash_candidate, looks_like_same_file
from snapsweep.trash.models import UndoEntry
from snapsweep.trash.restoration import RestorationEngine
from snapsweep.trash.service import TrashService

__all__ = [
    "DisposalEngine",
    "DisposalFailedError",
    "RestorationEngine",
    "RestoreFailedError",
    "RestorePermissionError",
    "TrashError",
    "TrashService",
    "UndoEntry",
    "UndoLedger",
    "best_trash_candidate",
    "looks_like_same_file",
]
