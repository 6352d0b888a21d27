"""In-process undo ledger.

Holds the undo entries of the current process as a stack guarded by a
single lock. Nothing is persisted; the ledger lives as long as the
process that created it.
"""

import threading

from snapsweep.trash.models import UndoEntry


class UndoLedger:
    """Thread-safe LIFO stack of undo entries.

    Each operation takes the lock for its own duration only, so callers
    never hold it across filesystem I/O.
    """

    def __init__(self) -> None:
        self._entries: list[UndoEntry] = []
        self._lock = threading.Lock()

    def push(self, entry: UndoEntry) -> None:
        """Append an entry at the tail."""
        with self._lock:
            self._entries.append(entry)

    def pop(self) -> UndoEntry | None:
        """Remove and return the tail entry, or None if empty."""
        with self._lock:
            if not self._entries:
                return None
            return self._entries.pop()

    def snapshot(self) -> list[UndoEntry]:
        """Copy of the entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
