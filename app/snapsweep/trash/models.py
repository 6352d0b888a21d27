"""Undo entry model for trashed files.

This module defines the record kept for every file moved to the trash,
holding enough information to attempt restoring it later.
"""

import time
from dataclasses import dataclass
from typing import Any


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class UndoEntry:
    """Record of a single file moved to the trash.

    Attributes:
        original_path: Absolute path the file occupied before disposal.
        trashed_path: Best-effort path of the file inside the trash. May be
            stale or a guess that does not exist.
        file_name: Base name of the file at disposal time.
        deleted_at_ms: Millisecond timestamp captured right before the file
            was moved to the trash.
    """

    original_path: str
    trashed_path: str
    file_name: str
    deleted_at_ms: int

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.original_path:
            msg = "Original path cannot be empty"
            raise ValueError(msg)
        if not self.file_name:
            msg = "File name cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary representation of the undo entry.
        """
        return {
            "original_path": self.original_path,
            "trashed_path": self.trashed_path,
            "file_name": self.file_name,
            "deleted_at_ms": self.deleted_at_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UndoEntry":
        """Deserialize from dictionary.

        Args:
            data: Dictionary containing entry data.

        Returns:
            UndoEntry instance.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If field values are invalid.
        """
        return cls(
            original_path=data["original_path"],
            trashed_path=data["trashed_path"],
            file_name=data["file_name"],
            deleted_at_ms=int(data["deleted_at_ms"]),
        )
