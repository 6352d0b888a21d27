"""Screenshot listing models.

This module defines the data structures for screenshot files discovered
in the screenshot directory and the options controlling their order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SortBy(str, Enum):
    """Sort key for screenshot listings.

    Attributes:
        NAME: File name.
        CREATED_AT: Creation time (where the platform reports one).
        MODIFIED_AT: Last modification time.
        SIZE: File size in bytes.
    """

    NAME = "name"
    CREATED_AT = "createdAt"
    MODIFIED_AT = "modifiedAt"
    SIZE = "size"


class ListOptions(BaseModel):
    """Ordering options for a screenshot listing.

    Accepts both snake_case and camelCase field names.

    Attributes:
        sort_by: Key to sort by.
        descending: Reverse the order after sorting.
    """

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    sort_by: Annotated[SortBy, Field(description="Key to sort by")] = SortBy.MODIFIED_AT
    descending: Annotated[bool, Field(description="Sort in descending order")] = False


@dataclass(frozen=True, slots=True)
class ScreenshotItem:
    """A screenshot file found in the screenshot directory.

    Attributes:
        path: Absolute path to the file.
        file_name: Base name of the file.
        created_at: Creation time in ISO 8601 format (None if unavailable).
        modified_at: Last modification time in ISO 8601 format (None if unavailable).
        size_bytes: File size in bytes (None if unavailable).
    """

    path: str
    file_name: str
    created_at: str | None = None
    modified_at: str | None = None
    size_bytes: int | None = None

    @property
    def size_human(self) -> str:
        """Human-readable size string (e.g. '1.2 MB')."""
        if self.size_bytes is None:
            return "-"
        size = float(self.size_bytes)
        for unit in ("B", "KB", "MB", "GB"):
            if abs(size) < 1024:
                return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
            size /= 1024
        return f"{size:.1f} TB"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary representation using camelCase keys.
        """
        return {
            "path": self.path,
            "fileName": self.file_name,
            "createdAt": self.created_at,
            "modifiedAt": self.modified_at,
            "sizeBytes": self.size_bytes,
        }
