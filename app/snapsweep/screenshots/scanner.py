"""Screenshot scanner.

Lists the screenshot files in a single directory (non-recursive) and
orders them by name, creation time, modification time or size.
"""

import logging
from datetime import UTC, datetime
from pathlib import Path

from snapsweep.core.paths import get_screenshot_dir
from snapsweep.screenshots.models import ListOptions, ScreenshotItem, SortBy

logger = logging.getLogger(__name__)

# Lowercase name prefixes used by common screenshot tools
_SCREENSHOT_PREFIXES: tuple[str, ...] = (
    "screen shot ",
    "screenshot",
    "screen‑shot ",  # non-breaking hyphen used by some macOS locales
)

IMAGE_EXTENSIONS: tuple[str, ...] = (
    ".png",
    ".jpg",
    ".jpeg",
    ".heic",
    ".tiff",
    ".gif",
    ".bmp",
)


def is_screenshot_name(file_name: str) -> bool:
    """Check whether a file name looks like a screenshot image.

    Args:
        file_name: Base name of the file.

    Returns:
        True if the name carries a screenshot marker and an image extension.
    """
    lower = file_name.lower()
    looks_like = lower.startswith(_SCREENSHOT_PREFIXES) or "screenshot" in lower
    if not looks_like:
        return False
    return lower.endswith(IMAGE_EXTENSIONS)


def _format_timestamp(timestamp: float | None) -> str | None:
    """Convert a POSIX timestamp to ISO 8601 (UTC)."""
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, UTC).isoformat()


class ScreenshotScanner:
    """Finds screenshot files in a directory.

    Args:
        directory: Directory to scan. Defaults to the configured
            screenshot directory (see snapsweep.core.paths). Relative
            paths are resolved against the working directory.
    """

    def __init__(self, directory: Path | None = None) -> None:
        if directory is None:
            directory = get_screenshot_dir()
        self._directory = directory.expanduser().resolve()

    @property
    def directory(self) -> Path:
        """Directory being scanned."""
        return self._directory

    def scan(self, options: ListOptions | None = None) -> list[ScreenshotItem]:
        """List screenshot files, optionally sorted.

        Without options the items come back in directory order.

        Args:
            options: Optional ordering options.

        Returns:
            List of ScreenshotItem. Empty if the directory does not exist.
        """
        if not self._directory.is_dir():
            logger.debug("Screenshot directory does not exist: %s", self._directory)
            return []

        items: list[ScreenshotItem] = []
        try:
            entries = list(self._directory.iterdir())
        except PermissionError:
            logger.warning("Permission denied scanning directory: %s", self._directory)
            return []

        for entry in entries:
            if not entry.is_file():
                continue
            if not is_screenshot_name(entry.name):
                continue
            items.append(self._build_item(entry))

        if options is not None:
            self._sort(items, options)

        return items

    def _build_item(self, entry: Path) -> ScreenshotItem:
        """Collect metadata for a single screenshot file.

        Args:
            entry: Path to the file.

        Returns:
            ScreenshotItem with whatever metadata is available.
        """
        try:
            stat = entry.stat()
        except OSError:
            logger.warning("Cannot stat file: %s", entry)
            return ScreenshotItem(path=str(entry), file_name=entry.name)

        return ScreenshotItem(
            path=str(entry),
            file_name=entry.name,
            created_at=_format_timestamp(getattr(stat, "st_birthtime", None)),
            modified_at=_format_timestamp(stat.st_mtime),
            size_bytes=stat.st_size,
        )

    @staticmethod
    def _sort(items: list[ScreenshotItem], options: ListOptions) -> None:
        """Sort items in place; missing values sort first."""
        if options.sort_by == SortBy.NAME:
            items.sort(key=lambda i: i.file_name)
        elif options.sort_by == SortBy.CREATED_AT:
            items.sort(key=lambda i: (i.created_at is not None, i.created_at or ""))
        elif options.sort_by == SortBy.MODIFIED_AT:
            items.sort(key=lambda i: (i.modified_at is not None, i.modified_at or ""))
        else:  # SIZE
            items.sort(key=lambda i: (i.size_bytes is not None, i.size_bytes or 0))

        if options.descending:
            items.reverse()
