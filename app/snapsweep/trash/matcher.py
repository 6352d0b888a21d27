"""Fuzzy lookup of trashed files.

When a file is moved to the trash, the trash may rename it to avoid a
collision with an entry that is already there (e.g. "shot.png" becomes
"shot 2.png" or "shot copy.png"). The functions here locate the entry
most likely to correspond to a given original name, ranking candidates
by how close their modification time is to the deletion time.

Lookups are best effort: a missing or unreadable trash directory, or a
directory with no matching entries, yields None rather than an error.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def split_name(name: str) -> tuple[str, str | None]:
    """Split a file name into stem and extension.

    Only the last suffix counts as the extension, and names such as
    ".hidden" have no extension.

    Args:
        name: File name (not a full path).

    Returns:
        Tuple of (stem, extension without the dot, or None).
    """
    path = Path(name)
    stem = path.stem or name
    extension = path.suffix[1:] if path.suffix else None
    return stem, extension


def looks_like_same_file(entry_name: str, original_name: str) -> bool:
    """Check whether a trash entry could be a renamed copy of a file.

    Extensions must match exactly (case-sensitive). Stems match when they
    are equal, or when the entry stem extends the original stem with a
    space-separated suffix such as " 2" or " copy".

    Args:
        entry_name: Name of the entry found in the trash.
        original_name: Name the file had before it was trashed.

    Returns:
        True if the entry plausibly is the original file.
    """
    entry_stem, entry_ext = split_name(entry_name)
    original_stem, original_ext = split_name(original_name)

    if entry_ext != original_ext:
        return False

    return (
        entry_stem == original_stem
        or entry_stem.startswith(original_stem + " ")
        or entry_stem.startswith(original_stem + " copy")
    )


def best_trash_candidate(
    trash_dir: Path,
    original_name: str,
    deleted_at_ms: int | None = None,
) -> Path | None:
    """Find the trash entry most likely to be the given file.

    With an anchor timestamp, the matching entry whose modification time
    is closest to the anchor wins. Without one, the most recently
    modified matching entry wins. Ties go to the entry seen first in
    directory order.

    Args:
        trash_dir: Trash directory to search.
        original_name: Base name of the file before it was trashed.
        deleted_at_ms: Optional deletion time in milliseconds since epoch.

    Returns:
        Path to the best candidate, or None if nothing matches.
    """
    if not trash_dir.is_dir():
        return None

    closest: tuple[Path, int] | None = None
    newest: tuple[Path, int] | None = None

    try:
        with os.scandir(trash_dir) as entries:
            for entry in entries:
                if not looks_like_same_file(entry.name, original_name):
                    continue

                try:
                    mtime_ms = entry.stat().st_mtime_ns // 1_000_000
                except OSError:
                    logger.debug("Cannot stat trash entry: %s", entry.path)
                    continue

                candidate = Path(entry.path)

                if deleted_at_ms is not None:
                    diff = abs(mtime_ms - deleted_at_ms)
                    if closest is None or diff < closest[1]:
                        closest = (candidate, diff)

                if newest is None or mtime_ms > newest[1]:
                    newest = (candidate, mtime_ms)
    except OSError as e:
        logger.debug("Cannot read trash directory %s: %s", trash_dir, e)
        return None

    if closest is not None:
        return closest[0]
    if newest is not None:
        return newest[0]
    return None
