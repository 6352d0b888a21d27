"""Platform-aware path resolution for snapsweep.

This module resolves the directories snapsweep works with: the system
trash directory (where trashed files end up) and the directory scanned
for screenshots. Both can be overridden through environment variables.

Defaults:
- Trash (macOS): ~/.Trash
- Trash (Linux/BSD): $XDG_DATA_HOME/Trash/files (~/.local/share/Trash/files)
- Trash (Windows): <SystemDrive>\\$Recycle.Bin
- Screenshots: ~/Desktop
"""

import os
import sys
from pathlib import Path

# Application identifier for environment variable naming
APP_NAME = "snapsweep"

TRASH_DIR_ENV = "SNAPSWEEP_TRASH_DIR"
SCREENSHOT_DIR_ENV = "SNAPSWEEP_SCREENSHOT_DIR"


def _get_env_path(env_var: str) -> Path | None:
    """Get a path from an environment variable.

    Args:
        env_var: Environment variable name.

    Returns:
        Expanded path, or None if the variable is unset or empty.
    """
    value = os.environ.get(env_var)
    if value:
        return Path(value).expanduser()
    return None


def _get_xdg_data_home() -> Path:
    """Get the XDG data directory respecting XDG_DATA_HOME.

    Returns:
        Path to $XDG_DATA_HOME or ~/.local/share.
    """
    base = os.environ.get("XDG_DATA_HOME")
    if base:
        return Path(base)
    return Path.home() / ".local" / "share"


def get_default_trash_dir(platform: str | None = None) -> Path:
    """Get the platform default trash directory.

    On Windows the recycle bin is not a plain directory of trashed files,
    so lookups against the returned path are best effort only.

    Args:
        platform: Platform identifier (defaults to sys.platform).

    Returns:
        Path to the per-user trash directory.
    """
    platform = platform or sys.platform

    if platform == "darwin":
        return Path.home() / ".Trash"

    if platform.startswith("win"):
        drive = os.environ.get("SystemDrive", "C:")
        return Path(f"{drive}\\") / "$Recycle.Bin"

    # freedesktop.org trash layout
    return _get_xdg_data_home() / "Trash" / "files"


def get_trash_dir() -> Path:
    """Get the trash directory path.

    Returns:
        SNAPSWEEP_TRASH_DIR if set, otherwise the platform default.
    """
    return _get_env_path(TRASH_DIR_ENV) or get_default_trash_dir()


def get_screenshot_dir() -> Path:
    """Get the directory scanned for screenshots.

    Returns:
        SNAPSWEEP_SCREENSHOT_DIR if set, otherwise ~/Desktop.
    """
    return _get_env_path(SCREENSHOT_DIR_ENV) or Path.home() / "Desktop"
