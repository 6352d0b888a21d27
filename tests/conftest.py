"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest


def _set_mtime(path: Path, seconds: float) -> None:
    ns = int(seconds * 1_000_000_000)
    os.utime(path, ns=(ns, ns))


@pytest.fixture
def set_mtime() -> Callable[[Path, float], None]:
    """Helper setting both atime and mtime of a path to epoch seconds."""
    return _set_mtime


@pytest.fixture
def trash_dir(tmp_path: Path) -> Path:
    """Empty directory standing in for the system trash."""
    path = tmp_path / "Trash"
    path.mkdir()
    return path


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory holding the files to be trashed."""
    path = tmp_path / "Desktop"
    path.mkdir()
    return path


@pytest.fixture
def fake_trash(trash_dir: Path) -> Callable[[str], None]:
    """Trash primitive that moves files into trash_dir.

    Mimics a desktop trash: a name already present in the trash gets a
    numeric suffix (" 2", " 3", ...) before the extension.
    """

    def move_to_trash(path: str) -> None:
        source = Path(path)
        if not source.exists():
            raise FileNotFoundError(f"No such file: {path}")

        dest = trash_dir / source.name
        counter = 2
        while dest.exists():
            dest = trash_dir / f"{source.stem} {counter}{source.suffix}"
            counter += 1
        source.rename(dest)

    return move_to_trash


@pytest.fixture
def screenshot_names() -> list[str]:
    """Typical macOS screenshot file names."""
    return [
        "Screenshot 2025-01-01 at 1.23.45 AM.png",
        "Screenshot 2025-01-02 at 9.00.00 PM.png",
        "Screen Shot 2024-12-31 at 11.59.59 PM.jpg",
    ]
