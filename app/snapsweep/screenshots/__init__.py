"""Screenshot discovery module.

This module lists screenshot files in the screenshot directory and
orders them for display and disposal.
"""

from snapsweep.screenshots.models import ListOptions, ScreenshotItem, SortBy
from snapsweep.screenshots.scanner import ScreenshotScanner, is_screenshot_name

__all__ = [
    "ListOptions",
    "ScreenshotItem",
    "ScreenshotScanner",
    "SortBy",
    "is_screenshot_name",
]
