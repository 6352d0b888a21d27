"""snapsweep - Find, trash and restore screenshot files."""

__version__ = "0.1.0"
