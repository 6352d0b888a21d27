"""Core utilities: path resolution and console theming."""
