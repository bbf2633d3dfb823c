"""Data access for the `recordings` album catalogue."""

__version__ = "0.1.0"
