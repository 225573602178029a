"""Task and project tracking with SQLite storage, view state and styling helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]