"""Option parsing with grouped help output, and plot geometry, figure and snapshot-naming helpers."""

__version__ = "2.2.0"
__all__ = ["errors", "values", "helpformat", "geometry", "snapshot", "options", "figures"]