"""View JSON and SQLite time series as line or scatter charts."""

__version__ = "0.1.0"

__all__ = ["__version__"]