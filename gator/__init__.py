"""Command-line RSS feed aggregator with SQLite-backed users and feeds."""

__version__ = "0.1.0"