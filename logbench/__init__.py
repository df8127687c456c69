"""Latency benchmark for logging backends: flat file, PostgreSQL and SQLite."""

__version__ = "0.1.0"
