"""Paginated list manager with a persisted entry collection."""

__version__ = "0.1.0"
