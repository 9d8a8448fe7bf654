"""Pydantic models for listkeeper."""

from listkeeper.models.entry import Entry, decode_entries, encode_entries
from listkeeper.models.view import PageView

__all__ = [
    "Entry",
    "PageView",
    "decode_entries",
    "encode_entries",
]
