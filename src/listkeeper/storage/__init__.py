"""Storage utilities for persisted list data."""

from listkeeper.storage.entries import STORAGE_KEY, load_entries, save_entries
from listkeeper.storage.slots import FileSlotStore, MemorySlotStore, SlotStore

__all__ = [
    "STORAGE_KEY",
    "FileSlotStore",
    "MemorySlotStore",
    "SlotStore",
    "load_entries",
    "save_entries",
]
