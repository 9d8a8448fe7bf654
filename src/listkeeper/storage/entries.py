"""Entry collection persistence."""

import logging
from collections.abc import Iterable

from listkeeper.models.entry import Entry, decode_entries, encode_entries
from listkeeper.storage.slots import SlotStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "myItems"


def _discard(slots: SlotStore, key: str, error: Exception) -> list[Entry]:
    """Log and clear a slot whose contents cannot be decoded."""
    logger.warning("Discarding corrupt entry data in slot %s: %s", key, error)
    slots.remove_item(key)
    return []


def load_entries(slots: SlotStore, key: str = STORAGE_KEY) -> list[Entry]:
    """Load the entry collection. Returns an empty list if absent or corrupt.

    A value that fails to decode is removed from the slot so the next save
    starts clean. That includes a single blank or ill-typed record: the whole
    collection is dropped rather than partially loaded.
    """
    try:
        raw = slots.get_item(key)
    except UnicodeDecodeError as e:
        return _discard(slots, key, e)
    except OSError as e:
        logger.warning("Failed to read slot %s: %s", key, e)
        return []

    if raw is None:
        return []

    try:
        return decode_entries(raw)
    except ValueError as e:
        return _discard(slots, key, e)


def save_entries(slots: SlotStore, entries: Iterable[Entry], key: str = STORAGE_KEY) -> None:
    """Overwrite the slot with the full collection."""
    slots.set_item(key, encode_entries(entries))
