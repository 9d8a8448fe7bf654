"""Key-value slots for persisted state."""

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

SLOT_SUFFIX = ".json"


class SlotStore(Protocol):
    """A durable string-to-string store with named slots."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemorySlotStore:
    """Slots kept in a dict. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileSlotStore:
    """One file per slot under a data directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def _slot_path(self, key: str) -> Path:
        """Get the file path for a slot key."""
        if not key or "/" in key or "\\" in key or key in (".", ".."):
            raise ValueError(f"Invalid slot key: {key!r}")
        return self.directory / f"{key}{SLOT_SUFFIX}"

    def get_item(self, key: str) -> str | None:
        path = self._slot_path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        """Overwrite a slot in one step."""
        path = self._slot_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file first for atomic operation
        temp_path = path.with_suffix(".tmp")
        temp_path.write_text(value, encoding="utf-8")
        temp_path.replace(path)
        logger.debug("Wrote slot %s (%d bytes)", path, len(value))

    def remove_item(self, key: str) -> None:
        self._slot_path(key).unlink(missing_ok=True)
