"""Commands understood by the list reducer."""

from dataclasses import dataclass

from listkeeper.models.entry import Entry


@dataclass(frozen=True)
class CreateEntry:
    """Append a fully built entry."""

    entry: Entry


@dataclass(frozen=True)
class DeleteEntry:
    """Remove the entry with this id, if present."""

    entry_id: int


@dataclass(frozen=True)
class ChangePage:
    """Move to another page; out-of-range pages are clamped."""

    page: int


Command = CreateEntry | DeleteEntry | ChangePage
