"""Pure state transitions for the entry list."""

from dataclasses import dataclass, replace

from listkeeper.exceptions import DuplicateEntryError
from listkeeper.models.entry import Entry
from listkeeper.pagination import clamp_page, page_count, reclamp_after_delete
from listkeeper.state.commands import ChangePage, Command, CreateEntry, DeleteEntry

DEFAULT_PAGE_SIZE = 5


@dataclass(frozen=True)
class ListState:
    """Entries in insertion order plus the page being looked at."""

    entries: tuple[Entry, ...] = ()
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def page_count(self) -> int:
        return page_count(len(self.entries), self.page_size)

    def has_entry(self, entry_id: int) -> bool:
        """Check whether an entry with this id exists."""
        return any(entry.id == entry_id for entry in self.entries)


def reduce(state: ListState, command: Command) -> ListState:
    """Apply a command and return the next state.

    Adding never moves the current page. Deleting re-clamps it against the
    shrunken page count. Deleting an unknown id returns state unchanged.

    Raises:
        DuplicateEntryError: If CreateEntry carries an id already present.
        TypeError: If command is not a known command type.
    """
    if isinstance(command, CreateEntry):
        if state.has_entry(command.entry.id):
            raise DuplicateEntryError(command.entry.id)
        return replace(state, entries=(*state.entries, command.entry))

    if isinstance(command, DeleteEntry):
        if not state.has_entry(command.entry_id):
            return state
        remaining = tuple(e for e in state.entries if e.id != command.entry_id)
        return replace(
            state,
            entries=remaining,
            current_page=reclamp_after_delete(state.current_page, len(remaining), state.page_size),
        )

    if isinstance(command, ChangePage):
        return replace(state, current_page=clamp_page(command.page, state.page_count))

    raise TypeError(f"Unknown command: {command!r}")
