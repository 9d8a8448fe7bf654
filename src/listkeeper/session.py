"""A running list session: the entry store wired to storage and paging."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from listkeeper.exceptions import DispatchNotBoundError
from listkeeper.ids import IdSource, make_id_source
from listkeeper.models.entry import Entry
from listkeeper.models.view import PageView
from listkeeper.pagination import paginate
from listkeeper.settings import Settings, get_settings
from listkeeper.state import ChangePage, Command, CreateEntry, DeleteEntry, ListState, reduce
from listkeeper.storage.entries import load_entries, save_entries
from listkeeper.storage.slots import SlotStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListDispatch:
    """Operation handles handed to whatever renders the list."""

    submit_new_entry: Callable[[str], Entry | None]
    delete_entry: Callable[[int], bool]
    change_page: Callable[[int], int]


def require_dispatch(dispatch: ListDispatch | None, consumer: str | None = None) -> ListDispatch:
    """Return dispatch, or fail loudly if the consumer was never wired.

    Raises:
        DispatchNotBoundError: If dispatch is None.
    """
    if dispatch is None:
        raise DispatchNotBoundError(consumer)
    return dispatch


class ListSession:
    """Owns the entry list for one user session.

    The persisted slot is read once on construction and rewritten after
    every add or delete that changes the list.
    """

    def __init__(
        self,
        slots: SlotStore,
        settings: Settings | None = None,
        id_source: IdSource | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._slots = slots
        self._key = settings.storage_key

        entries = load_entries(slots, self._key)
        self._state = ListState(entries=tuple(entries), page_size=settings.page_size)
        self._ids = id_source or make_id_source(settings.id_strategy, (e.id for e in entries))
        logger.debug("Loaded %d entries from slot %s", len(entries), self._key)

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._state.entries

    @property
    def current_page(self) -> int:
        return self._state.current_page

    def list_entries(self) -> tuple[Entry, ...]:
        """Snapshot of all entries in insertion order."""
        return self._state.entries

    def view(self) -> PageView:
        """Current page, page count and the entries visible on it."""
        return paginate(self._state.entries, self._state.page_size, self._state.current_page)

    @property
    def dispatch(self) -> ListDispatch:
        return ListDispatch(
            submit_new_entry=self.submit_new_entry,
            delete_entry=self.delete_entry,
            change_page=self.change_page,
        )

    def _commit(self, command: Command) -> None:
        """Apply a mutating command, saving before the new state is kept.

        If the save raises, the session keeps its previous state.
        """
        next_state = reduce(self._state, command)
        save_entries(self._slots, next_state.entries, self._key)
        self._state = next_state
        logger.debug("Entries: %s", [e.model_dump(by_alias=True) for e in next_state.entries])

    def submit_new_entry(self, text: str) -> Entry | None:
        """Add an entry. Blank text is ignored and returns None.

        The current page stays where it is even if the new entry lands on a
        later page.
        """
        content = text.strip()
        if not content:
            logger.debug("Ignoring blank entry")
            return None

        entry = Entry(id=self._ids.next_id(), content=content)
        self._commit(CreateEntry(entry))
        return entry

    def delete_entry(self, entry_id: int) -> bool:
        """Remove an entry by id. Returns False if no such entry exists."""
        if not self._state.has_entry(entry_id):
            logger.debug("No entry with id %s to delete", entry_id)
            return False

        self._commit(DeleteEntry(entry_id))
        return True

    def change_page(self, page: int) -> int:
        """Move to a page, clamped to the valid range. Returns the page shown."""
        self._state = reduce(self._state, ChangePage(page))
        return self._state.current_page
