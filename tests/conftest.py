"""Shared test fixtures."""

import pytest

from listkeeper.models.entry import Entry
from listkeeper.session import ListSession
from listkeeper.settings import IdStrategy, Settings
from listkeeper.storage.slots import MemorySlotStore

LETTERS = ["a", "b", "c", "d", "e", "f"]


@pytest.fixture
def settings() -> Settings:
    """Settings with the reference page size, isolated from env files."""
    return Settings(
        _env_file=None,
        page_size=5,
        storage_key="myItems",
        id_strategy=IdStrategy.COUNTER,
    )


@pytest.fixture
def slots() -> MemorySlotStore:
    """Empty in-memory slot store."""
    return MemorySlotStore()


@pytest.fixture
def session(slots, settings) -> ListSession:
    """Fresh session with no entries."""
    return ListSession(slots, settings)


@pytest.fixture
def six_entry_session(session) -> ListSession:
    """Session holding entries a through f (two pages)."""
    for letter in LETTERS:
        session.submit_new_entry(letter)
    return session


@pytest.fixture
def make_entries():
    """Build entries with ids 1..n and contents item-1..item-n."""

    def _make(count: int) -> list[Entry]:
        return [Entry(id=i, content=f"item-{i}") for i in range(1, count + 1)]

    return _make
