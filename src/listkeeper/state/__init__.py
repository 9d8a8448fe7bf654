"""Reducer-style list state."""

from listkeeper.state.commands import ChangePage, Command, CreateEntry, DeleteEntry
from listkeeper.state.reducer import DEFAULT_PAGE_SIZE, ListState, reduce

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "ChangePage",
    "Command",
    "CreateEntry",
    "DeleteEntry",
    "ListState",
    "reduce",
]
