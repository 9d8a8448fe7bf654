"""Page arithmetic for the entry list.

Everything here is a pure function of small integers, so results are
memoized with lru_cache the same way settings are.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from listkeeper.models.entry import Entry
from listkeeper.models.view import PageView


@dataclass(frozen=True)
class PageWindow:
    """Resolved page and the half-open index range it covers."""

    page_count: int
    current_page: int
    start: int
    end: int


def _check_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")


@lru_cache(maxsize=1024)
def page_count(entry_count: int, page_size: int) -> int:
    """Number of pages needed for entry_count entries (0 when empty)."""
    _check_page_size(page_size)
    return -(-max(entry_count, 0) // page_size)


def clamp_page(requested: int, total_pages: int) -> int:
    """Clamp a requested page into [1, max(1, total_pages)]."""
    return min(max(requested, 1), max(1, total_pages))


@lru_cache(maxsize=1024)
def compute_window(entry_count: int, page_size: int, requested_page: int) -> PageWindow:
    """Resolve the requested page against entry_count.

    Args:
        entry_count: Number of entries in the collection.
        page_size: Entries per page.
        requested_page: 1-indexed page the caller asked for; clamped.

    Returns:
        PageWindow with the effective page and its [start, end) slice bounds.
    """
    total = page_count(entry_count, page_size)
    current = clamp_page(requested_page, total)
    start = (current - 1) * page_size
    return PageWindow(page_count=total, current_page=current, start=start, end=start + page_size)


def paginate(entries: Sequence[Entry], page_size: int, requested_page: int) -> PageView:
    """Build the view of one page of entries."""
    window = compute_window(len(entries), page_size, requested_page)
    return PageView(
        visible_entries=tuple(entries[window.start : window.end]),
        current_page=window.current_page,
        page_count=window.page_count,
    )


def reclamp_after_delete(current_page: int, entry_count: int, page_size: int) -> int:
    """Page to show after a deletion left entry_count entries.

    Moves to the new last page when the current one no longer exists, and
    back to page 1 once the list is empty.
    """
    total = page_count(entry_count, page_size)
    if total == 0:
        return 1
    if current_page > total:
        return total
    return current_page
