"""Exception hierarchy for listkeeper."""


class ListkeeperError(Exception):
    """Base exception for all listkeeper errors."""


class DispatchNotBoundError(ListkeeperError):
    """A consumer was wired without the list operation handles."""

    def __init__(self, consumer: str | None = None) -> None:
        self.consumer = consumer
        where = f" for {consumer}" if consumer else ""
        super().__init__(
            f"List dispatch is not bound{where}. "
            "Pass ListSession.dispatch to the consumer when constructing it."
        )


class DuplicateEntryError(ListkeeperError):
    """An entry id was added twice to the same collection."""

    def __init__(self, entry_id: int) -> None:
        self.entry_id = entry_id
        super().__init__(f"Entry id {entry_id} already exists")
