"""Entry model and the JSON codec for a persisted collection."""

from collections.abc import Iterable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class Entry(BaseModel):
    """A single user-submitted list item.

    Serialized as ``{"id": ..., "value": ...}``; ``content`` is accepted on
    input as well.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    content: str = Field(
        validation_alias=AliasChoices("value", "content"),
        serialization_alias="value",
    )

    @field_validator("content")
    @classmethod
    def _strip_content(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("content must not be blank")
        return stripped


_entry_list = TypeAdapter(list[Entry])


def encode_entries(entries: Iterable[Entry]) -> str:
    """Encode entries, in order, as a JSON array of id/value records."""
    return _entry_list.dump_json(list(entries), by_alias=True).decode()


def decode_entries(raw: str | bytes) -> list[Entry]:
    """Decode a JSON array of id/value records.

    Raises:
        pydantic.ValidationError: If the payload is not valid JSON or a record is malformed.
        ValueError: If two records share an id.
    """
    entries = _entry_list.validate_json(raw)
    seen: set[int] = set()
    for entry in entries:
        if entry.id in seen:
            raise ValueError(f"Duplicate entry id {entry.id}")
        seen.add(entry.id)
    return entries
