from typing import Sequence, TypeVar

from fleet.results import Ok, Result, invalid_payload, not_found
from fleet.store import EntityStore
from fleet.validation import is_blank

T = TypeVar("T")


async def fetch(store: EntityStore[T], record_id: str, label: str) -> Result[T]:
    """Point lookup shared by every get-by-id handler."""
    if is_blank(record_id):
        return invalid_payload(f"Invalid {label.lower()} id")
    record = await store.get_by_id(record_id)
    if record is None:
        return not_found(f"{label} not found")
    return Ok(record)


def non_empty(records: Sequence[T], text: str) -> Result[list[T]]:
    if not records:
        return not_found(text)
    return Ok(list(records))


def first(records: Sequence[T], text: str) -> Result[T]:
    if not records:
        return not_found(text)
    return Ok(records[0])
