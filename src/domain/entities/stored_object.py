"""Object storage value objects."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StoredObject:
    """An object written to the storage bucket."""

    path: str
    url: str
