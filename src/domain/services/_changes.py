"""Helpers shared by the admin services."""

from dataclasses import fields
from datetime import datetime
from typing import Any


def apply_changes(entity: Any, changes: dict[str, Any]) -> None:
    """Copy known fields from ``changes`` onto a dataclass entity.

    ``id`` and ``created_at`` are never overwritten. ``updated_at`` is bumped
    when the entity has one.
    """
    names = {f.name for f in fields(entity)} - {"id", "created_at", "updated_at"}
    for key, value in changes.items():
        if key in names:
            setattr(entity, key, value)
    if hasattr(entity, "updated_at"):
        entity.updated_at = datetime.utcnow()
