"""Partial updates of ORM records from request payloads."""

from collections.abc import Collection, Mapping
from typing import Any

from client_hub.models import Base


def merge_fields(
    record: Base,
    updates: Mapping[str, Any],
    nullable: Collection[str] = (),
) -> list[str]:
    """Copy the given fields onto a record.

    Fields missing from ``updates`` keep their value. A ``None`` for a field
    that is not listed in ``nullable`` is skipped rather than written, since
    the column cannot hold it. The ``id`` key is never applied.

    Returns:
        Names of the fields whose value changed.
    """
    changed: list[str] = []
    for name, value in updates.items():
        if name == "id":
            continue
        if value is None and name not in nullable:
            continue
        if getattr(record, name) != value:
            setattr(record, name, value)
            changed.append(name)
    return changed
