"""Join-and-flatten of starred entries against their restaurants.

Callers never see nested objects: a starred entry and the restaurant it
points at are presented as one flat record. Fields closer to the top of the
record win on name collisions, so the entry's own ``id`` and ``comment``
always beat the restaurant's.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def flatten_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Lift the fields of nested mappings to the top level.

    Scalars and lists at the current level are kept first. Nested mappings
    are flattened recursively and merged in order; a key that is already
    present is never overwritten, so outer fields take precedence and the
    first nested mapping wins over later siblings.
    """
    flat: dict[str, Any] = {
        key: value for key, value in record.items() if not isinstance(value, Mapping)
    }
    for value in record.values():
        if isinstance(value, Mapping):
            for key, nested in flatten_record(value).items():
                flat.setdefault(key, nested)
    return flat


def join_entry(entry: Mapping[str, Any], restaurant: Mapping[str, Any]) -> dict[str, Any]:
    """Present a starred entry joined with its restaurant as one flat record."""
    return flatten_record({
        "id": entry["id"],
        "comment": entry.get("comment"),
        "restaurant": restaurant,
    })
