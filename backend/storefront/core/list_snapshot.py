"""List Snapshot — serialization / deserialization of persisted lists.

Invariants:
    - items_to_snapshot produces versionless JSON of the form {"items": [...]}
    - items_from_snapshot(None) is an empty list (first access)
    - Anything else that is not a well-formed snapshot raises SnapshotCorruptedError:
      invalid JSON, non-object root, missing or non-list "items", entries that are
      not objects, entries without a non-empty string id, duplicate ids,
      or entries rejected by the variant validator

Design Decisions:
    - Validation is all-or-nothing: a partially trusted list is never returned
    - Variant-specific checks injected as a callable returning a reason string
"""

import json
from collections.abc import Callable

from storefront.core.errors import SnapshotCorruptedError

EntryValidator = Callable[[dict], str | None]


def items_to_snapshot(items: list[dict]) -> str:
    """Serialize a list to its durable JSON form. Pure, no IO."""
    return json.dumps({"items": items}, ensure_ascii=False)


def items_from_snapshot(
    raw: str | None, validate_entry: EntryValidator | None = None,
) -> list[dict]:
    """Parse and shape-check a durable snapshot. Pure, no IO."""
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise SnapshotCorruptedError(f"invalid JSON ({e})")

    if not isinstance(data, dict):
        raise SnapshotCorruptedError("root is not an object")
    items = data.get("items")
    if not isinstance(items, list):
        raise SnapshotCorruptedError("'items' is missing or not a list")

    seen: set[str] = set()
    for index, entry in enumerate(items):
        if not isinstance(entry, dict):
            raise SnapshotCorruptedError(f"entry {index} is not an object")
        entry_id = entry.get("id")
        if not isinstance(entry_id, str) or not entry_id:
            raise SnapshotCorruptedError(f"entry {index} has no string id")
        if entry_id in seen:
            raise SnapshotCorruptedError(f"duplicate id {entry_id!r}")
        seen.add(entry_id)
        if validate_entry:
            reason = validate_entry(entry)
            if reason:
                raise SnapshotCorruptedError(reason)
    return items
