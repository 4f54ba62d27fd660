"""Recently-Viewed Reducer — capped, most-recent-first product history.

Invariants:
    - Newest entry is at index 0
    - At most one entry per id: re-viewing a product promotes it to the front
    - Length never exceeds the cap; the oldest entries beyond it are evicted

Design Decisions:
    - Dedup-and-promote (filter, prepend, truncate) over in-place move: one pass,
      same result whether or not the product was already present
"""

from storefront.core.domain_types import (
    RECENTLY_VIEWED_FIELDS, RECENTLY_VIEWED_LIMIT, ItemId,
)


def add_item(
    items: list[dict], product: dict, limit: int = RECENTLY_VIEWED_LIMIT,
) -> list[dict]:
    """Remove any entry with the same id, prepend product, keep the first `limit`."""
    remaining = [dict(item) for item in items if item["id"] != product["id"]]
    return [dict(product), *remaining][:limit]


def remove_item(items: list[dict], item_id: ItemId) -> list[dict]:
    return [dict(item) for item in items if item["id"] != item_id]


def truncate(items: list[dict], limit: int = RECENTLY_VIEWED_LIMIT) -> list[dict]:
    return [dict(item) for item in items[:limit]]


def to_recently_viewed_entry(product: dict) -> dict:
    """Project a product (brief or detail) onto the recently-viewed snapshot fields."""
    entry = {key: product[key] for key in RECENTLY_VIEWED_FIELDS if key in product}
    if entry.get("discount") is None:
        entry["discount"] = 0
    return entry
