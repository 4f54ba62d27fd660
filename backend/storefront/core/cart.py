"""Cart Reducer — pure state transitions for the shopping cart list.

Invariants:
    - At most one entry per id; adding an existing id bumps its quantity
    - quantity >= 1 for every entry: a decrement reaching 0 removes the entry
      in the same call
    - Unknown ids are silent no-ops (never raise)
    - Inputs are never mutated: every function returns a fresh list of fresh dicts

Design Decisions:
    - Entries are plain dicts: products carry arbitrary extra fields (name, imageUrl,
      discount) that the cart copies through untouched
    - New entries are appended; order otherwise follows first insertion
"""


from storefront.core.domain_types import ItemId


def add_item(items: list[dict], product: dict) -> list[dict]:
    """Add one unit of product. Existing entry: quantity + 1, else append with quantity 1."""
    product_id = product["id"]
    if any(item["id"] == product_id for item in items):
        return [
            {**item, "quantity": item["quantity"] + 1}
            if item["id"] == product_id else dict(item)
            for item in items
        ]
    return [dict(item) for item in items] + [{**product, "quantity": 1}]


def increment_quantity(items: list[dict], item_id: ItemId) -> list[dict]:
    return [
        {**item, "quantity": item["quantity"] + 1}
        if item["id"] == item_id else dict(item)
        for item in items
    ]


def decrement_quantity(items: list[dict], item_id: ItemId) -> list[dict]:
    """Decrement by one, clamped at 0; entries at 0 are dropped."""
    decremented = [
        {**item, "quantity": max(0, item["quantity"] - 1)}
        if item["id"] == item_id else dict(item)
        for item in items
    ]
    return [item for item in decremented if item["quantity"] > 0]


def remove_item(items: list[dict], item_id: ItemId) -> list[dict]:
    return [dict(item) for item in items if item["id"] != item_id]


def total_item_count(items: list[dict]) -> int:
    return sum(item["quantity"] for item in items)


def total_price(items: list[dict]) -> float:
    return sum(item["price"] * item["quantity"] for item in items)


def validate_cart_entry(entry: dict) -> str | None:
    """Shape check for a rehydrated cart entry. Returns a reason, or None if valid."""
    quantity = entry.get("quantity")
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return f"entry {entry['id']!r} has non-integer quantity"
    if quantity < 1:
        return f"entry {entry['id']!r} has quantity {quantity} < 1"
    price = entry.get("price")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return f"entry {entry['id']!r} has non-numeric price"
    if price < 0:
        return f"entry {entry['id']!r} has negative price"
    return None
