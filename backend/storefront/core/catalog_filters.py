"""Catalog Filters — pure narrowing of a product array before pagination.

Invariants:
    - Order of the input array is preserved
    - category_id matches the product's categoryId exactly
    - search is a case-insensitive substring match on name or description
    - None/empty filters are ignored
"""


def filter_products(
    products: list[dict],
    category_id: str | None = None,
    search: str | None = None,
) -> list[dict]:
    result = list(products)
    if category_id:
        result = [p for p in result if p.get("categoryId") == category_id]
    if search:
        needle = search.lower()
        result = [
            p for p in result
            if needle in (p.get("name") or "").lower()
            or needle in (p.get("description") or "").lower()
        ]
    return result
