"""Promo Codes — discount rates and the cart summary they feed.

Invariants:
    - Codes are matched case-insensitively; surrounding whitespace is not trimmed
    - Unknown or empty codes give a 0.0 rate (never raise)
    - promoCode in the summary is the lowercased code, or None when it gives no discount
    - total == subtotal - subtotal * discount_rate
"""

from storefront.core.cart import total_item_count, total_price

PROMO_CODES: dict[str, float] = {
    "save10": 0.10,
    "welcome20": 0.20,
}


def normalize_promo_code(code: str | None) -> str | None:
    return code.lower() if code else None


def promo_discount_rate(code: str | None) -> float:
    normalized = normalize_promo_code(code)
    if normalized is None:
        return 0.0
    return PROMO_CODES.get(normalized, 0.0)


def summarize_cart(items: list[dict], promo_code: str | None = None) -> dict:
    """Build the cart summary envelope. Pure, no IO."""
    subtotal = total_price(items)
    rate = promo_discount_rate(promo_code)
    discount = subtotal * rate
    return {
        "items": items,
        "totalItems": total_item_count(items),
        "subtotal": subtotal,
        "promoCode": normalize_promo_code(promo_code) if rate else None,
        "discountRate": rate,
        "discount": discount,
        "total": subtotal - discount,
    }
