"""Domain Types — shared identity types, enums and limits for storefront lists.

Invariants:
    - ItemId is the only identity of a list entry (no other uniqueness constraint)
    - RECENTLY_VIEWED_LIMIT bounds the recently-viewed list; the cart is uncapped
    - Storage keys are stable: changing them orphans every persisted snapshot

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", str)
ClientId = NewType("ClientId", str)


# ─── Lists ───────────────────────────────────────────────────────

class ListKind(str, Enum):
    """The two persisted list variants."""
    CART = "cart"
    RECENTLY_VIEWED = "recently_viewed"


CART_STORAGE_KEY = "ecommerce-cart-storage"
RECENTLY_VIEWED_STORAGE_KEY = "ecommerce-recently-viewed-storage"

RECENTLY_VIEWED_LIMIT = 20


# ─── Pagination ──────────────────────────────────────────────────

DEFAULT_PAGE_SIZE = 10
DEFAULT_DEALS_PAGE_SIZE = 4
MAX_PAGE_SIZE = 100


# ─── Recently-viewed snapshot fields ─────────────────────────────

# Fields copied from a product detail into a recently-viewed entry
RECENTLY_VIEWED_FIELDS: tuple[str, ...] = (
    "id", "name", "slug", "imageUrl", "price", "discount",
)
