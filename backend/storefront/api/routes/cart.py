"""Cart Routes — the client's shopping cart, persisted per X-Client-Id.

Invariants:
    - Every response is the full cart summary (items, totals, promo breakdown)
    - Unknown item ids are no-ops, never 404: the cart is returned unchanged
    - promo_code only shapes the summary; it is never persisted
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from storefront.api.dependencies import get_cart_store
from storefront.core.promo import summarize_cart
from storefront.schemas.products import CartProduct
from storefront.services.list_stores import CartStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cart", tags=["cart"])

_PROMO_QUERY = Query(None, max_length=50)


@router.get("")
async def get_cart(
    promo_code: str | None = _PROMO_QUERY,
    cart: CartStore = Depends(get_cart_store),
):
    """Cart contents with totals."""
    return summarize_cart(cart.items, promo_code)


@router.post("/items", status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    body: CartProduct,
    promo_code: str | None = _PROMO_QUERY,
    cart: CartStore = Depends(get_cart_store),
):
    """Add one unit of a product (existing entries get quantity + 1)."""
    await cart.add_item(body.to_entry())
    logger.info(
        f"Added {body.id} to cart",
        extra={"storage_key": cart.storage_key, "item_count": cart.total_item_count()},
    )
    return summarize_cart(cart.items, promo_code)


@router.post("/items/{item_id}/increment")
async def increment_cart_item(
    item_id: str,
    promo_code: str | None = _PROMO_QUERY,
    cart: CartStore = Depends(get_cart_store),
):
    await cart.increment_quantity(item_id)
    return summarize_cart(cart.items, promo_code)


@router.post("/items/{item_id}/decrement")
async def decrement_cart_item(
    item_id: str,
    promo_code: str | None = _PROMO_QUERY,
    cart: CartStore = Depends(get_cart_store),
):
    """Decrement quantity; an entry reaching 0 leaves the cart."""
    await cart.decrement_quantity(item_id)
    return summarize_cart(cart.items, promo_code)


@router.delete("/items/{item_id}")
async def remove_cart_item(
    item_id: str,
    promo_code: str | None = _PROMO_QUERY,
    cart: CartStore = Depends(get_cart_store),
):
    await cart.remove_item(item_id)
    return summarize_cart(cart.items, promo_code)


@router.delete("")
async def clear_cart(cart: CartStore = Depends(get_cart_store)):
    await cart.clear()
    return summarize_cart(cart.items)
