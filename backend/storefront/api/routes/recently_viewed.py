"""Recently-Viewed Routes — the client's product history, newest first.

Invariants:
    - Every response is {"items": [...], "count": n} after the operation
    - Re-adding a product promotes it to the front instead of duplicating it
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import get_recently_viewed_store
from storefront.schemas.products import ViewedProduct
from storefront.services.list_stores import RecentlyViewedStore

router = APIRouter(prefix="/api/v1/recently-viewed", tags=["recently-viewed"])


def _history(store: RecentlyViewedStore) -> dict:
    return {"items": store.get_items(), "count": store.get_count()}


@router.get("")
async def get_recently_viewed(
    store: RecentlyViewedStore = Depends(get_recently_viewed_store),
):
    return _history(store)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_recently_viewed(
    body: ViewedProduct,
    store: RecentlyViewedStore = Depends(get_recently_viewed_store),
):
    await store.add_item(body.to_entry())
    return _history(store)


@router.delete("/{item_id}")
async def remove_recently_viewed(
    item_id: str,
    store: RecentlyViewedStore = Depends(get_recently_viewed_store),
):
    await store.remove_item(item_id)
    return _history(store)


@router.delete("")
async def clear_recently_viewed(
    store: RecentlyViewedStore = Depends(get_recently_viewed_store),
):
    await store.clear()
    return _history(store)
