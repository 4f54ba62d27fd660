"""Persisted List Stores — cart and recently-viewed lists mirrored to durable storage.

Invariants:
    - Every mutation goes through _commit: new list in memory, then full snapshot written
    - Mutations never raise for unknown ids (reducers treat them as no-ops)
    - Reads (items, totals, counts) never touch storage
    - A corrupted snapshot on rehydrate resets the list to empty and logs a warning
    - Storage failures propagate to the caller unchanged

Design Decisions:
    - One store instance per request, built by the composition root (api/dependencies.py):
      no module-level singleton, tests construct fresh stores
    - Reducers in core/ do the state transitions; stores only sequence reducer -> persist
    - No-op mutations still persist, matching "persist on every mutation"
"""

import logging

from storefront.core import cart as cart_reducer
from storefront.core import recently_viewed as recently_viewed_reducer
from storefront.core.domain_types import (
    CART_STORAGE_KEY,
    ItemId,
    ListKind,
    RECENTLY_VIEWED_LIMIT,
    RECENTLY_VIEWED_STORAGE_KEY,
)
from storefront.core.errors import SnapshotCorruptedError
from storefront.core.list_snapshot import (
    EntryValidator,
    items_from_snapshot,
    items_to_snapshot,
)
from storefront.core.repository_protocols import DurableStorage

logger = logging.getLogger(__name__)


class PersistedListStore:
    """Ordered, id-deduplicated list mirrored to one DurableStorage key."""

    kind: ListKind
    default_storage_key: str = ""
    entry_validator: EntryValidator | None = None

    def __init__(self, storage: DurableStorage, storage_key: str | None = None):
        self._storage = storage
        self.storage_key = storage_key or self.default_storage_key
        self._items: list[dict] = []

    @classmethod
    async def open(cls, storage: DurableStorage, **kwargs):
        """Construct and rehydrate in one step."""
        store = cls(storage, **kwargs)
        await store.rehydrate()
        return store

    @property
    def items(self) -> list[dict]:
        return [dict(item) for item in self._items]

    async def rehydrate(self) -> None:
        raw = await self._storage.read(self.storage_key)
        try:
            self._items = self._restore(
                items_from_snapshot(raw, type(self).entry_validator),
            )
        except SnapshotCorruptedError as e:
            logger.warning(
                f"Discarding corrupted {self.kind.value} snapshot: {e.reason}",
                extra={"storage_key": self.storage_key, "error_code": e.code},
            )
            self._items = []

    def _restore(self, items: list[dict]) -> list[dict]:
        return items

    async def _commit(self, items: list[dict]) -> None:
        self._items = items
        await self._storage.write(self.storage_key, items_to_snapshot(items))

    async def clear(self) -> None:
        await self._commit([])


class CartStore(PersistedListStore):
    """Shopping cart: quantity-tracked, uncapped, append order."""

    kind = ListKind.CART
    default_storage_key = CART_STORAGE_KEY
    entry_validator = staticmethod(cart_reducer.validate_cart_entry)

    async def add_item(self, product: dict) -> None:
        await self._commit(cart_reducer.add_item(self._items, product))

    async def increment_quantity(self, item_id: ItemId) -> None:
        await self._commit(cart_reducer.increment_quantity(self._items, item_id))

    async def decrement_quantity(self, item_id: ItemId) -> None:
        await self._commit(cart_reducer.decrement_quantity(self._items, item_id))

    async def remove_item(self, item_id: ItemId) -> None:
        await self._commit(cart_reducer.remove_item(self._items, item_id))

    def total_item_count(self) -> int:
        return cart_reducer.total_item_count(self._items)

    def total_price(self) -> float:
        return cart_reducer.total_price(self._items)


class RecentlyViewedStore(PersistedListStore):
    """Recently-viewed history: newest first, capped."""

    kind = ListKind.RECENTLY_VIEWED
    default_storage_key = RECENTLY_VIEWED_STORAGE_KEY

    def __init__(
        self,
        storage: DurableStorage,
        storage_key: str | None = None,
        limit: int = RECENTLY_VIEWED_LIMIT,
    ):
        super().__init__(storage, storage_key)
        self.limit = limit

    def _restore(self, items: list[dict]) -> list[dict]:
        return recently_viewed_reducer.truncate(items, self.limit)

    async def add_item(self, product: dict) -> None:
        await self._commit(
            recently_viewed_reducer.add_item(self._items, product, self.limit),
        )

    async def remove_item(self, item_id: ItemId) -> None:
        await self._commit(recently_viewed_reducer.remove_item(self._items, item_id))

    def get_items(self) -> list[dict]:
        return self.items

    def get_count(self) -> int:
        return len(self._items)
