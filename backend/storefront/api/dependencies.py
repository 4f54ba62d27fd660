"""API Dependencies — composition root for per-request stores and the catalog client.

Invariants:
    - X-Client-Id scopes all durable storage: 1-64 chars of [A-Za-z0-9_-]
    - Stores are built and rehydrated per request, never shared between requests
    - The catalog client is process-wide, created in the lifespan and stored on app.state

Design Decisions:
    - Dependencies over module-level singletons: tests override get_db and
      get_catalog_client without patching store internals
"""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config import get_settings
from storefront.infrastructure.catalog_client import ResilientCatalogClient
from storefront.infrastructure.database import get_db
from storefront.infrastructure.sql_storage import SqlDurableStorage
from storefront.services.list_stores import CartStore, RecentlyViewedStore

CLIENT_ID_HEADER = "X-Client-Id"
_CLIENT_ID_PATTERN = r"^[A-Za-z0-9_-]+$"


def get_client_id(
    client_id: Annotated[str, Header(
        alias=CLIENT_ID_HEADER, min_length=1, max_length=64,
        pattern=_CLIENT_ID_PATTERN,
    )],
) -> str:
    return client_id


def get_optional_client_id(
    client_id: Annotated[str | None, Header(
        alias=CLIENT_ID_HEADER, min_length=1, max_length=64,
        pattern=_CLIENT_ID_PATTERN,
    )] = None,
) -> str | None:
    return client_id


def get_catalog_client(request: Request) -> ResilientCatalogClient:
    return request.app.state.catalog_client


async def get_cart_store(
    client_id: str = Depends(get_client_id),
    db: AsyncSession = Depends(get_db),
) -> CartStore:
    settings = get_settings()
    return await CartStore.open(
        SqlDurableStorage(db, client_id),
        storage_key=settings.cart_storage_key,
    )


async def _open_recently_viewed(
    db: AsyncSession, client_id: str,
) -> RecentlyViewedStore:
    settings = get_settings()
    return await RecentlyViewedStore.open(
        SqlDurableStorage(db, client_id),
        storage_key=settings.recently_viewed_storage_key,
        limit=settings.recently_viewed_limit,
    )


async def get_recently_viewed_store(
    client_id: str = Depends(get_client_id),
    db: AsyncSession = Depends(get_db),
) -> RecentlyViewedStore:
    return await _open_recently_viewed(db, client_id)


async def get_optional_recently_viewed_store(
    client_id: str | None = Depends(get_optional_client_id),
    db: AsyncSession = Depends(get_db),
) -> RecentlyViewedStore | None:
    """Anonymous viewers (no X-Client-Id) get no history."""
    if client_id is None:
        return None
    return await _open_recently_viewed(db, client_id)
