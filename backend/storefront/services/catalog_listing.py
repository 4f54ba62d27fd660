"""Catalog Listing — fetch full catalog arrays, filter them, and cut one page.

Invariants:
    - Every call refetches the full source array (no caching between pages)
    - Filtering happens before pagination, so total counts filtered products
    - Viewing a product detail records it in recently-viewed only when a store is given
      and the catalog id is a non-empty string

Design Decisions:
    - Plain async functions over a handler class: no per-request state beyond the client
    - CatalogSource Protocol: routes and tests pass any object with the fetch methods
"""

import logging
from typing import Protocol

from storefront.core.catalog_filters import filter_products
from storefront.core.domain_types import DEFAULT_DEALS_PAGE_SIZE, DEFAULT_PAGE_SIZE
from storefront.core.pagination import Page, paginate_array
from storefront.core.recently_viewed import to_recently_viewed_entry
from storefront.services.list_stores import RecentlyViewedStore

logger = logging.getLogger(__name__)


class CatalogSource(Protocol):
    """Read side of the remote catalog — implemented by ResilientCatalogClient."""
    async def fetch_products(self) -> list[dict]: ...
    async def fetch_deal_products(self) -> list[dict]: ...
    async def fetch_category_products(self, category_id: str) -> list[dict]: ...
    async def fetch_product(self, slug: str) -> dict: ...


async def list_products(
    catalog: CatalogSource,
    cursor: str | None = None,
    limit: int = DEFAULT_PAGE_SIZE,
    category_id: str | None = None,
    search: str | None = None,
) -> Page[dict]:
    products = await catalog.fetch_products()
    return paginate_array(filter_products(products, category_id, search), cursor, limit)


async def list_deal_products(
    catalog: CatalogSource,
    cursor: str | None = None,
    limit: int = DEFAULT_DEALS_PAGE_SIZE,
) -> Page[dict]:
    return paginate_array(await catalog.fetch_deal_products(), cursor, limit)


async def list_category_products(
    catalog: CatalogSource,
    category_id: str,
    cursor: str | None = None,
    limit: int = DEFAULT_PAGE_SIZE,
) -> Page[dict]:
    return paginate_array(
        await catalog.fetch_category_products(category_id), cursor, limit,
    )


async def view_product(
    catalog: CatalogSource,
    slug: str,
    recently_viewed: RecentlyViewedStore | None = None,
) -> dict:
    """Fetch a product detail and promote it in the viewer's history."""
    product = await catalog.fetch_product(slug)
    if recently_viewed is None:
        return product
    product_id = product.get("id")
    # A non-string id would make the whole persisted snapshot unreadable
    if not isinstance(product_id, str) or not product_id:
        logger.warning(
            f"Skipping view of {slug!r}: unusable catalog id {product_id!r}",
            extra={"storage_key": recently_viewed.storage_key},
        )
        return product
    await recently_viewed.add_item(to_recently_viewed_entry(product))
    logger.info(
        f"Recorded view of product {product['id']}",
        extra={"storage_key": recently_viewed.storage_key},
    )
    return product
