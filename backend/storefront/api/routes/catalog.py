"""Catalog Routes — paginated product listings proxied from the remote catalog API.

Invariants:
    - Listing responses use the Page envelope {data, hasMore, nextCursor?, total}
    - cursor is the opaque value of a previous page's nextCursor (absent = first page)
    - /products/deals is registered before /products/{slug} so "deals" is never a slug
    - GET /products/{slug} records the view only when X-Client-Id is sent
"""

from fastapi import APIRouter, Depends, Query

from storefront.api.dependencies import (
    get_catalog_client,
    get_optional_recently_viewed_store,
)
from storefront.core.domain_types import (
    DEFAULT_DEALS_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)
from storefront.services import catalog_listing
from storefront.services.catalog_listing import CatalogSource
from storefront.services.list_stores import RecentlyViewedStore

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.get("/products")
async def list_products(
    cursor: str | None = Query(None, max_length=20),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    category_id: str | None = Query(None, alias="categoryId", max_length=128),
    search: str | None = Query(None, max_length=200),
    catalog: CatalogSource = Depends(get_catalog_client),
):
    """All products, optionally filtered by category and search text."""
    page = await catalog_listing.list_products(
        catalog, cursor, limit, category_id=category_id, search=search,
    )
    return page.to_response()


@router.get("/products/deals")
async def list_deal_products(
    cursor: str | None = Query(None, max_length=20),
    limit: int = Query(DEFAULT_DEALS_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    catalog: CatalogSource = Depends(get_catalog_client),
):
    page = await catalog_listing.list_deal_products(catalog, cursor, limit)
    return page.to_response()


@router.get("/categories/{category_id}/products")
async def list_category_products(
    category_id: str,
    cursor: str | None = Query(None, max_length=20),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    catalog: CatalogSource = Depends(get_catalog_client),
):
    page = await catalog_listing.list_category_products(
        catalog, category_id, cursor, limit,
    )
    return page.to_response()


@router.get("/products/{slug}")
async def get_product(
    slug: str,
    catalog: CatalogSource = Depends(get_catalog_client),
    recently_viewed: RecentlyViewedStore | None = Depends(
        get_optional_recently_viewed_store,
    ),
):
    """Product detail; promotes the product in the viewer's history."""
    return await catalog_listing.view_product(catalog, slug, recently_viewed)
