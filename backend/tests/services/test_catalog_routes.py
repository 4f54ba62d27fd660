"""Catalog Routes — paginated listings and product views against FakeCatalog.

Invariants:
    - Chaining nextCursor walks the full listing; total is constant
    - Every page refetches the source array
    - Malformed cursors are 400 INVALID_CURSOR
    - Viewing a product records it only for identified clients
"""


async def _walk(client, path, **params):
    pages = []
    cursor = None
    while True:
        query = dict(params)
        if cursor:
            query["cursor"] = cursor
        body = (await client.get(path, params=query)).json()
        pages.append(body)
        if not body["hasMore"]:
            return pages
        cursor = body["nextCursor"]


async def test_products_pages_chain_to_completion(client, fake_catalog):
    pages = await _walk(client, "/api/v1/products", limit=10)

    assert [len(p["data"]) for p in pages] == [10, 10, 10, 7]
    assert all(p["total"] == 37 for p in pages)
    assert "nextCursor" not in pages[-1]
    ids = [item["id"] for p in pages for item in p["data"]]
    assert ids == [p["id"] for p in fake_catalog.products]
    assert fake_catalog.calls == ["products"] * 4


async def test_products_default_page_size(client):
    body = (await client.get("/api/v1/products")).json()
    assert len(body["data"]) == 10
    assert body["nextCursor"] == "10"


async def test_products_filter_by_category_and_search(client):
    body = (await client.get(
        "/api/v1/products", params={"categoryId": "c1", "search": "PRODUCT 1"},
    )).json()
    # c1 holds even ids; "product 1" matches 1, 10-19 -> evens 10..18
    assert [p["id"] for p in body["data"]] == ["p10", "p12", "p14", "p16", "p18"]
    assert body["total"] == 5
    assert body["hasMore"] is False


async def test_malformed_cursor_is_400(client):
    res = await client.get("/api/v1/products", params={"cursor": "abc"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_CURSOR"


async def test_limit_out_of_range_is_400(client):
    res = await client.get("/api/v1/products", params={"limit": 0})
    assert res.status_code == 400


async def test_cursor_past_end_is_empty_page(client):
    body = (await client.get("/api/v1/products", params={"cursor": "500"})).json()
    assert body == {"data": [], "hasMore": False, "total": 37}


async def test_deals_default_page_size_is_four(client):
    pages = await _walk(client, "/api/v1/products/deals")
    assert [len(p["data"]) for p in pages] == [4, 4, 1]


async def test_category_products(client):
    body = (await client.get(
        "/api/v1/categories/c1/products", params={"limit": 5, "cursor": "10"},
    )).json()
    assert len(body["data"]) == 2
    assert body["total"] == 12
    assert body["hasMore"] is False


async def test_unknown_category_is_404(client):
    res = await client.get("/api/v1/categories/nope/products")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_product_detail_records_view(client):
    headers = {"X-Client-Id": "viewer-9"}
    res = await client.get("/api/v1/products/product-3", headers=headers)
    assert res.status_code == 200
    assert res.json()["id"] == "p3"

    await client.get("/api/v1/products/product-5", headers=headers)
    await client.get("/api/v1/products/product-3", headers=headers)

    history = (await client.get("/api/v1/recently-viewed", headers=headers)).json()
    assert [i["id"] for i in history["items"]] == ["p3", "p5"]
    assert set(history["items"][0]) == {"id", "name", "slug", "imageUrl", "price", "discount"}


async def test_anonymous_product_view_records_nothing(client):
    res = await client.get("/api/v1/products/product-3")
    assert res.status_code == 200
    history = (await client.get(
        "/api/v1/recently-viewed", headers={"X-Client-Id": "viewer-9"},
    )).json()
    assert history["count"] == 0


async def test_unknown_product_is_404(client):
    res = await client.get(
        "/api/v1/products/missing", headers={"X-Client-Id": "viewer-9"},
    )
    assert res.status_code == 404


async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.json()["status"] == "healthy"


async def test_readiness_uses_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_non_string_catalog_id_keeps_existing_history(client, fake_catalog):
    headers = {"X-Client-Id": "viewer-9"}
    await client.post(
        "/api/v1/recently-viewed",
        json={"id": "keep", "name": "Keep", "slug": "keep", "price": 1.0},
        headers=headers,
    )
    fake_catalog.products[0]["id"] = 12345

    res = await client.get("/api/v1/products/product-0", headers=headers)
    assert res.status_code == 200

    history = (await client.get("/api/v1/recently-viewed", headers=headers)).json()
    assert [i["id"] for i in history["items"]] == ["keep"]
