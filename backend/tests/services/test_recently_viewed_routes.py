"""Recently-Viewed Routes — history operations over HTTP."""

HEADERS = {"X-Client-Id": "viewer-1"}


def _product(pid):
    return {"id": pid, "name": f"Product {pid}", "slug": pid, "price": 1.0}


async def test_empty_history(client):
    res = await client.get("/api/v1/recently-viewed", headers=HEADERS)
    assert res.json() == {"items": [], "count": 0}


async def test_add_promotes_repeat(client):
    for pid in ("A", "B", "A"):
        res = await client.post("/api/v1/recently-viewed", json=_product(pid), headers=HEADERS)
        assert res.status_code == 201
    body = res.json()
    assert [i["id"] for i in body["items"]] == ["A", "B"]
    assert body["count"] == 2


async def test_history_capped_at_twenty(client):
    for n in range(1, 26):
        await client.post("/api/v1/recently-viewed", json=_product(f"p{n}"), headers=HEADERS)
    body = (await client.get("/api/v1/recently-viewed", headers=HEADERS)).json()
    assert body["count"] == 20
    assert body["items"][0]["id"] == "p25"


async def test_remove_and_clear(client):
    await client.post("/api/v1/recently-viewed", json=_product("A"), headers=HEADERS)
    await client.post("/api/v1/recently-viewed", json=_product("B"), headers=HEADERS)

    res = await client.delete("/api/v1/recently-viewed/A", headers=HEADERS)
    assert [i["id"] for i in res.json()["items"]] == ["B"]

    res = await client.delete("/api/v1/recently-viewed", headers=HEADERS)
    assert res.json() == {"items": [], "count": 0}


async def test_null_discount_normalized(client):
    res = await client.post(
        "/api/v1/recently-viewed", json={**_product("A"), "discount": None}, headers=HEADERS,
    )
    assert res.json()["items"][0]["discount"] == 0
