"""Service test fixtures — async DB, fake catalog, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - get_catalog_client overridden with FakeCatalog (no network)
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - FakeCatalog records calls so tests can assert every page refetches the source
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from storefront.api.dependencies import get_catalog_client
from storefront.core.errors import ResourceNotFoundError
from storefront.db.base import Base
from storefront.infrastructure.database import get_db, DatabaseSessionManager
import storefront.infrastructure.database as db_module
import storefront.models  # noqa: F401
from storefront.main import app


def make_products(count: int, **overrides) -> list[dict]:
    return [
        {
            "id": f"p{i}",
            "name": f"Product {i}",
            "slug": f"product-{i}",
            "price": float(i),
            "description": f"Description of product {i}",
            "categoryId": "c1" if i % 2 == 0 else "c2",
            "imageUrl": f"https://img.test/{i}.png",
            "discount": 0,
            **overrides,
        }
        for i in range(count)
    ]


class FakeCatalog:
    """In-memory stand-in for ResilientCatalogClient."""

    def __init__(self):
        self.products: list[dict] = make_products(37)
        self.deals: list[dict] = make_products(9)
        self.categories: dict[str, list[dict]] = {"c1": make_products(12)}
        self.calls: list[str] = []

    async def fetch_products(self) -> list[dict]:
        self.calls.append("products")
        return list(self.products)

    async def fetch_deal_products(self) -> list[dict]:
        self.calls.append("deals")
        return list(self.deals)

    async def fetch_category_products(self, category_id: str) -> list[dict]:
        self.calls.append(f"category:{category_id}")
        if category_id not in self.categories:
            raise ResourceNotFoundError("Category", category_id)
        return list(self.categories[category_id])

    async def fetch_product(self, slug: str) -> dict:
        self.calls.append(f"product:{slug}")
        for product in self.products:
            if product["slug"] == slug:
                return dict(product)
        raise ResourceNotFoundError("Product", slug)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_catalog():
    return FakeCatalog()


@pytest.fixture
async def client(test_engine, test_session_factory, fake_catalog):
    """FastAPI test client with DB and catalog dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog_client] = lambda: fake_catalog

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
