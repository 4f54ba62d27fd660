"""Storefront API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StorefrontError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and catalog client initialized on startup, released on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.error_handlers import register_error_handlers
from storefront.infrastructure.catalog_client import ResilientCatalogClient
from storefront.infrastructure.database import close_db, init_db
from storefront.infrastructure.observability import setup_logging
from storefront.config import get_settings
from storefront.api.routes import cart, catalog, health, recently_viewed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.catalog_client = ResilientCatalogClient(
        settings.catalog_api_url,
        max_retries=settings.catalog_max_retries,
        base_delay_ms=settings.catalog_base_delay_ms,
        max_delay_ms=settings.catalog_max_delay_ms,
        timeout_seconds=settings.catalog_timeout_seconds,
    )
    logger.info("Storefront API started")
    yield
    await app.state.catalog_client.aclose()
    await close_db()
    logger.info("Storefront API shutting down")


app = FastAPI(
    title="Storefront API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(cart.router)
app.include_router(recently_viewed.router)
app.include_router(catalog.router)

register_error_handlers(app)
