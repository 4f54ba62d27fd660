"""Resilient Catalog Client — wraps httpx.AsyncClient with retry, backoff, and error mapping.

Invariants:
    - Rate limits (429): exponential backoff with jitter, respects Retry-After header
    - Transient errors (5xx, connection, timeout): max_retries retries with backoff
    - 404: immediate ResourceNotFoundError, no retry
    - Other 4xx and malformed payloads: immediate CatalogAPIError, no retry
    - List endpoints always return a list; the detail endpoint always returns a dict

Design Decisions:
    - The catalog has no server-side pagination: list endpoints return the whole
      array and callers paginate it with core.pagination
    - transport injectable: tests drive the client with httpx.MockTransport
    - ±25% jitter on backoff: prevents thundering herd after a catalog outage
"""

import asyncio
import logging
import random

import httpx

from storefront.core.errors import CatalogAPIError, ErrorContext, ResourceNotFoundError

logger = logging.getLogger(__name__)

_TOO_MANY_REQUESTS = 429


class ResilientCatalogClient:
    """Read-only client for the remote catalog REST API."""

    def __init__(
        self,
        base_url: str,
        max_retries: int = 3,
        base_delay_ms: int = 200,
        max_delay_ms: int = 5_000,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms

    async def aclose(self) -> None:
        await self.client.aclose()

    # --- Endpoints -------------------------------------------------------------

    async def fetch_products(self) -> list[dict]:
        return await self._get_list("/api/products")

    async def fetch_deal_products(self) -> list[dict]:
        return await self._get_list("/api/product-deals/all")

    async def fetch_category_products(self, category_id: str) -> list[dict]:
        return await self._get_list(
            f"/api/category/{category_id}", resource=("Category", category_id),
        )

    async def fetch_product(self, slug: str) -> dict:
        payload = await self._get_json(
            f"/api/products/product/{slug}", resource=("Product", slug),
        )
        if not isinstance(payload, dict):
            raise CatalogAPIError(
                "Expected a product object", "unexpected_payload",
            )
        return payload

    # --- Transport -------------------------------------------------------------

    async def _get_list(
        self, path: str, resource: tuple[str, str] | None = None,
    ) -> list[dict]:
        payload = await self._get_json(path, resource=resource)
        if not isinstance(payload, list):
            raise CatalogAPIError(
                f"Expected a JSON array from {path}", "unexpected_payload",
            )
        return payload

    async def _get_json(
        self, path: str, resource: tuple[str, str] | None = None,
    ):
        """GET path with automatic retry on transient failures."""
        context = ErrorContext(debug_info={"path": path})
        for attempt in range(self.max_retries + 1):
            try:
                response = await self.client.get(path)
            except (httpx.TimeoutException, httpx.TransportError) as e:
                await self._handle_transient_error(e, attempt, context)
                continue

            if response.status_code == _TOO_MANY_REQUESTS:
                await self._handle_rate_limit(response, attempt, context)
                continue
            if response.status_code >= 500:
                await self._handle_transient_error(
                    CatalogAPIError(
                        f"HTTP {response.status_code}", "server_error",
                        status_code=response.status_code,
                    ),
                    attempt, context,
                )
                continue
            if response.status_code == 404 and resource:
                raise ResourceNotFoundError(*resource, context=context)
            if response.status_code >= 400:
                raise CatalogAPIError(
                    f"GET {path} returned HTTP {response.status_code}",
                    "client_error",
                    status_code=response.status_code,
                    context=context,
                )

            self._log_success(response, attempt)
            try:
                return response.json()
            except ValueError as e:
                raise CatalogAPIError(
                    f"Invalid JSON from {path}: {e}", "unexpected_payload",
                    context=context,
                )
        # Unreachable: the final attempt raises from a handler
        raise CatalogAPIError("Retries exhausted", "connection_error", context=context)

    def _log_success(self, response: httpx.Response, attempt: int) -> None:
        logger.info(
            "Catalog API success",
            extra={
                "attempt": attempt + 1,
                "url": str(response.request.url),
                "status_code": response.status_code,
            },
        )

    async def _handle_rate_limit(
        self, response: httpx.Response, attempt: int, context: ErrorContext | None,
    ) -> None:
        """Handle rate limit response with retry or raise."""
        retry_after_ms = self._extract_retry_after(response)
        if attempt >= self.max_retries:
            ctx = context or ErrorContext()
            ctx.retry_after_ms = retry_after_ms
            raise CatalogAPIError(
                "Rate limit exceeded after retries",
                "rate_limit",
                status_code=_TOO_MANY_REQUESTS,
                context=ctx,
            )
        delay = retry_after_ms or self._backoff(attempt)
        logger.warning(
            f"Catalog rate limit hit, retry after {delay}ms (attempt {attempt + 1})",
        )
        await asyncio.sleep(delay / 1000)

    async def _handle_transient_error(
        self, e: Exception, attempt: int, context: ErrorContext | None,
    ) -> None:
        """Handle transient errors with retry or raise."""
        if attempt >= self.max_retries:
            raise CatalogAPIError(
                f"Transient failure after {self.max_retries} retries: {e}",
                "connection_error",
                status_code=getattr(e, "status_code", None),
                context=context,
            )
        delay = self._backoff(attempt)
        logger.warning(f"Catalog transient error, retry after {delay}ms: {e}")
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311

    def _extract_retry_after(self, response: httpx.Response) -> int | None:
        """Extract Retry-After header in milliseconds (seconds form only)."""
        val = response.headers.get("retry-after")
        if val and val.isdigit():
            return int(val) * 1000
        return None
