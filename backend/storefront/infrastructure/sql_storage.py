"""SQL Durable Storage — DurableStorage backed by the storage_entries table.

Invariants:
    - Scoped to one namespace (client id): never reads or writes another client's rows
    - write() replaces the value and commits immediately (last writer wins)
    - Concurrent first writes for the same key never conflict on the primary key
    - read() of an unknown key returns None

Design Decisions:
    - Session injected by the caller (FastAPI get_db): rollback/close owned by
      DatabaseSessionManager, not by this adapter
    - Single INSERT ... ON CONFLICT DO UPDATE: PostgreSQL in production, SQLite in tests
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import ClientId
from storefront.models.storage_entry import StorageEntry

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class SqlDurableStorage:
    """Per-client key-value blobs in the relational database."""

    def __init__(self, db: AsyncSession, namespace: ClientId):
        self._db = db
        self._namespace = namespace

    async def read(self, key: str) -> str | None:
        result = await self._db.execute(
            select(StorageEntry.value).where(
                StorageEntry.namespace == self._namespace,
                StorageEntry.key == key,
            ),
        )
        return result.scalar_one_or_none()

    async def write(self, key: str, value: str) -> None:
        insert = _UPSERT_INSERTS[self._db.get_bind().dialect.name]
        stmt = insert(StorageEntry).values(
            namespace=self._namespace,
            key=key,
            value=value,
            updated_at=datetime.now(timezone.utc),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[StorageEntry.namespace, StorageEntry.key],
            set_={
                "value": stmt.excluded.value,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self._db.execute(stmt)
        await self._db.commit()
        logger.debug(
            "Persisted storage entry",
            extra={"client_id": self._namespace, "storage_key": key},
        )
