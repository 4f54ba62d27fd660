"""Storage Entry ORM — one durable key-value blob per (client namespace, storage key).

Invariants:
    - (namespace, key) is the primary key: one blob per client per list
    - value holds the serialized list snapshot as-is (never parsed by the DB layer)
    - updated_at moves forward on every write

Design Decisions:
    - Text column over JSON: the blob contract is string-in, string-out, and
      corrupted values must survive storage so rehydration can detect them
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base


class StorageEntry(Base):
    """Durable blob owned by one client namespace."""
    __tablename__ = "storage_entries"

    namespace: Mapped[str] = mapped_column(String(64), primary_key=True)
    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
