"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so metadata is complete before create_all/autogenerate
"""

from storefront.models.storage_entry import StorageEntry  # noqa: F401
