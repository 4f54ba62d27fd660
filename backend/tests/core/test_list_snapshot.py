"""List Snapshot — tests for the durable JSON form and corruption detection.

Invariants:
    - {"items": [...]} is the only accepted shape
    - None (never written) is an empty list, not an error
    - Every malformed shape raises SnapshotCorruptedError
"""

import json

import pytest

from storefront.core.cart import validate_cart_entry
from storefront.core.errors import SnapshotCorruptedError
from storefront.core.list_snapshot import items_from_snapshot, items_to_snapshot


def test_snapshot_shape():
    raw = items_to_snapshot([{"id": "a", "price": 1.0, "quantity": 2}])
    assert json.loads(raw) == {"items": [{"id": "a", "price": 1.0, "quantity": 2}]}


def test_restores_written_items():
    items = [{"id": "a", "name": "Ünïcode", "price": 1.0, "quantity": 2}]
    assert items_from_snapshot(items_to_snapshot(items), validate_cart_entry) == items


def test_missing_snapshot_is_empty():
    assert items_from_snapshot(None) == []


@pytest.mark.parametrize("raw", [
    "not json",
    "",
    "[]",
    '"items"',
    '{"state": {"items": []}}',
    '{"items": {"id": "a"}}',
    '{"items": ["a"]}',
    '{"items": [{"name": "no id"}]}',
    '{"items": [{"id": 7}]}',
    '{"items": [{"id": ""}]}',
    '{"items": [{"id": "a"}, {"id": "a"}]}',
])
def test_corrupted_shapes_rejected(raw):
    with pytest.raises(SnapshotCorruptedError):
        items_from_snapshot(raw)


def test_variant_validator_applied():
    raw = items_to_snapshot([{"id": "a", "price": 1.0, "quantity": 0}])
    assert items_from_snapshot(raw) == [{"id": "a", "price": 1.0, "quantity": 0}]
    with pytest.raises(SnapshotCorruptedError) as exc:
        items_from_snapshot(raw, validate_cart_entry)
    assert "quantity" in exc.value.reason
