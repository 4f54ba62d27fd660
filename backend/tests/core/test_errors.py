"""Error Hierarchy — status codes, codes and the REST error envelope."""

from storefront.core.errors import (
    CatalogAPIError, ErrorContext, InvalidCursorError, ResourceNotFoundError,
    SnapshotCorruptedError, StorefrontError,
)


def test_invalid_cursor_is_400():
    err = InvalidCursorError("abc")
    assert isinstance(err, StorefrontError)
    assert err.http_status == 400
    assert err.code == "INVALID_CURSOR"
    assert "'abc'" in err.message


def test_not_found_is_404():
    err = ResourceNotFoundError("Product", "lamp")
    assert err.http_status == 404
    assert err.message == "Product 'lamp' not found"


def test_snapshot_corrupted_keeps_reason():
    err = SnapshotCorruptedError("items is not a list")
    assert err.reason == "items is not a list"
    assert err.severity.value == "warning"


def test_to_response_envelope():
    body = CatalogAPIError("boom", "connection_error").to_response()["error"]
    assert body["code"] == "CATALOG_API_ERROR"
    assert body["category"] == "external_api"
    assert body["severity"] == "critical"
    assert "timestamp" in body


def test_user_message_overrides_message():
    ctx = ErrorContext(client_id="c1", user_message="Try again later")
    body = CatalogAPIError("boom", "timeout", context=ctx).to_response()["error"]
    assert body["message"] == "Try again later"
    assert body["context"]["client_id"] == "c1"
