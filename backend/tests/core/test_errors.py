"""Error hierarchy — codes, HTTP statuses and the REST envelope."""

from wiccapedia.core.errors import (
    AssetMissingError,
    AssetUnreadableError,
    ConstraintViolationError,
    ErrorCategory,
    ErrorSeverity,
    ResourceNotFoundError,
    StorageError,
    WiccapediaError,
)


def test_all_errors_share_base():
    for exc in (
        ResourceNotFoundError("User", "1"),
        ConstraintViolationError("bad"),
        AssetMissingError("Default cover animation", "/nope"),
        StorageError("down", "insert"),
        AssetUnreadableError("Default cover animation", "/nope"),
    ):
        assert isinstance(exc, WiccapediaError)


def test_not_found_is_404_and_carries_entity():
    exc = ResourceNotFoundError("Cover", "7")
    assert exc.http_status == 404
    assert exc.message == "Cover '7' not found"
    assert exc.context.entity == "Cover"
    assert exc.context.entity_id == "7"


def test_constraint_violation_is_client_error():
    exc = ConstraintViolationError("dup", constraint="unique")
    assert exc.http_status == 409
    assert exc.category == ErrorCategory.CONFLICT
    assert exc.constraint == "unique"


def test_storage_error_is_critical_server_error():
    exc = StorageError("Connection refused", "select")
    assert exc.http_status == 503
    assert exc.severity == ErrorSeverity.CRITICAL
    assert exc.message == "Database select failed: Connection refused"


def test_asset_missing_hides_server_path_from_message():
    exc = AssetMissingError("Default cover animation", "/srv/lottie/x.json")
    assert exc.http_status == 404
    assert "/srv" not in exc.message
    assert exc.path == "/srv/lottie/x.json"


def test_to_response_envelope_shape():
    body = ResourceNotFoundError("User", "9").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "warning"
    assert error["context"] == {"entity": "User", "entity_id": "9"}
    assert "timestamp" in error


def test_asset_unreadable_is_internal_server_error():
    exc = AssetUnreadableError("Default cover animation", "/srv/lottie/x.json")
    assert exc.http_status == 500
    assert exc.code == "ASSET_UNREADABLE"
    assert exc.category == ErrorCategory.INTERNAL
    assert "/srv" not in exc.message
