"""
Tests for core errors module.
"""
from __future__ import annotations

import pytest
from botocore.exceptions import (
    ClientError,
    EndpointConnectionError,
    NoCredentialsError,
)

from mcp_server_s3.core.errors import (
    SUGGESTIONS,
    ErrorCategory,
    MissingBodyError,
    StorageError,
    handle_storage_error,
)


def make_client_error(
    code: str,
    message: str | None = None,
    status: int = 400,
    operation: str = "GetObject",
) -> ClientError:
    error = {"Code": code}
    if message is not None:
        error["Message"] = message
    return ClientError(
        {
            "Error": error,
            "ResponseMetadata": {"HTTPStatusCode": status, "RequestId": "req-123"},
        },
        operation,
    )


class TestErrorCategory:
    """Tests for ErrorCategory enum."""

    def test_all_categories_exist(self):
        expected = [
            "AUTHENTICATION",
            "AUTHORIZATION",
            "NOT_FOUND",
            "RATE_LIMIT",
            "VALIDATION",
            "SERVICE",
            "NETWORK",
            "MISSING_BODY",
            "UNKNOWN",
        ]
        for cat in expected:
            assert hasattr(ErrorCategory, cat)

    def test_category_values(self):
        assert ErrorCategory.NOT_FOUND.value == "not_found"
        assert ErrorCategory.MISSING_BODY.value == "missing_body"


class TestStorageError:
    """Tests for StorageError."""

    def test_basic_creation(self):
        error = StorageError("boom")

        assert str(error) == "boom"
        assert error.category == ErrorCategory.UNKNOWN
        assert error.details == {}

    def test_missing_body_message(self):
        error = MissingBodyError("docs/a.txt")

        assert isinstance(error, StorageError)
        assert error.category == ErrorCategory.MISSING_BODY
        assert str(error) == "Object docs/a.txt has no body"


class TestHandleStorageError:
    """Tests for handle_storage_error."""

    def test_storage_error_passes_through(self):
        original = MissingBodyError("k")
        assert handle_storage_error(original) is original

    def test_client_error_uses_provider_message(self):
        e = make_client_error("NoSuchKey", "The specified key does not exist.", 404)

        error = handle_storage_error(e, "get_object")

        assert error.message == "The specified key does not exist."
        assert error.category == ErrorCategory.NOT_FOUND
        assert error.details["code"] == "NoSuchKey"
        assert error.details["status"] == 404
        assert error.details["request_id"] == "req-123"
        assert error.details["context"] == "get_object"

    def test_client_error_without_message_falls_back_to_str(self):
        e = make_client_error("InternalError", None, 500)

        error = handle_storage_error(e)

        assert "InternalError" in error.message
        assert error.category == ErrorCategory.SERVICE

    @pytest.mark.parametrize(
        "code,status,category",
        [
            ("AccessDenied", 403, ErrorCategory.AUTHORIZATION),
            ("InvalidAccessKeyId", 403, ErrorCategory.AUTHENTICATION),
            ("SlowDown", 503, ErrorCategory.RATE_LIMIT),
            ("InvalidBucketName", 400, ErrorCategory.VALIDATION),
            ("SomethingNew", 404, ErrorCategory.NOT_FOUND),
            ("SomethingNew", 418, ErrorCategory.SERVICE),
        ],
    )
    def test_client_error_categories(self, code, status, category):
        error = handle_storage_error(make_client_error(code, "msg", status))
        assert error.category == category

    def test_no_credentials(self):
        error = handle_storage_error(NoCredentialsError())

        assert error.category == ErrorCategory.AUTHENTICATION
        assert "credentials" in error.message.lower()

    def test_endpoint_connection(self):
        error = handle_storage_error(
            EndpointConnectionError(endpoint_url="https://s3.example.invalid")
        )
        assert error.category == ErrorCategory.NETWORK
        assert "s3.example.invalid" in error.message

    def test_value_error_is_validation(self):
        error = handle_storage_error(ValueError("max_keys must be between 1 and 1000"))

        assert error.category == ErrorCategory.VALIDATION
        assert error.message == "max_keys must be between 1 and 1000"

    def test_generic_exception(self):
        error = handle_storage_error(RuntimeError("kaboom"))

        assert error.category == ErrorCategory.UNKNOWN
        assert error.message == "kaboom"
        assert error.suggestion

    def test_suggestion_follows_category(self):
        error = handle_storage_error(make_client_error("AccessDenied", "Access Denied", 403))

        assert error.suggestion == SUGGESTIONS[ErrorCategory.AUTHORIZATION]
