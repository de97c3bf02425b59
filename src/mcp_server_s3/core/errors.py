"""
Error handling for S3 MCP operations.

Every failure that reaches a tool boundary is classified into a
``StorageError`` carrying a category and the provider's human-readable
message. The suggestion and details are written to the error log; only
the message reaches the client.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
    ProfileNotFound,
)
from pydantic import ValidationError


class ErrorCategory(str, Enum):
    """Error categories for user-friendly messaging."""
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    SERVICE = "service"
    NETWORK = "network"
    MISSING_BODY = "missing_body"
    UNKNOWN = "unknown"


class StorageError(Exception):
    """A classified storage failure with an actionable suggestion."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        suggestion: str = "",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.suggestion = suggestion
        self.details = details or {}


class MissingBodyError(StorageError):
    """Raised when a read returns no content stream."""

    def __init__(self, key: str):
        super().__init__(
            f"Object {key} has no body",
            category=ErrorCategory.MISSING_BODY,
            suggestion="The provider returned no content; the object may be empty or archived.",
            details={"key": key},
        )


# Error code -> category for S3 service errors
ERROR_CODE_MAP: dict[str, ErrorCategory] = {
    "NoSuchBucket": ErrorCategory.NOT_FOUND,
    "NoSuchKey": ErrorCategory.NOT_FOUND,
    "NotFound": ErrorCategory.NOT_FOUND,
    "404": ErrorCategory.NOT_FOUND,
    "AccessDenied": ErrorCategory.AUTHORIZATION,
    "AllAccessDisabled": ErrorCategory.AUTHORIZATION,
    "403": ErrorCategory.AUTHORIZATION,
    "InvalidAccessKeyId": ErrorCategory.AUTHENTICATION,
    "SignatureDoesNotMatch": ErrorCategory.AUTHENTICATION,
    "ExpiredToken": ErrorCategory.AUTHENTICATION,
    "InvalidToken": ErrorCategory.AUTHENTICATION,
    "SlowDown": ErrorCategory.RATE_LIMIT,
    "Throttling": ErrorCategory.RATE_LIMIT,
    "RequestLimitExceeded": ErrorCategory.RATE_LIMIT,
    "InvalidBucketName": ErrorCategory.VALIDATION,
    "InvalidArgument": ErrorCategory.VALIDATION,
    "KeyTooLongError": ErrorCategory.VALIDATION,
}

# HTTP status -> category when the error code is not recognised
STATUS_MAP: dict[int, ErrorCategory] = {
    400: ErrorCategory.VALIDATION,
    401: ErrorCategory.AUTHENTICATION,
    403: ErrorCategory.AUTHORIZATION,
    404: ErrorCategory.NOT_FOUND,
    429: ErrorCategory.RATE_LIMIT,
    500: ErrorCategory.SERVICE,
    503: ErrorCategory.SERVICE,
}

SUGGESTIONS: dict[ErrorCategory, str] = {
    ErrorCategory.AUTHENTICATION: "Verify your AWS credentials (environment, shared credentials file or role).",
    ErrorCategory.AUTHORIZATION: "Ensure your IAM policy grants the required s3: action on this bucket/key.",
    ErrorCategory.NOT_FOUND: "Verify the bucket name and key exist in the configured region.",
    ErrorCategory.RATE_LIMIT: "Reduce request frequency and retry later.",
    ErrorCategory.VALIDATION: "Check the input parameters match the expected format and constraints.",
    ErrorCategory.SERVICE: "This is a provider-side issue. Retry later.",
    ErrorCategory.NETWORK: "Check network connectivity and the S3 endpoint configuration.",
    ErrorCategory.UNKNOWN: "Check the error details. If the issue persists, report it.",
}


def _classify_client_error(e: ClientError) -> tuple[ErrorCategory, str, dict[str, Any]]:
    error = e.response.get("Error", {}) or {}
    metadata = e.response.get("ResponseMetadata", {}) or {}
    code = str(error.get("Code", ""))
    status = metadata.get("HTTPStatusCode")

    category = ERROR_CODE_MAP.get(code)
    if category is None:
        category = STATUS_MAP.get(status, ErrorCategory.SERVICE)

    message = error.get("Message") or str(e)
    details = {
        "code": code or None,
        "status": status,
        "operation": getattr(e, "operation_name", None),
        "request_id": metadata.get("RequestId"),
    }
    return category, message, details


def handle_storage_error(e: Exception, context: str | None = None) -> StorageError:
    """
    Convert any exception raised while serving a tool into a StorageError.

    Args:
        e: The exception to handle
        context: Optional description of the operation being performed

    Returns:
        StorageError whose message is the provider's human message
    """
    if isinstance(e, StorageError):
        return e

    details: dict[str, Any] = {"context": context} if context else {}

    if isinstance(e, ClientError):
        category, message, extra = _classify_client_error(e)
        details.update(extra)
    elif isinstance(e, (NoCredentialsError, PartialCredentialsError, ProfileNotFound)):
        category, message = ErrorCategory.AUTHENTICATION, str(e)
    elif isinstance(e, BotoCoreError):
        category, message = ErrorCategory.NETWORK, str(e)
    elif isinstance(e, (ValidationError, ValueError)):
        category, message = ErrorCategory.VALIDATION, str(e)
    else:
        category, message = ErrorCategory.UNKNOWN, str(e)

    return StorageError(
        message,
        category=category,
        suggestion=SUGGESTIONS.get(category, SUGGESTIONS[ErrorCategory.UNKNOWN]),
        details=details,
    )
