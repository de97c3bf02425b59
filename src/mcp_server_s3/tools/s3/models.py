"""
Pydantic input models for the S3 tools.

Field aliases carry the camelCase argument names used on the wire.
"""
from __future__ import annotations

from pydantic import Field

from mcp_server_s3.core.models import BaseToolInput, BucketKeyInput
from mcp_server_s3.storage.adapter import (
    DEFAULT_EXPIRES_IN,
    DEFAULT_MAX_KEYS,
    MAX_EXPIRES_IN,
    MAX_KEYS_LIMIT,
    MIN_EXPIRES_IN,
)


class ListBucketsInput(BaseToolInput):
    """Input for listing buckets (no arguments)."""


class ListObjectsInput(BaseToolInput):
    """Input for listing objects in a bucket."""

    bucket: str = Field(..., description="Bucket name")
    prefix: str | None = Field(
        default=None,
        description="Key prefix (e.g. 'uploads/')"
    )
    max_keys: int = Field(
        default=DEFAULT_MAX_KEYS,
        alias="maxKeys",
        description="Max objects to return",
        ge=1,
        le=MAX_KEYS_LIMIT,
        strict=True,
    )


class GetObjectInput(BucketKeyInput):
    """Input for reading an object."""


class PutObjectInput(BucketKeyInput):
    """Input for uploading text content."""

    content: str = Field(..., description="Content to upload")
    content_type: str | None = Field(
        default=None,
        alias="contentType",
        description="Content-Type header (default: text/plain)"
    )


class DeleteObjectInput(BucketKeyInput):
    """Input for deleting an object."""


class PresignedUrlInput(BucketKeyInput):
    """Input for issuing a presigned GET URL."""

    expires_in: int = Field(
        default=DEFAULT_EXPIRES_IN,
        alias="expiresIn",
        description="URL expiry in seconds (default: 1 hour)",
        ge=MIN_EXPIRES_IN,
        le=MAX_EXPIRES_IN,
        strict=True,
    )


class BucketInfoInput(BaseToolInput):
    """Input for probing a bucket."""

    bucket: str = Field(..., description="Bucket name")
