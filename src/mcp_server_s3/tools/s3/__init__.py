"""
S3 domain tools.

Provides bucket and object listing, text read/write, deletion,
presigned URL issuance and bucket existence checks.
"""
from __future__ import annotations

from .formatters import S3Formatter
from .models import (
    BucketInfoInput,
    DeleteObjectInput,
    GetObjectInput,
    ListBucketsInput,
    ListObjectsInput,
    PresignedUrlInput,
    PutObjectInput,
)
from .tools import register_s3_tools

__all__ = [
    # Registration function
    "register_s3_tools",

    # Input models
    "ListBucketsInput",
    "ListObjectsInput",
    "GetObjectInput",
    "PutObjectInput",
    "DeleteObjectInput",
    "PresignedUrlInput",
    "BucketInfoInput",

    # Formatter
    "S3Formatter",
]
