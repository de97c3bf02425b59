"""
Storage adapter: S3 operations and the records they return.
"""

from .adapter import S3Storage
from .models import BucketRecord, BucketStatus, ObjectEntry

__all__ = [
    "S3Storage",
    "BucketRecord",
    "BucketStatus",
    "ObjectEntry",
]
