"""
Value records returned by the storage adapter.

All records are immutable and carry no identity beyond their fields.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BucketRecord(BaseModel):
    """One bucket from a bucket listing."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Bucket name")
    creation_date: datetime | None = Field(default=None, description="Creation time")


class ObjectEntry(BaseModel):
    """A leaf object, or a common prefix produced by delimiter grouping."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Object key or common prefix")
    size: int | None = Field(default=None, description="Size in bytes")
    last_modified: datetime | None = Field(default=None, description="Last modification time")
    is_prefix: bool = Field(default=False, description="True for a delimiter 'folder'")

    @model_validator(mode="after")
    def prefixes_have_no_metadata(self) -> ObjectEntry:
        if self.is_prefix and (self.size is not None or self.last_modified is not None):
            raise ValueError("prefix entries carry neither size nor last_modified")
        return self


class BucketStatus(BaseModel):
    """Result of a bucket existence probe."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Bucket name")
    exists: bool = Field(description="Whether the bucket is reachable")
    region: str | None = Field(default=None, description="Region, only when the bucket exists")

    @model_validator(mode="after")
    def region_only_when_exists(self) -> BucketStatus:
        if not self.exists and self.region is not None:
            raise ValueError("region is only reported for existing buckets")
        return self
