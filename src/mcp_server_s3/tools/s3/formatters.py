"""
S3 result formatters.

The exact wording of these messages is part of the tool contract.
"""
from __future__ import annotations

from mcp_server_s3.core.formatters import Formatter
from mcp_server_s3.storage.models import BucketRecord, BucketStatus, ObjectEntry


class S3Formatter(Formatter):
    """Text renderings for each S3 tool."""

    @staticmethod
    def buckets(buckets: list[BucketRecord]) -> str:
        lines = []
        for bucket in buckets:
            created = ""
            if bucket.creation_date is not None:
                created = f" (created: {Formatter.format_timestamp(bucket.creation_date)})"
            lines.append(f"  • {bucket.name}{created}")

        body = Formatter.bullet_lines(lines, "No buckets found.")
        return f"Buckets ({len(buckets)}):\n\n{body}"

    @staticmethod
    def objects(bucket: str, prefix: str | None, max_keys: int, items: list[ObjectEntry]) -> str:
        lines = []
        for item in items:
            if item.is_prefix:
                lines.append(f"  📁 {item.key}")
                continue
            size = f" ({item.size} B)" if item.size is not None else ""
            modified = ""
            if item.last_modified is not None:
                modified = f" — {Formatter.format_timestamp(item.last_modified)}"
            lines.append(f"  📄 {item.key}{size}{modified}")

        header = f"Objects in {Formatter.s3_uri(bucket, prefix or '')} (max {max_keys}):\n\n"
        return header + Formatter.bullet_lines(lines, "No objects found.")

    @staticmethod
    def content(bucket: str, key: str, content: str) -> str:
        return f"Content of {Formatter.s3_uri(bucket, key)}:\n\n{content}"

    @staticmethod
    def uploaded(bucket: str, key: str, content: str) -> str:
        # Reports the length of the text as given, not the encoded byte count
        return f"✅ Uploaded {len(content)} bytes to {Formatter.s3_uri(bucket, key)}"

    @staticmethod
    def deleted(bucket: str, key: str) -> str:
        return f"✅ Deleted {Formatter.s3_uri(bucket, key)}"

    @staticmethod
    def presigned_url(bucket: str, key: str, expires_in: int, url: str) -> str:
        hours = Formatter.round_hours(expires_in)
        return f"Presigned URL for {Formatter.s3_uri(bucket, key)} (valid ~{hours}h):\n\n{url}"

    @staticmethod
    def bucket_status(status: BucketStatus) -> str:
        state = "✅ Exists" if status.exists else "❌ Not found / no access"
        region = f"\nRegion: {status.region}" if status.region else ""
        return f"Bucket: {status.name}\n{state}{region}"
