"""
Text formatting helpers shared by the tool formatters.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone


class Formatter:
    """Base formatter with common utilities."""

    @staticmethod
    def format_timestamp(dt: datetime) -> str:
        """Format a datetime as UTC ISO-8601 with milliseconds and a 'Z' suffix.

        Naive datetimes are taken to be UTC.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(timezone.utc)
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"

    @staticmethod
    def s3_uri(bucket: str, key: str = "") -> str:
        """Build an s3:// URI for display."""
        return f"s3://{bucket}/{key}"

    @staticmethod
    def round_hours(seconds: int) -> int:
        """Round a duration in seconds to the nearest whole hour, halves up."""
        return math.floor(seconds / 3600 + 0.5)

    @staticmethod
    def bullet_lines(lines: list[str], empty: str) -> str:
        """Join pre-rendered lines, or return the empty-state message."""
        if not lines:
            return empty
        return "\n".join(lines)
