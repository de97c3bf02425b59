"""
Tests for core formatters module.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from mcp_server_s3.core.formatters import Formatter


class TestFormatTimestamp:
    """Tests for Formatter.format_timestamp."""

    def test_utc_with_milliseconds(self):
        dt = datetime(2024, 1, 15, 10, 30, 45, 123456, tzinfo=timezone.utc)
        assert Formatter.format_timestamp(dt) == "2024-01-15T10:30:45.123Z"

    def test_whole_seconds(self):
        dt = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert Formatter.format_timestamp(dt) == "2024-01-01T00:00:00.000Z"

    def test_naive_is_utc(self):
        assert Formatter.format_timestamp(datetime(2024, 3, 1, 8, 0)) == "2024-03-01T08:00:00.000Z"

    def test_converts_offsets_to_utc(self):
        tz = timezone(timedelta(hours=2))
        dt = datetime(2024, 6, 1, 12, 0, tzinfo=tz)
        assert Formatter.format_timestamp(dt) == "2024-06-01T10:00:00.000Z"


class TestS3Uri:
    def test_bucket_and_key(self):
        assert Formatter.s3_uri("b", "path/k.txt") == "s3://b/path/k.txt"

    def test_bucket_only(self):
        assert Formatter.s3_uri("b") == "s3://b/"


class TestRoundHours:
    @pytest.mark.parametrize(
        "seconds,hours",
        [
            (60, 0),
            (1799, 0),
            (1800, 1),
            (3600, 1),
            (5400, 2),
            (7200, 2),
            (9000, 3),
            (604800, 168),
        ],
    )
    def test_rounding(self, seconds, hours):
        assert Formatter.round_hours(seconds) == hours


class TestBulletLines:
    def test_empty(self):
        assert Formatter.bullet_lines([], "Nothing.") == "Nothing."

    def test_joined(self):
        assert Formatter.bullet_lines(["  • a", "  • b"], "x") == "  • a\n  • b"
