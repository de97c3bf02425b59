"""
Pytest configuration and shared fixtures for S3 MCP Server tests.
"""
from __future__ import annotations

import io
import os
from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock

import pytest

from mcp_server_s3.config import S3Config, reset_config
from mcp_server_s3.core.client import S3ClientManager, reset_client_manager
from mcp_server_s3.storage import S3Storage

# Ensure test environment
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")

TEST_REGION = "us-east-1"


@pytest.fixture(autouse=True)
def _reset_globals():
    """Reset global config and client manager between tests."""
    reset_config()
    reset_client_manager()
    yield
    reset_config()
    reset_client_manager()


@pytest.fixture
def mock_s3_client() -> MagicMock:
    """Mock boto3 S3 client."""
    client = MagicMock()
    client.list_buckets.return_value = {"Buckets": []}
    client.list_objects_v2.return_value = {"Contents": [], "CommonPrefixes": []}
    client.put_object.return_value = {}
    client.delete_object.return_value = {}
    client.head_bucket.return_value = {}
    client.generate_presigned_url.return_value = "https://mock-presigned-url.example/"
    return client


@pytest.fixture
def client_manager(mock_s3_client: MagicMock) -> S3ClientManager:
    """Client manager that hands out the mock client."""
    return S3ClientManager(
        S3Config(region=TEST_REGION),
        client_factory=lambda *args, **kwargs: mock_s3_client,
    )


@pytest.fixture
def storage(client_manager: S3ClientManager) -> S3Storage:
    """Adapter backed by the mock client."""
    return S3Storage(client_manager)


@pytest.fixture
def mock_listing() -> dict[str, Any]:
    """Mock list_objects_v2 response with two objects and one prefix."""
    return {
        "Contents": [
            {
                "Key": "file1.txt",
                "Size": 100,
                "LastModified": datetime(2024, 1, 1, tzinfo=timezone.utc),
            },
            {"Key": "file2.txt", "Size": 200},
        ],
        "CommonPrefixes": [{"Prefix": "uploads/"}],
    }


@pytest.fixture
def make_body():
    """Build streaming body stand-ins for get_object responses."""
    def _make(data: str | bytes) -> io.BytesIO:
        if isinstance(data, str):
            data = data.encode("utf-8")
        return io.BytesIO(data)
    return _make


# Markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Tests against a simulated S3 (moto)")


# Collection hooks
def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "moto" in item.name or "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
