"""
S3 client manager.

Builds the boto3 S3 client from the startup configuration and caches it
for reuse across tool calls. Credential resolution is left entirely to
boto3 (environment, shared credentials file, instance/task roles).

Environment Variables (read through ``AppConfig``):
- AWS_REGION: Storage region (default: us-east-1)
- AWS_PROFILE: Shared credentials profile
- S3_ENDPOINT_URL: Custom endpoint for S3-compatible providers
"""
from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Protocol

import boto3
from botocore.config import Config

from mcp_server_s3.config import S3Config

from .observability import get_logger


class StorageProvider(Protocol):
    """The subset of the S3 client API the adapter relies on."""

    def list_buckets(self, **kwargs: Any) -> dict[str, Any]: ...

    def list_objects_v2(self, **kwargs: Any) -> dict[str, Any]: ...

    def get_object(self, **kwargs: Any) -> dict[str, Any]: ...

    def put_object(self, **kwargs: Any) -> dict[str, Any]: ...

    def delete_object(self, **kwargs: Any) -> dict[str, Any]: ...

    def head_bucket(self, **kwargs: Any) -> dict[str, Any]: ...

    def generate_presigned_url(
        self, ClientMethod: str, Params: dict[str, Any] | None = None, ExpiresIn: int = 3600
    ) -> str: ...


class S3ClientManager:
    """Manages the S3 client with lazy creation and caching.

    Example:
        manager = S3ClientManager(S3Config(region="eu-west-1"))
        manager.client.list_buckets()
    """

    def __init__(
        self,
        config: S3Config | None = None,
        client_factory: Callable[..., StorageProvider] | None = None,
    ):
        self._config = config or S3Config()
        self._client_factory = client_factory
        self._client: StorageProvider | None = None
        self._lock = threading.Lock()
        self._logger = get_logger("s3-mcp.client")

    @property
    def region(self) -> str:
        """The configured storage region."""
        return self._config.region

    @property
    def endpoint_url(self) -> str | None:
        return self._config.endpoint_url

    @property
    def client(self) -> StorageProvider:
        """Get or create the cached S3 client."""
        with self._lock:
            if self._client is None:
                self._client = self._create_client()
            return self._client

    def _create_client(self) -> StorageProvider:
        if self._client_factory is not None:
            return self._client_factory(
                "s3",
                region_name=self._config.region,
                endpoint_url=self._config.endpoint_url,
            )

        session = boto3.session.Session(
            profile_name=self._config.profile,
            region_name=self._config.region,
        )
        kwargs: dict[str, Any] = {
            "region_name": self._config.region,
            "config": Config(signature_version="s3v4"),
        }
        if self._config.endpoint_url:
            kwargs["endpoint_url"] = self._config.endpoint_url

        client = session.client("s3", **kwargs)
        self._logger.info(
            "S3 client created",
            region=self._config.region,
            profile=self._config.profile,
            endpoint=self._config.endpoint_url,
        )
        return client

    def clear_cache(self) -> None:
        """Drop the cached client so the next call builds a fresh one."""
        with self._lock:
            self._client = None


# Global client instance
_client_manager: S3ClientManager | None = None


def get_client_manager(config: S3Config | None = None) -> S3ClientManager:
    """Get the global S3 client manager, creating it on first use."""
    global _client_manager
    if _client_manager is None:
        _client_manager = S3ClientManager(config)
    return _client_manager


def reset_client_manager() -> None:
    """Forget the global client manager (useful for testing)."""
    global _client_manager
    _client_manager = None
