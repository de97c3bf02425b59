"""
S3 storage adapter.

Each operation is a single request against the provider. Provider
exceptions propagate unmodified; the tool layer is responsible for
turning them into error results.
"""
from __future__ import annotations

from contextlib import closing

from mcp_server_s3.core.client import S3ClientManager, StorageProvider
from mcp_server_s3.core.errors import MissingBodyError
from mcp_server_s3.core.observability import get_logger

from .models import BucketRecord, BucketStatus, ObjectEntry

DELIMITER = "/"
DEFAULT_MAX_KEYS = 100
MAX_KEYS_LIMIT = 1000
DEFAULT_CONTENT_TYPE = "text/plain"
DEFAULT_EXPIRES_IN = 3600
MIN_EXPIRES_IN = 60
MAX_EXPIRES_IN = 604800

logger = get_logger("s3-mcp.storage")


class S3Storage:
    """Encapsulates the S3 calls behind plain method signatures."""

    def __init__(self, client_manager: S3ClientManager):
        self._manager = client_manager

    @property
    def region(self) -> str:
        return self._manager.region

    def close(self) -> None:
        """Release the cached provider client."""
        self._manager.clear_cache()

    @property
    def _client(self) -> StorageProvider:
        return self._manager.client

    def list_buckets(self) -> list[BucketRecord]:
        """Return the account's buckets in provider order."""
        response = self._client.list_buckets()
        return [
            BucketRecord(
                name=bucket.get("Name") or "",
                creation_date=bucket.get("CreationDate"),
            )
            for bucket in response.get("Buckets") or []
        ]

    def list_objects(
        self,
        bucket: str,
        prefix: str | None = None,
        max_keys: int = DEFAULT_MAX_KEYS,
    ) -> list[ObjectEntry]:
        """List one page of a bucket, grouping keys on '/'.

        Common prefixes come first, then leaf objects. At most ``max_keys``
        entries are returned; there is no continuation across pages.

        Raises:
            ValueError: if max_keys is outside 1..1000.
            BotoCoreError | ClientError: when the listing call fails.
        """
        if not 1 <= max_keys <= MAX_KEYS_LIMIT:
            raise ValueError(f"max_keys must be between 1 and {MAX_KEYS_LIMIT}, got {max_keys}")

        list_params = {"Bucket": bucket, "MaxKeys": max_keys, "Delimiter": DELIMITER}
        if prefix:
            list_params["Prefix"] = prefix

        response = self._client.list_objects_v2(**list_params)

        items: list[ObjectEntry] = [
            ObjectEntry(key=common["Prefix"], is_prefix=True)
            for common in response.get("CommonPrefixes") or []
            if common.get("Prefix")
        ]
        items.extend(
            ObjectEntry(
                key=obj["Key"],
                size=obj.get("Size"),
                last_modified=obj.get("LastModified"),
            )
            for obj in response.get("Contents") or []
            if obj.get("Key")
        )
        return items[:max_keys]

    def get_object(self, bucket: str, key: str) -> str:
        """Read a whole object and decode it as UTF-8 text.

        Undecodable bytes are replaced rather than rejected.

        Raises:
            MissingBodyError: if the response carries no body.
        """
        response = self._client.get_object(Bucket=bucket, Key=key)
        body = response.get("Body")
        if body is None:
            raise MissingBodyError(key)
        with closing(body):
            data = body.read()
        return data.decode("utf-8", errors="replace")

    def put_object(
        self,
        bucket: str,
        key: str,
        content: str,
        content_type: str | None = None,
    ) -> None:
        """Upload text content, UTF-8 encoded."""
        self._client.put_object(
            Bucket=bucket,
            Key=key,
            Body=content.encode("utf-8"),
            ContentType=content_type if content_type is not None else DEFAULT_CONTENT_TYPE,
        )

    def delete_object(self, bucket: str, key: str) -> None:
        """Delete an object. Deleting a missing key succeeds."""
        self._client.delete_object(Bucket=bucket, Key=key)

    def presigned_url(
        self,
        bucket: str,
        key: str,
        expires_in: int = DEFAULT_EXPIRES_IN,
    ) -> str:
        """Sign a GET URL for the object. No request is sent to the provider."""
        if not MIN_EXPIRES_IN <= expires_in <= MAX_EXPIRES_IN:
            raise ValueError(
                f"expires_in must be between {MIN_EXPIRES_IN} and {MAX_EXPIRES_IN}, got {expires_in}"
            )
        return self._client.generate_presigned_url(
            "get_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=expires_in,
        )

    def bucket_info(self, bucket: str) -> BucketStatus:
        """Probe a bucket. Any probe failure reports the bucket as missing."""
        try:
            self._client.head_bucket(Bucket=bucket)
        except Exception as e:
            logger.debug("Bucket probe failed", bucket=bucket, error=str(e))
            return BucketStatus(name=bucket, exists=False)
        return BucketStatus(name=bucket, exists=True, region=self.region)
