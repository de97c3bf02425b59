"""
S3 tool implementations.

Handlers run the blocking adapter call in a worker thread and always
return a ToolResult; failures become ``Error: <message>`` results and
never escape. ``register_s3_tools`` exposes them on a FastMCP server.
"""
import asyncio
from collections.abc import Callable
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from mcp_server_s3.core.errors import handle_storage_error
from mcp_server_s3.core.models import BaseToolInput, ToolResult
from mcp_server_s3.core.observability import observe_tool
from mcp_server_s3.storage.adapter import (
    DEFAULT_EXPIRES_IN,
    DEFAULT_MAX_KEYS,
    MAX_EXPIRES_IN,
    MAX_KEYS_LIMIT,
    MIN_EXPIRES_IN,
    S3Storage,
)

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


async def _run_tool(
    tool_name: str,
    params: BaseToolInput,
    call: Callable[[], Any],
    render: Callable[[Any], str],
) -> ToolResult:
    """Execute one adapter call and wrap the outcome in a ToolResult."""
    async with observe_tool(tool_name, params.model_dump()) as ctx:
        try:
            result = await asyncio.to_thread(call)
            return ToolResult.ok(render(result))
        except Exception as e:
            error = handle_storage_error(e, tool_name)
            ctx.log_error(
                error.category.value,
                error.message,
                suggestion=error.suggestion,
                **error.details,
            )
            return ToolResult.error(error.message)


# =============================================================================
# Handlers
# =============================================================================

async def handle_list_buckets(
    storage: S3Storage, params: ListBucketsInput | None = None
) -> ToolResult:
    return await _run_tool(
        "list_buckets",
        params or ListBucketsInput(),
        storage.list_buckets,
        S3Formatter.buckets,
    )


async def handle_list_objects(storage: S3Storage, params: ListObjectsInput) -> ToolResult:
    return await _run_tool(
        "list_objects",
        params,
        lambda: storage.list_objects(params.bucket, params.prefix, params.max_keys),
        lambda items: S3Formatter.objects(params.bucket, params.prefix, params.max_keys, items),
    )


async def handle_get_object(storage: S3Storage, params: GetObjectInput) -> ToolResult:
    return await _run_tool(
        "get_object",
        params,
        lambda: storage.get_object(params.bucket, params.key),
        lambda content: S3Formatter.content(params.bucket, params.key, content),
    )


async def handle_put_object(storage: S3Storage, params: PutObjectInput) -> ToolResult:
    return await _run_tool(
        "put_object",
        params,
        lambda: storage.put_object(
            params.bucket, params.key, params.content, params.content_type
        ),
        lambda _: S3Formatter.uploaded(params.bucket, params.key, params.content),
    )


async def handle_delete_object(storage: S3Storage, params: DeleteObjectInput) -> ToolResult:
    return await _run_tool(
        "delete_object",
        params,
        lambda: storage.delete_object(params.bucket, params.key),
        lambda _: S3Formatter.deleted(params.bucket, params.key),
    )


async def handle_presigned_url(storage: S3Storage, params: PresignedUrlInput) -> ToolResult:
    return await _run_tool(
        "presigned_url",
        params,
        lambda: storage.presigned_url(params.bucket, params.key, params.expires_in),
        lambda url: S3Formatter.presigned_url(
            params.bucket, params.key, params.expires_in, url
        ),
    )


async def handle_bucket_info(storage: S3Storage, params: BucketInfoInput) -> ToolResult:
    return await _run_tool(
        "bucket_info",
        params,
        lambda: storage.bucket_info(params.bucket),
        S3Formatter.bucket_status,
    )


def to_mcp_response(result: ToolResult) -> str:
    """Return the result text, or raise ToolError so MCP marks it isError."""
    if result.is_error:
        raise ToolError(result.text)
    return result.text


# =============================================================================
# Registration
# =============================================================================

BucketArg = Annotated[str, Field(description="Bucket name")]
KeyArg = Annotated[str, Field(description="Object key")]

READ_ONLY = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}


def register_s3_tools(mcp: FastMCP, storage: S3Storage) -> None:
    """Register the seven S3 tools with the MCP server."""

    @mcp.tool(name="list_buckets", annotations={"title": "List Buckets", **READ_ONLY})
    async def list_buckets() -> str:
        """List all S3 buckets in your AWS account."""
        return to_mcp_response(await handle_list_buckets(storage))

    @mcp.tool(name="list_objects", annotations={"title": "List Objects", **READ_ONLY})
    async def list_objects(
        bucket: BucketArg,
        prefix: Annotated[
            str | None, Field(description="Key prefix (e.g. 'uploads/')")
        ] = None,
        maxKeys: Annotated[
            int,
            Field(description="Max objects to return", ge=1, le=MAX_KEYS_LIMIT, strict=True),
        ] = DEFAULT_MAX_KEYS,
    ) -> str:
        """List objects in an S3 bucket. Optionally filter by prefix and limit count."""
        params = ListObjectsInput(bucket=bucket, prefix=prefix, maxKeys=maxKeys)
        return to_mcp_response(await handle_list_objects(storage, params))

    @mcp.tool(name="get_object", annotations={"title": "Get Object", **READ_ONLY})
    async def get_object(bucket: BucketArg, key: KeyArg) -> str:
        """Download and read the contents of an S3 object as text."""
        params = GetObjectInput(bucket=bucket, key=key)
        return to_mcp_response(await handle_get_object(storage, params))

    @mcp.tool(
        name="put_object",
        annotations={
            "title": "Put Object",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        }
    )
    async def put_object(
        bucket: BucketArg,
        key: KeyArg,
        content: Annotated[str, Field(description="Content to upload")],
        contentType: Annotated[
            str | None, Field(description="Content-Type header (default: text/plain)")
        ] = None,
    ) -> str:
        """Upload text content to an S3 object."""
        params = PutObjectInput(
            bucket=bucket, key=key, content=content, contentType=contentType
        )
        return to_mcp_response(await handle_put_object(storage, params))

    @mcp.tool(
        name="delete_object",
        annotations={
            "title": "Delete Object",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        }
    )
    async def delete_object(bucket: BucketArg, key: KeyArg) -> str:
        """Delete an object from an S3 bucket."""
        params = DeleteObjectInput(bucket=bucket, key=key)
        return to_mcp_response(await handle_delete_object(storage, params))

    @mcp.tool(name="presigned_url", annotations={"title": "Presigned URL", **READ_ONLY})
    async def presigned_url(
        bucket: BucketArg,
        key: KeyArg,
        expiresIn: Annotated[
            int,
            Field(
                description="URL expiry in seconds (default: 1 hour)",
                ge=MIN_EXPIRES_IN,
                le=MAX_EXPIRES_IN,
                strict=True,
            ),
        ] = DEFAULT_EXPIRES_IN,
    ) -> str:
        """Generate a presigned URL for temporary access to an S3 object."""
        params = PresignedUrlInput(bucket=bucket, key=key, expiresIn=expiresIn)
        return to_mcp_response(await handle_presigned_url(storage, params))

    @mcp.tool(name="bucket_info", annotations={"title": "Bucket Info", **READ_ONLY})
    async def bucket_info(bucket: BucketArg) -> str:
        """Check if a bucket exists and get basic info."""
        params = BucketInfoInput(bucket=bucket)
        return to_mcp_response(await handle_bucket_info(storage, params))
