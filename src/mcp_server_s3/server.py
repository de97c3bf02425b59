"""
S3 MCP Server - Main Entry Point

FastMCP server implementation with:
- Lifespan management for logging, tracing and the S3 client
- Seven S3 tools (buckets, objects, presigned URLs, bucket probe)

Environment Variables:
- S3_MCP_NAME: Server name (default: mcp-server-s3)
- S3_MCP_TRANSPORT: Transport mode (stdio, streamable_http)
- S3_MCP_PORT: HTTP port if using streamable_http
- S3_MCP_LOG_LEVEL: Logging level
- See config.py for S3 configuration variables
"""
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP

from mcp_server_s3.config import AppConfig, TransportType, get_config
from mcp_server_s3.core import (
    configure_logging,
    get_client_manager,
    get_logger,
    get_uptime_seconds,
    init_observability,
)
from mcp_server_s3.storage import S3Storage
from mcp_server_s3.tools.s3 import register_s3_tools

logger = get_logger("s3-mcp.server")

INSTRUCTIONS = """S3 object storage tools.

Use `list_buckets` and `list_objects` to browse, `get_object` / `put_object`
to read and write text, `delete_object` to remove objects, `presigned_url`
to share temporary links and `bucket_info` to check a bucket.
"""


def create_server(config: AppConfig, storage: S3Storage | None = None) -> FastMCP:
    """Build the FastMCP server and register the S3 tools."""
    storage = storage or S3Storage(get_client_manager(config.s3))

    @asynccontextmanager
    async def app_lifespan(server: FastMCP) -> AsyncGenerator[dict[str, Any], None]:
        """Initialize observability on startup, drop the S3 client on shutdown."""
        init_observability(
            service_name=config.tracing.service_name,
            service_version=config.server.version,
            otlp_endpoint=config.tracing.endpoint if config.tracing.enabled else None,
            region=config.s3.region,
        )
        logger.info(
            "Starting S3 MCP Server",
            version=config.server.version,
            region=config.s3.region,
            endpoint=config.s3.endpoint_url,
        )

        yield {"config": config, "storage": storage}

        logger.info("Shutting down S3 MCP Server", uptime_s=round(get_uptime_seconds(), 1))
        storage.close()

    mcp = FastMCP(
        name=config.server.name,
        instructions=INSTRUCTIONS,
        lifespan=app_lifespan,
    )
    register_s3_tools(mcp, storage)
    return mcp


def main() -> None:
    """Entry point supporting multiple transports."""
    config = get_config()
    # stdout belongs to the stdio transport from the first log line on
    configure_logging(level=config.server.log_level, json_format=config.server.json_logs)
    mcp = create_server(config)

    try:
        if config.server.transport == TransportType.STREAMABLE_HTTP:
            logger.info(f"Starting HTTP server on port {config.server.port}")
            mcp.run(transport="streamable-http", port=config.server.port)
        else:
            logger.info("Starting stdio server")
            mcp.run()
    except Exception as e:
        logger.error("Fatal error", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
