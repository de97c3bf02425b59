"""
Core infrastructure modules for the S3 MCP Server.

This package contains:
- client: boto3 S3 client manager
- errors: Structured error handling
- formatters: Text formatting utilities
- models: Base Pydantic models and the tool result envelope
- observability: Logging and tracing
"""

from .client import S3ClientManager, StorageProvider, get_client_manager, reset_client_manager
from .errors import ErrorCategory, MissingBodyError, StorageError, handle_storage_error
from .formatters import Formatter
from .models import BaseToolInput, BucketKeyInput, ToolResult
from .observability import (
    configure_logging,
    get_logger,
    get_uptime_seconds,
    init_observability,
    observe_tool,
)

__all__ = [
    # Errors
    "ErrorCategory",
    "StorageError",
    "MissingBodyError",
    "handle_storage_error",
    # Formatters
    "Formatter",
    # Models
    "BaseToolInput",
    "BucketKeyInput",
    "ToolResult",
    # Client
    "S3ClientManager",
    "StorageProvider",
    "get_client_manager",
    "reset_client_manager",
    # Observability
    "configure_logging",
    "get_logger",
    "get_uptime_seconds",
    "init_observability",
    "observe_tool",
]
