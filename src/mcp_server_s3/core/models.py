"""
Base Pydantic models for S3 MCP Server tools.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BaseToolInput",
    "BucketKeyInput",
    "ToolResult",
]


class BaseToolInput(BaseModel):
    """Base model for all tool inputs."""
    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
        populate_by_name=True,
    )


class BucketKeyInput(BaseToolInput):
    """Base model for tools addressing a single object."""

    bucket: str = Field(..., description="Bucket name")
    key: str = Field(..., description="Object key")


class ToolResult(BaseModel):
    """Uniform envelope returned by every tool handler."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Human-readable result text")
    is_error: bool = Field(default=False, description="Whether the call failed")

    @classmethod
    def ok(cls, text: str) -> ToolResult:
        return cls(text=text)

    @classmethod
    def error(cls, message: str) -> ToolResult:
        return cls(text=f"Error: {message}", is_error=True)
