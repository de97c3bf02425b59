"""
S3 MCP Server Configuration

Handles environment variables, S3 client settings, and server settings.
Values are read once at startup; credentials are left to boto3's own chain.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_REGION = "us-east-1"


class TransportType(str, Enum):
    """MCP transport types."""
    STDIO = "stdio"
    STREAMABLE_HTTP = "streamable_http"


class ServerConfig(BaseModel):
    """MCP Server configuration."""
    name: str = Field(default="mcp-server-s3", description="Server name")
    version: str = Field(default="1.0.0", description="Server version")
    transport: TransportType = Field(
        default=TransportType.STDIO,
        description="Transport: stdio or streamable_http"
    )
    port: int = Field(default=8000, description="HTTP port if using streamable_http")
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    @field_validator('log_level')
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


class S3Config(BaseModel):
    """S3 client configuration."""
    region: str = Field(default=DEFAULT_REGION, description="Storage region")
    profile: str | None = Field(default=None, description="Shared credentials profile")
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible providers"
    )


class TracingConfig(BaseModel):
    """OpenTelemetry tracing configuration."""
    enabled: bool = Field(default=False, description="Enable OTLP tracing")
    endpoint: str | None = Field(default=None, description="OTLP HTTP endpoint")
    service_name: str = Field(default="mcp-server-s3", description="Service name for traces")


@dataclass
class AppConfig:
    """Application configuration container."""
    server: ServerConfig = field(default_factory=ServerConfig)
    s3: S3Config = field(default_factory=S3Config)
    tracing: TracingConfig = field(default_factory=TracingConfig)

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables.

        Environment variables referenced:
        - AWS_REGION / AWS_DEFAULT_REGION
        - AWS_PROFILE
        - S3_ENDPOINT_URL
        - S3_MCP_NAME
        - S3_MCP_TRANSPORT
        - S3_MCP_PORT
        - S3_MCP_LOG_LEVEL
        - S3_MCP_JSON_LOGS
        - OTEL_EXPORTER_OTLP_ENDPOINT
        - OTEL_SDK_DISABLED
        - OTEL_SERVICE_NAME
        """
        load_dotenv()

        otlp_endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
        otel_disabled = os.getenv("OTEL_SDK_DISABLED", "false").lower() == "true"

        return cls(
            server=ServerConfig(
                name=os.getenv("S3_MCP_NAME", "mcp-server-s3"),
                transport=TransportType(os.getenv("S3_MCP_TRANSPORT", "stdio")),
                port=int(os.getenv("S3_MCP_PORT", "8000")),
                log_level=os.getenv("S3_MCP_LOG_LEVEL", "INFO"),
                json_logs=os.getenv("S3_MCP_JSON_LOGS", "false").lower() == "true",
            ),
            s3=S3Config(
                region=(
                    os.getenv("AWS_REGION")
                    or os.getenv("AWS_DEFAULT_REGION")
                    or DEFAULT_REGION
                ),
                profile=os.getenv("AWS_PROFILE") or None,
                endpoint_url=os.getenv("S3_ENDPOINT_URL") or None,
            ),
            tracing=TracingConfig(
                enabled=bool(otlp_endpoint) and not otel_disabled,
                endpoint=otlp_endpoint,
                service_name=os.getenv("OTEL_SERVICE_NAME", "mcp-server-s3"),
            ),
        )


# Global config instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
