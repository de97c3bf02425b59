"""
Observability for the S3 MCP server - structured logging and tracing.

Provides:
- structlog logging rendered to stderr (stdout carries MCP JSON-RPC)
- Optional OpenTelemetry tracing exported over OTLP/HTTP
- A per-tool execution context with timing

Environment Variables:
- OTEL_EXPORTER_OTLP_ENDPOINT: OTLP collector endpoint
- OTEL_SDK_DISABLED: Disable tracing if 'true'
"""
from __future__ import annotations

import logging
import os
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

import structlog

# Global state
_tracer: Any | None = None
_start_time: float = perf_counter()


def get_uptime_seconds() -> float:
    """Get server uptime in seconds."""
    return perf_counter() - _start_time


# ============================================================================
# Structured Logging with structlog
# ============================================================================

def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON; otherwise console format
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        # stdout is reserved for the stdio transport
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # botocore logs through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    logging.getLogger("botocore").setLevel(logging.WARNING)


def get_logger(name: str = "s3-mcp") -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


# ============================================================================
# OpenTelemetry Tracing (Optional - requires the otel extra)
# ============================================================================

def init_tracing(
    service_name: str = "mcp-server-s3",
    service_version: str = "1.0.0",
    endpoint: str | None = None,
    region: str | None = None,
) -> Any | None:
    """Initialize OpenTelemetry tracing with an OTLP/HTTP exporter.

    Returns None when tracing is disabled, unconfigured, or the otel
    packages are not installed.
    """
    global _tracer

    if os.getenv("OTEL_SDK_DISABLED", "false").lower() == "true":
        get_logger().info("OpenTelemetry tracing disabled via OTEL_SDK_DISABLED")
        return None

    endpoint = endpoint or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if not endpoint:
        get_logger().debug("OTLP endpoint not configured", hint="Tracing will be disabled")
        return None

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor

        resource = Resource.create({
            SERVICE_NAME: service_name,
            SERVICE_VERSION: service_version,
            "cloud.provider": "aws",
            "cloud.region": region or "unknown",
        })

        provider = TracerProvider(resource=resource)
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint.rstrip('/')}/v1/traces"))
        )
        trace.set_tracer_provider(provider)

        _tracer = trace.get_tracer(service_name)
        get_logger().info("OpenTelemetry tracing initialized", service=service_name)
        return _tracer

    except ImportError:
        get_logger().info(
            "OpenTelemetry packages not installed",
            hint="Install with: pip install 'mcp-server-s3[otel]'"
        )
        return None
    except Exception as e:
        get_logger().warning("Failed to initialize OpenTelemetry", error=str(e))
        return None


def get_tracer() -> Any | None:
    """Get the global tracer instance."""
    return _tracer


# ============================================================================
# Tool Execution Context
# ============================================================================

@dataclass
class ToolExecutionContext:
    """Context for tool execution with observability."""

    tool_name: str
    params: dict[str, Any] = field(default_factory=dict)
    start_time: float = field(default_factory=perf_counter)
    span: Any | None = None
    logger: Any = None
    failed: bool = False

    def __post_init__(self):
        if self.logger is None:
            self.logger = get_logger("s3-mcp.tools")

    @property
    def duration_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def log_start(self) -> None:
        self.logger.info(
            f"Starting {self.tool_name}",
            tool=self.tool_name,
            params=_sanitize_params(self.params)
        )

    def log_success(self) -> None:
        self.logger.info(
            f"Completed {self.tool_name}",
            tool=self.tool_name,
            duration_ms=round(self.duration_ms, 2),
        )

    def log_error(
        self,
        category: str,
        message: str,
        suggestion: str = "",
        **details: Any,
    ) -> None:
        self.failed = True
        self.logger.error(
            f"Failed {self.tool_name}",
            tool=self.tool_name,
            duration_ms=round(self.duration_ms, 2),
            category=category,
            error_message=message,
            suggestion=suggestion or None,
            **{k: v for k, v in details.items() if v is not None},
        )
        if self.span is not None:
            from opentelemetry.trace import Status, StatusCode
            self.span.set_status(Status(StatusCode.ERROR, message))


@asynccontextmanager
async def observe_tool(
    tool_name: str,
    params: dict[str, Any] | None = None
) -> AsyncGenerator[ToolExecutionContext, None]:
    """Context manager for unified tool observability.

    Tool handlers turn failures into error results instead of raising, so
    they report them through ``ctx.log_error``; anything that still escapes
    is logged here and re-raised.

    Example:
        async with observe_tool("get_object", {"bucket": "b"}) as ctx:
            ...
    """
    ctx = ToolExecutionContext(tool_name=tool_name, params=params or {})

    tracer = get_tracer()
    if tracer:
        from opentelemetry import trace

        ctx.span = tracer.start_span(
            tool_name,
            kind=trace.SpanKind.SERVER,
            attributes={"tool.name": tool_name},
        )

    ctx.log_start()

    try:
        yield ctx
    except Exception as e:
        ctx.log_error("unknown", str(e))
        if ctx.span:
            ctx.span.record_exception(e)
        raise
    else:
        if not ctx.failed:
            ctx.log_success()
    finally:
        if ctx.span:
            ctx.span.end()


# ============================================================================
# Utility Functions
# ============================================================================

def _sanitize_params(params: dict[str, Any]) -> dict[str, Any]:
    """Mask sensitive values and truncate long strings for logging."""
    sensitive_keys = {
        "password", "secret", "token", "credential", "auth"
    }

    sanitized = {}
    for key, value in params.items():
        if any(s in key.lower() for s in sensitive_keys):
            sanitized[key] = "[REDACTED]"
        # Object bodies are logged by size only
        elif key == "content" and isinstance(value, str):
            sanitized[key] = f"<{len(value)} chars>"
        elif isinstance(value, str) and len(value) > 100:
            sanitized[key] = f"{value[:100]}..."
        else:
            sanitized[key] = value

    return sanitized


# ============================================================================
# Module Initialization
# ============================================================================

def init_observability(
    service_name: str = "mcp-server-s3",
    service_version: str = "1.0.0",
    otlp_endpoint: str | None = None,
    region: str | None = None,
) -> None:
    """Initialize tracing once logging is configured.

    Logging is set up by the entry point before anything else runs, so
    this only wires the optional tracer.
    """
    init_tracing(
        service_name=service_name,
        service_version=service_version,
        endpoint=otlp_endpoint,
        region=region,
    )

    get_logger().info(
        "Observability initialized",
        service=service_name,
        version=service_version,
        tracing=_tracer is not None,
    )
