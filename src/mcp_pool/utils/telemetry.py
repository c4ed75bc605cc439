"""OpenTelemetry tracing helpers for the gateway.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
codebase can call ``get_tracer()`` without caring whether the SDK is
installed.  When the SDK is *not* configured the API returns no-op
implementations.

Usage::

    from mcp_pool.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("mcp_pool.dispatch") as span:
        span.set_attribute(ATTR_PROVIDER, "convex")

To activate real tracing, pass the gateway's ``TelemetrySettings`` to
:func:`configure_telemetry` once at startup (requires the ``otel`` extra:
``pip install mcp-pool[otel]``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from opentelemetry import trace

if TYPE_CHECKING:
    from mcp_pool.config import TelemetrySettings

# ---------------------------------------------------------------------------
# Semantic attribute keys used by gateway instrumentation
# ---------------------------------------------------------------------------

ATTR_PROVIDER = "mcp_pool.provider"
ATTR_METHOD = "mcp_pool.method"
ATTR_TOOL_NAME = "mcp_pool.tool.name"
ATTR_RESOURCE_URI = "mcp_pool.resource.uri"
ATTR_OUTCOME = "mcp_pool.outcome"
ATTR_ERROR_KIND = "mcp_pool.error.kind"

_INSTRUMENTATION_NAME = "mcp_pool"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(settings: TelemetrySettings) -> None:
    """Install an SDK tracer provider built from *settings*.

    Span processors are assembled before anything is installed, so a
    missing exporter package leaves the global tracer provider untouched.

    Raises:
        ImportError: If ``opentelemetry-sdk`` is missing, or
            ``opentelemetry-exporter-otlp`` is missing while
            ``settings.otlp_endpoint`` is set.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install mcp-pool[otel]"
        )
        raise ImportError(msg) from exc

    processors = _span_processors(settings)

    provider = TracerProvider(resource=Resource.create({"service.name": settings.service_name}))
    for processor in processors:
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _span_processors(settings: TelemetrySettings) -> list[Any]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if settings.export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))

    if settings.otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports]
        except ImportError as exc:
            msg = (
                "opentelemetry-exporter-otlp is required for OTLP export. "
                "Install it with: pip install mcp-pool[otel]"
            )
            raise ImportError(msg) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otlp_endpoint)))

    return processors
