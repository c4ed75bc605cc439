"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from opentelemetry import trace

from mcp_pool.config import TelemetrySettings
from mcp_pool.protocols.dispatcher import MethodDispatcher
from mcp_pool.protocols.registry import ProviderRegistry
from mcp_pool.utils.telemetry import (
    _INSTRUMENTATION_NAME,
    ATTR_ERROR_KIND,
    ATTR_METHOD,
    ATTR_OUTCOME,
    ATTR_PROVIDER,
    ATTR_RESOURCE_URI,
    ATTR_TOOL_NAME,
    configure_telemetry,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        tracer = get_tracer("test.module")
        assert isinstance(tracer, trace.Tracer)

    def test_default_name(self) -> None:
        tracer = get_tracer()
        assert isinstance(tracer, trace.Tracer)

    def test_noop_span(self) -> None:
        """Without SDK configured, spans should be no-ops."""
        tracer = get_tracer("test.noop")
        with tracer.start_as_current_span("test") as span:
            span.set_attribute(ATTR_PROVIDER, "convex")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry(TelemetrySettings(enabled=True))

    def test_configures_with_console(self) -> None:
        try:
            from opentelemetry.sdk.trace import TracerProvider
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        original = trace.get_tracer_provider()
        try:
            configure_telemetry(TelemetrySettings(enabled=True, service_name="test-svc"))
            provider = trace.get_tracer_provider()
            assert provider is not original or isinstance(provider, TracerProvider)
        finally:
            trace.set_tracer_provider(original)

    def test_missing_otlp_exporter_installs_nothing(self) -> None:
        try:
            import opentelemetry.sdk.trace  # noqa: F401
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        settings = TelemetrySettings(
            enabled=True,
            export_to_console=False,
            otlp_endpoint="http://localhost:4317",
        )
        with (
            patch.dict(
                "sys.modules",
                {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
            ),
            patch("opentelemetry.trace.set_tracer_provider") as mock_set,
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(settings)
        mock_set.assert_not_called()


class TestDispatchSpans:
    async def test_records_dispatch_attributes(self, mock_registry: ProviderRegistry) -> None:
        try:
            from opentelemetry.sdk.trace import TracerProvider
            from opentelemetry.sdk.trace.export import SimpleSpanProcessor
            from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
                InMemorySpanExporter,
            )
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        exporter = InMemorySpanExporter()
        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(exporter))

        with patch("mcp_pool.protocols.dispatcher._tracer", provider.get_tracer("test")):
            dispatcher = MethodDispatcher(mock_registry)
            await dispatcher.dispatch("mock", "tools/call", {"name": "tool_a"})
            await dispatcher.dispatch("missing", "tools/list")

        ok_span, failed_span = exporter.get_finished_spans()
        assert ok_span.name == "mcp_pool.dispatch"
        assert ok_span.attributes[ATTR_PROVIDER] == "mock"
        assert ok_span.attributes[ATTR_METHOD] == "tools/call"
        assert ok_span.attributes[ATTR_TOOL_NAME] == "tool_a"
        assert ok_span.attributes[ATTR_OUTCOME] == "success"
        assert failed_span.attributes[ATTR_OUTCOME] == "failure"
        assert failed_span.attributes[ATTR_ERROR_KIND] == "provider_not_found"


class TestAttributeConstants:
    @pytest.mark.parametrize(
        "attr",
        [
            ATTR_PROVIDER,
            ATTR_METHOD,
            ATTR_TOOL_NAME,
            ATTR_RESOURCE_URI,
            ATTR_OUTCOME,
            ATTR_ERROR_KIND,
        ],
    )
    def test_constants_are_namespaced(self, attr: str) -> None:
        assert attr.startswith("mcp_pool.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "mcp_pool"
