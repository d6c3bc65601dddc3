"""Opt-in Arize Phoenix tracing for the family tree server.

Spans are exported over OTLP/HTTP only when PHOENIX_ENABLED=true. Otherwise
get_tracer() hands back OpenTelemetry's no-op tracer and instrumented code
runs unchanged.

Environment Variables:
    PHOENIX_ENABLED: 'true' turns tracing on (default: false)
    PHOENIX_ENDPOINT: Phoenix base URL (default: http://localhost:6006)
    PHOENIX_PROJECT_NAME: service name shown in Phoenix (default: family-tree-server)
"""

import os
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import ReadableSpan, SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

# Attribute Phoenix reads to group spans by kind
OPENINFERENCE_SPAN_KIND = "openinference.span.kind"

_SELECTION_PREFIXES = ("select", "click", "clear", "activate")


def is_tracing_enabled() -> bool:
    return os.getenv("PHOENIX_ENABLED", "false").lower() == "true"


def get_phoenix_endpoint() -> str:
    return os.getenv("PHOENIX_ENDPOINT", "http://localhost:6006")


def get_project_name() -> str:
    return os.getenv("PHOENIX_PROJECT_NAME", "family-tree-server")


def _span_kind(span_name: str) -> str:
    name = span_name.lower()
    if name.startswith("relate"):
        return "TOOL"
    if name.startswith(_SELECTION_PREFIXES):
        return "CHAIN"
    if name.startswith("search"):
        return "RETRIEVER"
    return "UNKNOWN"


class TreeSpanKindProcessor(SpanProcessor):
    """Tag each span with an OpenInference kind as it starts.

    relate -> TOOL, selection transitions -> CHAIN, search -> RETRIEVER,
    everything else -> UNKNOWN.
    """

    def on_start(self, span: Any, parent_context: Any = None) -> None:
        if not hasattr(span, "name") or not hasattr(span, "set_attribute"):
            return
        span.set_attribute(OPENINFERENCE_SPAN_KIND, _span_kind(span.name))

    def on_end(self, span: ReadableSpan) -> None:
        pass

    def shutdown(self) -> None:
        pass

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True


_tracer_provider: TracerProvider | None = None


def initialize_tracing() -> TracerProvider | None:
    """Install a global tracer provider exporting to Phoenix.

    Returns None when tracing is off. Repeated calls return the provider
    created by the first one.
    """
    global _tracer_provider

    if not is_tracing_enabled():
        return None
    if _tracer_provider is not None:
        return _tracer_provider

    provider = TracerProvider(resource=Resource.create({"service.name": get_project_name()}))
    # kind tagging must run before the exporter sees the span
    provider.add_span_processor(TreeSpanKindProcessor())
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{get_phoenix_endpoint()}/v1/traces"))
    )
    trace.set_tracer_provider(provider)

    _tracer_provider = provider
    return provider


def get_tracer(name: str = "family-tree-server") -> trace.Tracer:
    return trace.get_tracer(name)
