"""
Distributed Tracing

Owns the OpenTelemetry tracer provider and tracer for one service process.
Built once in the app factory and injected into routes and clients; nothing
here touches the OpenTelemetry global provider.

HTTP servers and clients are instrumented against this provider: the server
middleware continues an incoming W3C traceparent and the httpx instrumentation
writes one on every outbound request, so business spans opened inside a
request nest under the server span and above the client span.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import httpx
from fastapi import FastAPI
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.trace import Span, Status, StatusCode, get_current_span

from core.config.tracing_config import TracingConfig

logger = logging.getLogger(__name__)


class TracingManager:
    """
    Per-service tracing facade

    Usage:
        tracing = TracingManager("weather_service", config.tracing)
        tracing.instrument_app(app)
        tracing.instrument_client(client)

        with tracing.start_span("weather_handler_orchestration") as span:
            span.set_attribute("cep.input", cep)
    """

    def __init__(
        self,
        service_name: str,
        config: Optional[TracingConfig] = None,
        span_processor: Optional[SpanProcessor] = None,
    ):
        """
        Args:
            service_name: Value of the service.name resource attribute
            config: Exporter settings; ignored when span_processor is given
            span_processor: Explicit processor (tests use an in-memory exporter)
        """
        self.service_name = service_name
        self.config = config or TracingConfig()

        self.provider = TracerProvider(
            resource=Resource.create({SERVICE_NAME: service_name}),
            sampler=ALWAYS_ON,
        )

        if span_processor is not None:
            self.provider.add_span_processor(span_processor)
        elif self.config.enabled:
            exporter = OTLPSpanExporter(
                endpoint=self.config.otlp_endpoint,
                insecure=self.config.otlp_insecure,
            )
            self.provider.add_span_processor(BatchSpanProcessor(exporter))
            logger.info(f"Tracing spans exported to {self.config.otlp_endpoint}")
        else:
            logger.info("Tracing exporter disabled, spans are not exported")

        self.tracer = self.provider.get_tracer(service_name)

    # ========================================
    # HTTP instrumentation
    # ========================================

    def instrument_app(self, app: FastAPI) -> None:
        """Open a server span per request, continuing the caller's trace"""
        FastAPIInstrumentor.instrument_app(app, tracer_provider=self.provider)

    def instrument_client(self, client: httpx.AsyncClient) -> None:
        """Open a client span per outbound request and write traceparent"""
        HTTPXClientInstrumentor.instrument_client(client, tracer_provider=self.provider)

    # ========================================
    # Spans
    # ========================================

    @contextmanager
    def start_span(self, name: str, attributes: Optional[Dict[str, Any]] = None) -> Iterator[Span]:
        """Start a child of the current span and make it current for the block"""
        with self.tracer.start_as_current_span(name, attributes=attributes) as span:
            yield span

    @staticmethod
    def current_span() -> Span:
        """Span active in the current context (a no-op span outside any span)"""
        return get_current_span()

    @staticmethod
    def record_error(span: Span, error: BaseException) -> None:
        """Record an exception on a span and mark it failed"""
        span.record_exception(error)
        span.set_status(Status(StatusCode.ERROR, str(error)))

    def shutdown(self) -> None:
        """Flush pending spans and release exporter resources"""
        self.provider.shutdown()


__all__ = ["TracingManager"]
