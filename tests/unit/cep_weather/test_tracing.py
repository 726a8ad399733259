"""
Unit Tests: TracingManager

Trace context is carried as W3C traceparent headers by the instrumented
httpx client and continued by the instrumented FastAPI app.
"""

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from opentelemetry.trace import SpanKind, StatusCode, TraceFlags

pytestmark = [pytest.mark.unit]


def _capturing_client(tracing, captured):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    tracing.instrument_client(client)
    return client


class TestClientInstrumentation:

    @pytest.mark.asyncio
    async def test_outbound_request_carries_traceparent(self, recording_tracing_factory):
        recording = recording_tracing_factory("cep_service")
        captured = []
        client = _capturing_client(recording.manager, captured)

        with recording.manager.start_span("outbound"):
            await client.get("http://weather-service.test/weather/01001000")
        await client.aclose()

        version, trace_id, span_id, flags = captured[0].headers["traceparent"].split("-")
        client_span = next(s for s in recording.spans() if s.kind == SpanKind.CLIENT)
        assert version == "00"
        assert trace_id == format(client_span.context.trace_id, "032x")
        assert span_id == format(client_span.context.span_id, "016x")
        assert int(flags, 16) & TraceFlags.SAMPLED

    @pytest.mark.asyncio
    async def test_client_span_is_child_of_business_span(self, recording_tracing_factory):
        recording = recording_tracing_factory("cep_service")
        client = _capturing_client(recording.manager, [])

        with recording.manager.start_span("forward_request_to_weather_service"):
            await client.get("http://weather-service.test/weather/01001000")
        await client.aclose()

        forward = recording.span("forward_request_to_weather_service")
        client_span = next(s for s in recording.spans() if s.kind == SpanKind.CLIENT)
        assert client_span.parent.span_id == forward.context.span_id


class TestAppInstrumentation:

    @staticmethod
    def _app(tracing):
        app = FastAPI()

        @app.get("/ping")
        async def ping():
            with tracing.start_span("handler"):
                return {"ok": True}

        tracing.instrument_app(app)
        return app

    def test_incoming_traceparent_is_continued(self, recording_tracing_factory):
        recording = recording_tracing_factory("weather_service")
        trace_id = "4bf92f3577b34da6a3ce929d0e0e4736"

        TestClient(self._app(recording.manager)).get(
            "/ping", headers={"traceparent": f"00-{trace_id}-00f067aa0ba902b7-01"}
        )

        server = next(s for s in recording.spans() if s.kind == SpanKind.SERVER)
        handler = recording.span("handler")
        assert format(server.context.trace_id, "032x") == trace_id
        assert format(server.parent.span_id, "016x") == "00f067aa0ba902b7"
        assert server.parent.is_remote
        assert handler.parent.span_id == server.context.span_id

    def test_request_without_traceparent_starts_new_trace(self, recording_tracing_factory):
        recording = recording_tracing_factory("weather_service")

        TestClient(self._app(recording.manager)).get("/ping")

        server = next(s for s in recording.spans() if s.kind == SpanKind.SERVER)
        assert server.parent is None


class TestTracingManager:

    def test_record_error_marks_span_failed(self, recording_tracing_factory):
        recording = recording_tracing_factory("weather_service")
        tracing = recording.manager

        with tracing.start_span("call") as span:
            tracing.record_error(span, RuntimeError("boom"))

        finished = recording.span("call")
        assert finished.status.status_code == StatusCode.ERROR
        assert finished.events[0].name == "exception"

    def test_service_name_resource(self, recording_tracing_factory):
        recording = recording_tracing_factory("weather_service")
        with recording.manager.start_span("call"):
            pass
        assert recording.span("call").resource.attributes["service.name"] == "weather_service"

    def test_current_span_outside_any_span_is_noop(self, recording_tracing_factory):
        tracing = recording_tracing_factory("weather_service").manager
        span = tracing.current_span()
        span.set_attribute("ignored", True)
        assert not span.get_span_context().is_valid
