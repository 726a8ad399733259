"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - unit/       : Unit tests (pure functions, config, models - no I/O)
    - component/  : Component tests (services and FastAPI apps, external
                    providers replaced by httpx mock transports)
"""
import os
import sys

import pytest
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"
os.environ["TRACING_ENABLED"] = "false"

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from core.tracing import TracingManager  # noqa: E402
from tests.contracts.cep_weather import CepWeatherTestDataFactory  # noqa: E402


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "component: marks tests as component tests")


# =============================================================================
# Tracing
# =============================================================================

class RecordingTracing:
    """TracingManager plus the in-memory exporter holding its finished spans"""

    def __init__(self, service_name: str):
        self.exporter = InMemorySpanExporter()
        self.manager = TracingManager(service_name, span_processor=SimpleSpanProcessor(self.exporter))

    def spans(self):
        return list(self.exporter.get_finished_spans())

    def span(self, name: str):
        matches = [s for s in self.spans() if s.name == name]
        assert matches, f"Expected span {name}, got {[s.name for s in self.spans()]}"
        return matches[-1]

    def of_kind(self, kind):
        """Finished spans of one SpanKind (SERVER / CLIENT from the HTTP instrumentation)"""
        return [s for s in self.spans() if s.kind == kind]


@pytest.fixture
def recording_tracing_factory():
    """Build RecordingTracing instances per service name"""
    return RecordingTracing


@pytest.fixture
def factory():
    """Test data factory"""
    return CepWeatherTestDataFactory
