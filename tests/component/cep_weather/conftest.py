"""
CEP Weather Component Test Configuration

Pytest fixtures for component testing with mocked external providers.
The CEP service reaches the weather service app in-process through
httpx.ASGITransport; the weather service reaches the providers through
httpx.MockTransport.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from microservices.cep_service.factory import create_cep_service, create_cep_service_for_testing
from microservices.cep_service.main import create_app as create_cep_app
from microservices.weather_service.factory import (
    create_weather_service,
    create_weather_service_for_testing,
)
from microservices.weather_service.main import create_app as create_weather_app

from .mocks import (
    MockLocationResolver,
    MockProviderApi,
    MockWeatherResolver,
    MockWeatherServiceClient,
)


# =============================================================================
# Providers and tracing
# =============================================================================

@pytest.fixture
def provider_api():
    """ViaCEP + WeatherAPI stand-in"""
    return MockProviderApi()


@pytest.fixture
def provider_transport(provider_api):
    return httpx.MockTransport(provider_api.handler)


@pytest.fixture
def weather_tracing(recording_tracing_factory):
    return recording_tracing_factory("weather_service")


@pytest.fixture
def cep_tracing(recording_tracing_factory):
    return recording_tracing_factory("cep_service")


@pytest.fixture
def weather_config(factory):
    return factory.make_weather_service_config()


@pytest.fixture
def cep_config(factory):
    return factory.make_cep_service_config()


# =============================================================================
# Weather service (Service B)
# =============================================================================

@pytest.fixture
def mock_location_resolver():
    return MockLocationResolver()


@pytest.fixture
def mock_weather_resolver():
    return MockWeatherResolver()


@pytest.fixture
def weather_service_with_mocks(mock_location_resolver, mock_weather_resolver, weather_tracing):
    """WeatherService with mock resolvers"""
    return create_weather_service_for_testing(
        mock_location_resolver,
        mock_weather_resolver,
        weather_tracing.manager,
    )


@pytest.fixture
def weather_app(weather_config, weather_tracing, provider_transport):
    """Weather service app whose provider clients talk to MockProviderApi"""
    service = create_weather_service(weather_config, weather_tracing.manager, transport=provider_transport)
    return create_weather_app(weather_config, tracing=weather_tracing.manager, service=service)


@pytest.fixture
def weather_client(weather_app):
    return TestClient(weather_app)


# =============================================================================
# CEP service (Service A)
# =============================================================================

@pytest.fixture
def mock_weather_service_client():
    return MockWeatherServiceClient()


@pytest.fixture
def cep_app_with_mock(cep_config, cep_tracing, mock_weather_service_client):
    """CEP service app with a mock weather service client"""
    service = create_cep_service_for_testing(mock_weather_service_client, cep_tracing.manager)
    return create_cep_app(cep_config, tracing=cep_tracing.manager, service=service)


@pytest.fixture
def cep_client_with_mock(cep_app_with_mock):
    return TestClient(cep_app_with_mock)


@pytest.fixture
def cep_app(cep_config, cep_tracing, weather_app):
    """CEP service app forwarding to the in-process weather service app"""
    service = create_cep_service(
        cep_config,
        cep_tracing.manager,
        transport=httpx.ASGITransport(app=weather_app),
    )
    return create_cep_app(cep_config, tracing=cep_tracing.manager, service=service)


@pytest.fixture
def cep_client(cep_app):
    return TestClient(cep_app)
