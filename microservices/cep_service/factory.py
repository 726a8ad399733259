"""
CEP Service Factory

Factory functions for creating service instances with real dependencies.

Usage:
    from .factory import create_cep_service
    service = create_cep_service(config, tracing)
"""
from typing import Optional

import httpx

from core.config import CepServiceConfig
from core.tracing import TracingManager

from .cep_service import CepService
from .clients import WeatherServiceClient
from .protocols import WeatherServiceClientProtocol


def create_cep_service(
    config: CepServiceConfig,
    tracing: TracingManager,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CepService:
    """
    Create CepService with the HTTP weather service client.

    Args:
        config: CEP service configuration (downstream URL and timeout)
        tracing: Tracing manager shared by the service and its client
        transport: Optional httpx transport (tests pass an ASGITransport
            wrapping the weather service app)

    Returns:
        Configured CepService instance
    """
    weather_client = WeatherServiceClient(
        config.weather_service_url,
        tracing,
        timeout=config.weather_service_timeout,
        transport=transport,
    )
    return CepService(weather_client=weather_client, tracing=tracing)


def create_cep_service_for_testing(
    mock_weather_client: WeatherServiceClientProtocol,
    tracing: TracingManager,
) -> CepService:
    """
    Create CepService with a mock weather service client for testing.
    """
    return CepService(weather_client=mock_weather_client, tracing=tracing)


__all__ = ["create_cep_service", "create_cep_service_for_testing"]
