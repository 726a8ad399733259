"""
Weather Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that wires the HTTP provider clients.

Usage:
    from .factory import create_weather_service
    service = create_weather_service(config, tracing)
"""
from typing import Optional

import httpx

from core.config import WeatherServiceConfig
from core.tracing import TracingManager

from .clients import LocationClient, WeatherApiClient
from .protocols import LocationResolverProtocol, WeatherResolverProtocol
from .weather_service import WeatherService


def create_weather_service(
    config: WeatherServiceConfig,
    tracing: TracingManager,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> WeatherService:
    """
    Create WeatherService with the ViaCEP and WeatherAPI clients.

    Args:
        config: Weather service configuration (provider URLs, API key, timeouts)
        tracing: Tracing manager shared by the service and its clients
        transport: Optional httpx transport for both clients (tests route
            provider URLs to a mock transport)

    Returns:
        Configured WeatherService instance
    """
    location_client = LocationClient(
        config.viacep_base_url,
        tracing,
        timeout=config.location_api_timeout,
        transport=transport,
    )
    weather_client = WeatherApiClient(
        config.weather_api_base_url,
        config.weather_api_key,
        tracing,
        timeout=config.weather_api_timeout,
        transport=transport,
    )
    return WeatherService(
        location_resolver=location_client,
        weather_resolver=weather_client,
        tracing=tracing,
    )


def create_weather_service_for_testing(
    mock_location_resolver: LocationResolverProtocol,
    mock_weather_resolver: WeatherResolverProtocol,
    tracing: TracingManager,
) -> WeatherService:
    """
    Create WeatherService with mock resolvers for testing.

    Args:
        mock_location_resolver: Stand-in for the ViaCEP client
        mock_weather_resolver: Stand-in for the WeatherAPI client
        tracing: Tracing manager (tests typically use an in-memory exporter)

    Returns:
        WeatherService configured for testing
    """
    return WeatherService(
        location_resolver=mock_location_resolver,
        weather_resolver=mock_weather_resolver,
        tracing=tracing,
    )


__all__ = ["create_weather_service", "create_weather_service_for_testing"]
