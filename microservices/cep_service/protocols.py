"""
CEP Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Protocol, runtime_checkable

from .models import DownstreamResponse


@runtime_checkable
class WeatherServiceClientProtocol(Protocol):
    """
    Client for weather_service (Service B).

    Implementations:
    - WeatherServiceClient (production - HTTP)
    - MockWeatherServiceClient (testing)
    """

    async def get_weather(self, cep: str) -> DownstreamResponse:
        """
        Call GET /weather/{cep} and return the raw answer, whatever its status.

        Raises:
            UpstreamError: Request could not be built or sent
        """
        ...

    async def close(self) -> None:
        """Close HTTP client."""
        ...
