"""
Weather Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import LocationResult, WeatherSample


# =============================================================================
# Location Resolver Protocol
# =============================================================================


@runtime_checkable
class LocationResolverProtocol(Protocol):
    """
    Interface for CEP -> locality lookups.

    Implementations:
    - LocationClient (production - ViaCEP)
    - MockLocationResolver (testing)
    """

    async def resolve(self, cep: str) -> LocationResult:
        """
        Resolve a validated CEP.

        Raises:
            ZipcodeNotFoundError: CEP does not exist
            UpstreamError: Provider unreachable or payload unusable
        """
        ...

    async def close(self) -> None:
        """Close HTTP client connections."""
        ...


# =============================================================================
# Weather Resolver Protocol
# =============================================================================


@runtime_checkable
class WeatherResolverProtocol(Protocol):
    """
    Interface for locality -> current temperature lookups.

    Implementations:
    - WeatherApiClient (production - WeatherAPI.com)
    - MockWeatherResolver (testing)
    """

    async def resolve(self, locality: str) -> WeatherSample:
        """
        Fetch the current temperature.

        Raises:
            UpstreamError: Provider unreachable, non-200 status or payload unusable
        """
        ...

    async def close(self) -> None:
        """Close HTTP client connections."""
        ...
