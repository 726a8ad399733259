"""
Weather Service - Business Logic

Resolves a CEP to its city and current temperature:
validate -> location lookup -> weather lookup -> unit conversion.
Each step needs the previous step's output, so the calls run strictly in
sequence and the first failure ends the request.
"""

import logging

from core.exceptions import InvalidZipcodeError
from core.tracing import TracingManager
from core.zipcode import is_valid_cep

from .converter import convert
from .models import TemperatureReport
from .protocols import LocationResolverProtocol, WeatherResolverProtocol

logger = logging.getLogger(__name__)


class WeatherService:
    """CEP temperature lookup"""

    def __init__(
        self,
        location_resolver: LocationResolverProtocol,
        weather_resolver: WeatherResolverProtocol,
        tracing: TracingManager,
    ):
        self.location_resolver = location_resolver
        self.weather_resolver = weather_resolver
        self.tracing = tracing

    async def close(self):
        """Close provider clients"""
        await self.location_resolver.close()
        await self.weather_resolver.close()

    async def get_temperature(self, cep: str) -> TemperatureReport:
        """
        Build the temperature report for a CEP

        Args:
            cep: Raw CEP taken from the request path

        Returns:
            TemperatureReport with Celsius, Fahrenheit and Kelvin

        Raises:
            InvalidZipcodeError: cep is not exactly 8 digits
            ZipcodeNotFoundError: location provider does not know the CEP
            UpstreamError: either provider failed
        """
        if not is_valid_cep(cep):
            raise InvalidZipcodeError()

        span = self.tracing.current_span()
        span.set_attribute("cep.input", cep)

        location = await self.location_resolver.resolve(cep)
        span.set_attribute("city.name", location.locality_name)

        weather = await self.weather_resolver.resolve(location.locality_name)
        span.set_attribute("temperature.celsius", weather.celsius)

        fahrenheit, kelvin = convert(weather.celsius)
        logger.debug(f"CEP {cep} -> {location.locality_name}: {weather.celsius}C")

        return TemperatureReport(
            city=location.locality_name,
            temp_C=weather.celsius,
            temp_F=fahrenheit,
            temp_K=kelvin,
        )


__all__ = ["WeatherService"]
