"""
Weather API Client (WeatherAPI.com)

Fetches the current temperature for a locality. One attempt per call; any
failure surfaces as UpstreamError.
"""

import httpx
import logging
from typing import Optional
from pydantic import ValidationError

from core.exceptions import UpstreamError
from core.service_client_base import BaseServiceClient
from core.tracing import TracingManager

from ..models import WeatherApiResponse, WeatherSample

logger = logging.getLogger(__name__)


class WeatherApiClient(BaseServiceClient):
    """WeatherAPI HTTP client"""

    service_name = "weatherapi"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        tracing: TracingManager,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        super().__init__(base_url, tracing, timeout=timeout, transport=transport)
        self.api_key = api_key

    async def resolve(self, locality: str) -> WeatherSample:
        """
        Get the current temperature for a locality

        Args:
            locality: City name as returned by the location lookup (query-escaped here)

        Returns:
            WeatherSample in Celsius

        Raises:
            UpstreamError: Transport failure, timeout, non-200 status or undecodable payload
        """
        with self.tracing.start_span("get_weather_from_weather_api", attributes={"city.name": locality}) as span:
            params = {
                "key": self.api_key,
                "q": locality,
                "aqi": "no"
            }

            try:
                response = await self.get("/current.json", params=params)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                self.tracing.record_error(span, e)
                logger.error(f"Weather lookup failed for {locality}: {e!r}")
                raise UpstreamError("error fetching weather data", upstream=self.service_name) from e

            span.set_attribute("http.response.status_code", response.status_code)

            if response.status_code != 200:
                error = UpstreamError(
                    f"weather API returned status {response.status_code}",
                    upstream=self.service_name,
                    upstream_status=response.status_code,
                )
                self.tracing.record_error(span, error)
                logger.error(f"Weather API error for {locality}: {response.status_code}")
                raise error

            try:
                payload = WeatherApiResponse.model_validate_json(response.content)
            except ValidationError as e:
                self.tracing.record_error(span, e)
                logger.error(f"Undecodable weather payload for {locality}")
                raise UpstreamError(
                    "error decoding weather data",
                    upstream=self.service_name,
                    upstream_status=response.status_code,
                ) from e

            span.set_attribute("temperature.celsius", payload.current.temp_c)
            return WeatherSample(celsius=payload.current.temp_c)


__all__ = ["WeatherApiClient"]
