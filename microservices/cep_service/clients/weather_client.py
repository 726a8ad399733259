"""
Weather Service Client

Used by the CEP service to call weather_service. The answer is returned as-is
(any status code); only failing to reach the service is an error.
"""

import httpx
import logging

from core.exceptions import UpstreamError
from core.service_client_base import BaseServiceClient

from ..models import DownstreamResponse

logger = logging.getLogger(__name__)


class WeatherServiceClient(BaseServiceClient):
    """Weather Service HTTP client"""

    service_name = "weather_service"

    async def get_weather(self, cep: str) -> DownstreamResponse:
        """
        Get the temperature report for a CEP

        Args:
            cep: Validated 8-digit CEP

        Returns:
            DownstreamResponse with status, Content-Type and raw body

        Raises:
            UpstreamError: Transport failure or timeout
        """
        with self.tracing.start_span("forward_request_to_weather_service", attributes={"cep.input": cep}) as span:
            try:
                response = await self.get(f"/weather/{cep}")
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                self.tracing.record_error(span, e)
                logger.error(f"Failed to call weather service at {self.base_url}: {e!r}")
                raise UpstreamError("failed to call weather service", upstream=self.service_name) from e

            span.set_attribute("http.response.status_code", response.status_code)
            return DownstreamResponse(
                status_code=response.status_code,
                content_type=response.headers.get("content-type"),
                body=response.content,
            )


__all__ = ["WeatherServiceClient"]
