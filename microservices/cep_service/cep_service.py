"""
CEP Service - Business Logic

Validates the CEP posted by the caller and forwards it to the weather service.
Once validation passes the service is a content-agnostic relay.
"""

import logging
from pydantic import ValidationError

from core.exceptions import BadRequestBodyError, InvalidZipcodeError
from core.tracing import TracingManager
from core.zipcode import is_valid_cep

from .models import CepInput, DownstreamResponse
from .protocols import WeatherServiceClientProtocol

logger = logging.getLogger(__name__)


class CepService:
    """CEP validation and forwarding"""

    def __init__(self, weather_client: WeatherServiceClientProtocol, tracing: TracingManager):
        self.weather_client = weather_client
        self.tracing = tracing

    async def close(self):
        """Close the weather service client"""
        await self.weather_client.close()

    @staticmethod
    def parse_input(body: bytes) -> CepInput:
        """Decode the request body, raising BadRequestBodyError when it is not a CepInput"""
        try:
            return CepInput.model_validate_json(body)
        except ValidationError as e:
            logger.debug(f"Rejected request body: {e.error_count()} error(s)")
            raise BadRequestBodyError() from e

    async def forward(self, body: bytes) -> DownstreamResponse:
        """
        Validate the posted CEP and relay the weather service's answer

        Args:
            body: Raw request body, expected {"cep": "<8 digits>"}

        Returns:
            The weather service response, untouched

        Raises:
            BadRequestBodyError: body is not valid JSON of the expected shape
            InvalidZipcodeError: cep is not exactly 8 digits
            UpstreamError: weather service could not be reached
        """
        cep_input = self.parse_input(body)
        if not is_valid_cep(cep_input.cep):
            raise InvalidZipcodeError()

        self.tracing.current_span().set_attribute("cep.input", cep_input.cep)
        return await self.weather_client.get_weather(cep_input.cep)


__all__ = ["CepService"]
