"""
Location Client (ViaCEP)

Resolves a CEP to its locality. ViaCEP answers unknown CEPs with a normal
payload flagged {"erro": true}; that flag becomes ZipcodeNotFoundError.
"""

import httpx
import logging
from pydantic import ValidationError

from core.exceptions import UpstreamError, ZipcodeNotFoundError
from core.service_client_base import BaseServiceClient

from ..models import LocationResult, ViaCepResponse

logger = logging.getLogger(__name__)


class LocationClient(BaseServiceClient):
    """ViaCEP HTTP client"""

    service_name = "viacep"

    async def resolve(self, cep: str) -> LocationResult:
        """
        Look up the locality for a CEP

        Args:
            cep: Validated 8-digit CEP

        Returns:
            LocationResult with found=True

        Raises:
            UpstreamError: Transport failure, timeout, undecodable payload or missing locality
            ZipcodeNotFoundError: ViaCEP reports the CEP does not exist
        """
        with self.tracing.start_span("get_location_from_cep_api", attributes={"cep.input": cep}) as span:
            try:
                response = await self.get(f"/{cep}/json/")
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                self.tracing.record_error(span, e)
                logger.error(f"Location lookup failed for {cep}: {e!r}")
                raise UpstreamError("error fetching location data", upstream=self.service_name) from e

            span.set_attribute("http.response.status_code", response.status_code)

            try:
                payload = ViaCepResponse.model_validate_json(response.content)
            except ValidationError as e:
                self.tracing.record_error(span, e)
                logger.error(f"Undecodable location payload for {cep} (status {response.status_code})")
                raise UpstreamError(
                    "error decoding location data",
                    upstream=self.service_name,
                    upstream_status=response.status_code,
                ) from e

            result = LocationResult(locality_name=payload.localidade, found=not payload.erro)
            if not result.found:
                logger.info(f"CEP {cep} not found")
                raise ZipcodeNotFoundError()

            if not result.locality_name:
                error = UpstreamError("location data has no locality", upstream=self.service_name)
                self.tracing.record_error(span, error)
                raise error

            span.set_attribute("city.name", result.locality_name)
            return result


__all__ = ["LocationClient"]
