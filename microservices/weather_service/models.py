"""
Weather Service Models

Domain results produced by the resolvers, the response report, and the
payload shapes of the two external providers.
"""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Domain Models
# =============================================================================

class LocationResult(BaseModel):
    """Locality resolved from a CEP"""
    locality_name: str = Field(..., description="City name reported by the CEP provider")
    found: bool = Field(True, description="False when the provider reports an unknown CEP")


class WeatherSample(BaseModel):
    """Current temperature for a locality"""
    celsius: float = Field(..., description="Current temperature in Celsius")


class TemperatureReport(BaseModel):
    """Response body of GET /weather/{cep}"""
    city: str
    temp_C: float
    temp_F: float
    temp_K: float

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "city": "São Paulo",
                "temp_C": 21.0,
                "temp_F": 69.8,
                "temp_K": 294.0
            }
        }
    )


# =============================================================================
# External Provider Payloads
# =============================================================================

class ViaCepResponse(BaseModel):
    """ViaCEP /{cep}/json/ payload (only the fields this service reads)"""
    localidade: str = ""
    # ViaCEP has sent both true and "true" for unknown CEPs
    erro: bool = False


class WeatherApiCurrent(BaseModel):
    temp_c: float


class WeatherApiResponse(BaseModel):
    """WeatherAPI /current.json payload (only the fields this service reads)"""
    current: WeatherApiCurrent


__all__ = [
    "LocationResult",
    "WeatherSample",
    "TemperatureReport",
    "ViaCepResponse",
    "WeatherApiCurrent",
    "WeatherApiResponse",
]
