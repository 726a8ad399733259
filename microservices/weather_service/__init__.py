"""
Weather Service Microservice

Service B - resolves a CEP to its city (ViaCEP) and current temperature
(WeatherAPI), reported in Celsius, Fahrenheit and Kelvin
"""

from .weather_service import WeatherService
from .models import (
    LocationResult,
    WeatherSample,
    TemperatureReport,
)

__version__ = "1.0.0"
__all__ = [
    "WeatherService",
    "LocationResult",
    "WeatherSample",
    "TemperatureReport",
]
