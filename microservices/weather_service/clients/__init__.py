"""
Weather Service Clients

External providers called by the weather service
"""
from .location_client import LocationClient
from .weather_api_client import WeatherApiClient

__all__ = ["LocationClient", "WeatherApiClient"]
