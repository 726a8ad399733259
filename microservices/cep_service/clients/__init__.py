"""
CEP Service Clients

HTTP clients for synchronous communication with other microservices.
"""
from .weather_client import WeatherServiceClient

__all__ = ["WeatherServiceClient"]
