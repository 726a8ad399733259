#!/usr/bin/env python3
"""Service configuration for the CEP and weather services

Each service reads its own settings once at startup; the resulting object
is passed into the app factory and from there into every client.
"""
import os
from dataclasses import dataclass, field

from core.exceptions import ConfigurationError

from .logging_config import LoggingConfig
from .tracing_config import TracingConfig


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class CepServiceConfig:
    """Service A - validates the CEP and forwards to the weather service"""

    service_name: str = "cep_service"
    service_host: str = "0.0.0.0"
    service_port: int = 8080

    # ===========================================
    # Downstream weather service
    # ===========================================
    weather_service_url: str = "http://service-b:8081"
    weather_service_timeout: float = 10.0

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)

    @classmethod
    def from_env(cls) -> 'CepServiceConfig':
        """Load service A configuration from environment variables"""
        return cls(
            service_host=os.getenv("SERVICE_HOST", "0.0.0.0"),
            service_port=_int(os.getenv("CEP_SERVICE_PORT", "8080"), 8080),
            weather_service_url=os.getenv("WEATHER_SERVICE_URL") or os.getenv("SERVICE_B_URL", "http://service-b:8081"),
            weather_service_timeout=_float(os.getenv("WEATHER_SERVICE_TIMEOUT", "10.0"), 10.0),
            logging=LoggingConfig.from_env("cep_service"),
            tracing=TracingConfig.from_env(),
        )


@dataclass
class WeatherServiceConfig:
    """Service B - resolves the CEP location and its current temperature"""

    weather_api_key: str
    service_name: str = "weather_service"
    service_host: str = "0.0.0.0"
    service_port: int = 8081

    # ===========================================
    # External providers
    # ===========================================
    viacep_base_url: str = "https://viacep.com.br/ws"
    weather_api_base_url: str = "https://api.weatherapi.com/v1"
    location_api_timeout: float = 5.0
    weather_api_timeout: float = 5.0

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)

    @classmethod
    def from_env(cls) -> 'WeatherServiceConfig':
        """
        Load service B configuration from environment variables

        Raises:
            ConfigurationError: WEATHER_API_KEY is missing or empty
        """
        api_key = os.getenv("WEATHER_API_KEY", "")
        if not api_key:
            raise ConfigurationError("WEATHER_API_KEY environment variable not set")

        return cls(
            weather_api_key=api_key,
            service_host=os.getenv("SERVICE_HOST", "0.0.0.0"),
            service_port=_int(os.getenv("WEATHER_SERVICE_PORT", "8081"), 8081),
            viacep_base_url=os.getenv("VIACEP_BASE_URL", "https://viacep.com.br/ws"),
            weather_api_base_url=os.getenv("WEATHER_API_BASE_URL", "https://api.weatherapi.com/v1"),
            location_api_timeout=_float(os.getenv("LOCATION_API_TIMEOUT", "5.0"), 5.0),
            weather_api_timeout=_float(os.getenv("WEATHER_API_TIMEOUT", "5.0"), 5.0),
            logging=LoggingConfig.from_env("weather_service"),
            tracing=TracingConfig.from_env(),
        )
