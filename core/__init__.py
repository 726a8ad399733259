#!/usr/bin/env python3
"""
Core Module for the CEP Weather Services

Shared components for the two microservices (cep_service and weather_service).

COMPONENTS:
    - config/: Dataclass configuration loaded from the environment
    - logger.py: Service logger setup
    - tracing.py: OpenTelemetry tracer and W3C trace context propagation
    - service_client_base.py: Base class for outbound HTTP clients
    - exceptions.py: Error taxonomy shared by both services
    - http_errors.py: Plain-text rendering of HTTP errors
    - lifecycle.py: Explicit start/stop of a uvicorn server
    - zipcode.py: CEP validation

USAGE:
    from core.config import WeatherServiceConfig
    from core.tracing import TracingManager

    config = WeatherServiceConfig.from_env()
    tracing = TracingManager(config.service_name, config.tracing)
"""

from .exceptions import (
    ConfigurationError,
    ServiceError,
    InvalidZipcodeError,
    ZipcodeNotFoundError,
    UpstreamError,
    MethodNotAllowedError,
    BadRequestBodyError,
)
from .zipcode import is_valid_cep

__all__ = [
    "ConfigurationError",
    "ServiceError",
    "InvalidZipcodeError",
    "ZipcodeNotFoundError",
    "UpstreamError",
    "MethodNotAllowedError",
    "BadRequestBodyError",
    "is_valid_cep",
]

__version__ = "1.0.0"
