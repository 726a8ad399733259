#!/usr/bin/env python3
"""Modular configuration system for the CEP weather services

Configuration hierarchy:
- logging_config: Logging configuration
- tracing_config: OpenTelemetry exporter settings
- service_config: Per-service settings (ports, downstream URLs, API keys)
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .tracing_config import TracingConfig
from .service_config import CepServiceConfig, WeatherServiceConfig

env_files = {
    "development": ".env",
    "dev": ".env",
    "testing": ".env.test",
    "test": ".env.test",
    "production": ".env.production",
}


def load_environment() -> str:
    """
    Load the dotenv file matching ENV without overriding real variables.

    Returns:
        Path of the env file that was looked up
    """
    env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
    env_file = env_files.get(env, ".env")
    load_dotenv(env_file, override=False)
    return env_file


__all__ = [
    'load_environment',
    'LoggingConfig',
    'TracingConfig',
    'CepServiceConfig',
    'WeatherServiceConfig',
]
