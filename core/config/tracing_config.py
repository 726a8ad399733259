#!/usr/bin/env python3
"""Distributed tracing configuration (OpenTelemetry)"""
import os
from dataclasses import dataclass


def _bool(val: str) -> bool:
    return val.lower() == "true"


@dataclass
class TracingConfig:
    """OpenTelemetry exporter settings"""
    enabled: bool = True
    otlp_endpoint: str = "otel-collector:4317"
    otlp_insecure: bool = True

    @classmethod
    def from_env(cls) -> 'TracingConfig':
        """Load tracing config from environment variables"""
        return cls(
            enabled=_bool(os.getenv("TRACING_ENABLED", "true")),
            otlp_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "otel-collector:4317"),
            otlp_insecure=_bool(os.getenv("OTEL_EXPORTER_OTLP_INSECURE", "true")),
        )
