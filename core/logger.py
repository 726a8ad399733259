"""
Service Logger Setup

Configures the root handlers once per process and hands back the service's
named logger. Modules keep using logging.getLogger(__name__).
"""
import logging
import sys
from typing import Optional

from core.config.logging_config import LoggingConfig

# Set on handlers installed here; their presence on the root logger means setup already ran
HANDLER_MARKER = "_cep_weather_handler"


def _root_configured(root: logging.Logger) -> bool:
    return any(getattr(handler, HANDLER_MARKER, False) for handler in root.handlers)


def setup_service_logger(service_name: str, config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure logging for a microservice

    Args:
        service_name: Logger name, usually the service package name
        config: Logging configuration (defaults to LoggingConfig.from_env())

    Returns:
        Logger for the service
    """
    config = config or LoggingConfig.from_env(service_name)
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    root = logging.getLogger()

    if not _root_configured(root):
        formatter = logging.Formatter(config.log_format)
        handlers = [logging.StreamHandler(sys.stdout)]
        if config.log_file:
            handlers.append(logging.FileHandler(config.log_file))

        for handler in handlers:
            handler.setFormatter(formatter)
            setattr(handler, HANDLER_MARKER, True)
            root.addHandler(handler)

        # httpx logs every request at INFO, including query strings with API keys
        logging.getLogger("httpx").setLevel(logging.WARNING)

    root.setLevel(level)
    logger = logging.getLogger(service_name)
    logger.setLevel(level)
    return logger


__all__ = ["setup_service_logger", "HANDLER_MARKER"]
