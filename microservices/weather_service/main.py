"""
Weather Service - Main Application

Service B: resolves a CEP to its city and current temperature.

    GET /weather/{cep} -> {"city", "temp_C", "temp_F", "temp_K"}
"""

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from contextlib import asynccontextmanager
from typing import Optional
import asyncio
import logging
import sys

from core.config import WeatherServiceConfig, load_environment
from core.exceptions import ConfigurationError, ServiceError
from core.http_errors import register_error_handlers
from core.lifecycle import start
from core.logger import setup_service_logger
from core.tracing import TracingManager
from .factory import create_weather_service
from .models import TemperatureReport
from .weather_service import WeatherService

SERVICE_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


class WeatherMicroservice:
    """Per-process state: configuration, tracing and the business service"""

    def __init__(self, config: WeatherServiceConfig, tracing: TracingManager, service: WeatherService):
        self.config = config
        self.tracing = tracing
        self.service = service

    async def shutdown(self):
        await self.service.close()
        self.tracing.shutdown()
        logger.info("Weather service shutting down")


def get_microservice(request: Request) -> WeatherMicroservice:
    return request.app.state.microservice


router = APIRouter()


# =============================================================================
# Health Check
# =============================================================================

@router.get("/health")
async def health_check(microservice: WeatherMicroservice = Depends(get_microservice)):
    """Health check"""
    return {
        "status": "healthy",
        "service": microservice.config.service_name,
        "version": SERVICE_VERSION
    }


# =============================================================================
# Weather Endpoint
# =============================================================================

@router.get("/weather/{cep:path}", response_model=TemperatureReport)
async def get_weather_by_cep(
    cep: str,
    microservice: WeatherMicroservice = Depends(get_microservice)
):
    """
    Get the current temperature for a CEP

    - **cep**: 8-digit Brazilian postal code, no separators

    Errors are plain text: 422 `invalid zipcode`, 404 `can not find zipcode`,
    500 with the upstream failure message.
    """
    with microservice.tracing.start_span("weather_handler_orchestration"):
        try:
            return await microservice.service.get_temperature(cep)

        except ServiceError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)
        except Exception as e:
            logger.error(f"Error getting weather for {cep}: {e}")
            raise HTTPException(status_code=500, detail="internal server error")


# =============================================================================
# Application Factory
# =============================================================================

def create_app(
    config: Optional[WeatherServiceConfig] = None,
    tracing: Optional[TracingManager] = None,
    service: Optional[WeatherService] = None,
) -> FastAPI:
    """
    Build the weather service application

    Args:
        config: Service configuration (defaults to the environment; raises
            ConfigurationError without WEATHER_API_KEY)
        tracing: Tracing manager (defaults to one exporting over OTLP)
        service: Business service (defaults to the real provider clients)
    """
    if config is None:
        load_environment()
        config = WeatherServiceConfig.from_env()

    setup_service_logger(config.service_name, config.logging)
    tracing = tracing or TracingManager(config.service_name, config.tracing)
    service = service or create_weather_service(config, tracing)
    microservice = WeatherMicroservice(config, tracing, service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle"""
        logger.info(f"✅ Weather service ready (viacep={config.viacep_base_url}, weatherapi={config.weather_api_base_url})")
        yield
        await microservice.shutdown()

    app = FastAPI(
        title="Weather Service",
        description="Resolves a CEP to its city and current temperature",
        version=SERVICE_VERSION,
        lifespan=lifespan
    )
    app.state.microservice = microservice
    register_error_handlers(app)
    app.include_router(router)
    tracing.instrument_app(app)
    return app


# =============================================================================
# Main Entry Point
# =============================================================================

async def serve(config: WeatherServiceConfig) -> None:
    app = create_app(config)
    handle = await start(app, host=config.service_host, port=config.service_port)
    await handle.wait_closed()


def main() -> None:
    load_environment()
    try:
        service_config = WeatherServiceConfig.from_env()
    except ConfigurationError as e:
        setup_service_logger("weather_service")
        logger.critical(f"❌ {e}")
        sys.exit(1)

    asyncio.run(serve(service_config))


if __name__ == "__main__":
    main()
