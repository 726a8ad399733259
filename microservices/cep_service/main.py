"""
CEP Service - Main Application

Service A: validates a posted CEP and relays the weather service's answer.

    POST / {"cep": "01001000"} -> weather service status, Content-Type and body
"""

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response
from starlette.requests import ClientDisconnect
from contextlib import asynccontextmanager
from typing import Optional
import asyncio
import logging

from core.config import CepServiceConfig, load_environment
from core.exceptions import BadRequestBodyError, MethodNotAllowedError, ServiceError
from core.http_errors import register_error_handlers
from core.lifecycle import start
from core.logger import setup_service_logger
from core.tracing import TracingManager
from .cep_service import CepService
from .factory import create_cep_service

SERVICE_VERSION = "1.0.0"

# Every method is routed here so that non-POST requests get the 405 answer
# before the body is read.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

logger = logging.getLogger(__name__)


class CepMicroservice:
    """Per-process state: configuration, tracing and the business service"""

    def __init__(self, config: CepServiceConfig, tracing: TracingManager, service: CepService):
        self.config = config
        self.tracing = tracing
        self.service = service

    async def shutdown(self):
        await self.service.close()
        self.tracing.shutdown()
        logger.info("CEP service shutting down")


def get_microservice(request: Request) -> CepMicroservice:
    return request.app.state.microservice


router = APIRouter()


# =============================================================================
# Health Check
# =============================================================================

@router.get("/health")
async def health_check(microservice: CepMicroservice = Depends(get_microservice)):
    """Health check"""
    return {
        "status": "healthy",
        "service": microservice.config.service_name,
        "version": SERVICE_VERSION
    }


# =============================================================================
# CEP Endpoint
# =============================================================================

@router.api_route("/", methods=ALL_METHODS)
async def handle_cep_request(
    request: Request,
    microservice: CepMicroservice = Depends(get_microservice)
):
    """
    Forward a CEP to the weather service

    Body: `{"cep": "01001000"}`. Answers 405 for other methods, 400 for an
    undecodable body, 422 `invalid zipcode`, 500 when the weather service is
    unreachable; otherwise the weather service response verbatim.
    """
    if request.method != "POST":
        error = MethodNotAllowedError()
        raise HTTPException(status_code=error.status_code, detail=error.message, headers={"Allow": "POST"})

    with microservice.tracing.start_span("handle_cep_request"):
        try:
            try:
                body = await request.body()
            except ClientDisconnect as e:
                raise BadRequestBodyError("error reading request body") from e

            downstream = await microservice.service.forward(body)

        except ServiceError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)
        except Exception as e:
            logger.error(f"Error forwarding CEP request: {e}")
            raise HTTPException(status_code=500, detail="internal server error")

    headers = {"Content-Type": downstream.content_type} if downstream.content_type else None
    return Response(content=downstream.body, status_code=downstream.status_code, headers=headers)


# =============================================================================
# Application Factory
# =============================================================================

def create_app(
    config: Optional[CepServiceConfig] = None,
    tracing: Optional[TracingManager] = None,
    service: Optional[CepService] = None,
) -> FastAPI:
    """
    Build the CEP service application

    Args:
        config: Service configuration (defaults to the environment)
        tracing: Tracing manager (defaults to one exporting over OTLP)
        service: Business service (defaults to the HTTP weather service client)
    """
    if config is None:
        load_environment()
        config = CepServiceConfig.from_env()

    setup_service_logger(config.service_name, config.logging)
    tracing = tracing or TracingManager(config.service_name, config.tracing)
    service = service or create_cep_service(config, tracing)
    microservice = CepMicroservice(config, tracing, service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle"""
        logger.info(f"✅ CEP service ready (weather_service={config.weather_service_url})")
        yield
        await microservice.shutdown()

    app = FastAPI(
        title="CEP Service",
        description="Validates a CEP and forwards it to the weather service",
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

async def serve(config: CepServiceConfig) -> None:
    app = create_app(config)
    handle = await start(app, host=config.service_host, port=config.service_port)
    await handle.wait_closed()


def main() -> None:
    load_environment()
    asyncio.run(serve(CepServiceConfig.from_env()))


if __name__ == "__main__":
    main()
