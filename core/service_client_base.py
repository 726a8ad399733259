"""
Base Service Client for Outbound HTTP Calls

Base class for every outbound client: the call from the CEP service to the
weather service and the weather service's calls to its external providers.
The httpx client is instrumented so each request carries the trace context.
"""

import asyncio
import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

from core.tracing import TracingManager

logger = logging.getLogger(__name__)


class BaseServiceClient(ABC):
    """
    Outbound client base class

    Handles:
    1. Base URL normalization
    2. Trace context propagation
    3. HTTP client management
    4. Timeout control (a deadline on the whole call, not per read)

    Example:
        class LocationClient(BaseServiceClient):
            service_name = "viacep"

            async def resolve(self, cep: str):
                response = await self.get(f"/{cep}/json/")
                return response.json()
    """

    # Subclasses must define this
    service_name: str = None  # e.g. "viacep"

    def __init__(
        self,
        base_url: str,
        tracing: TracingManager,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client

        Args:
            base_url: Base URL of the remote service
            tracing: Tracing manager used to instrument the HTTP client
            timeout: Total time allowed for one call (seconds), from connect
                to the last body byte
            transport: Optional httpx transport (tests inject mock transports)
        """
        if not self.service_name:
            raise ValueError(f"{self.__class__.__name__} must define 'service_name'")

        self.base_url = base_url.rstrip('/')
        self.tracing = tracing
        self.timeout = timeout

        self.client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"User-Agent": f"cep-weather/{self.service_name}"}
        )
        tracing.instrument_client(self.client)

        logger.debug(f"Initialized {self.service_name} client: {self.base_url} (timeout={timeout}s)")

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()
        logger.debug(f"Closed {self.service_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================
    # HTTP methods
    # ========================================

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """
        GET request bounded by self.timeout overall

        Raises:
            httpx.TimeoutException: The call did not finish within self.timeout
            httpx.HTTPError: Any other transport failure
        """
        url = f"{self.base_url}{path}"
        try:
            return await asyncio.wait_for(
                self.client.get(url, params=params, headers=headers),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise httpx.TimeoutException(
                f"{self.service_name} call exceeded {self.timeout}s"
            ) from e


__all__ = ["BaseServiceClient"]
