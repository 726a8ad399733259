"""
Service Error Taxonomy

Errors shared by the CEP and weather services. Each carries the HTTP status
it maps to; routes translate them into HTTPException and the plain-text
handler in core.http_errors renders the message as the response body.
"""
from typing import Optional


class ConfigurationError(Exception):
    """Raised when required startup configuration is missing"""
    pass


class ServiceError(Exception):
    """Base exception for request-level failures"""
    status_code: int = 500
    default_message: str = "internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidZipcodeError(ServiceError):
    """Raised when a CEP is not exactly 8 decimal digits"""
    status_code = 422
    default_message = "invalid zipcode"


class ZipcodeNotFoundError(ServiceError):
    """Raised when the location provider reports the CEP does not exist"""
    status_code = 404
    default_message = "can not find zipcode"


class UpstreamError(ServiceError):
    """Raised when an external dependency fails (transport, timeout, status, decoding)"""
    status_code = 500
    default_message = "upstream service error"

    def __init__(
        self,
        message: Optional[str] = None,
        upstream: Optional[str] = None,
        upstream_status: Optional[int] = None,
    ):
        self.upstream = upstream
        self.upstream_status = upstream_status
        super().__init__(message)


class MethodNotAllowedError(ServiceError):
    """Raised when an endpoint is called with the wrong HTTP method"""
    status_code = 405
    default_message = "Method Not Allowed"


class BadRequestBodyError(ServiceError):
    """Raised when a request body cannot be read or decoded"""
    status_code = 400
    default_message = "error decoding request body"


__all__ = [
    "ConfigurationError",
    "ServiceError",
    "InvalidZipcodeError",
    "ZipcodeNotFoundError",
    "UpstreamError",
    "MethodNotAllowedError",
    "BadRequestBodyError",
]
