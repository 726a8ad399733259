"""
CEP Service Microservice

Service A - validates a posted CEP and relays the weather service's answer
"""

from .cep_service import CepService
from .models import CepInput, DownstreamResponse

__version__ = "1.0.0"
__all__ = [
    "CepService",
    "CepInput",
    "DownstreamResponse",
]
