"""
CEP Service Models

Request body of Service A and the relayed downstream response
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CepInput(BaseModel):
    """Body of POST / - unknown fields are ignored, a missing cep is empty"""
    cep: str = Field("", description="8-digit CEP, no separators")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cep": "01001000"
            }
        }
    )


class DownstreamResponse(BaseModel):
    """Weather service answer, relayed to the caller untouched"""
    status_code: int
    content_type: Optional[str] = None
    body: bytes = b""


__all__ = ["CepInput", "DownstreamResponse"]
