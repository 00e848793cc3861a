"""Pydantic schemas for iplookup package."""

import ipaddress
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LookupRequest(BaseModel):
    """Request to look up an IP address, or this host's own address."""

    ip: Optional[str] = Field(
        None,
        description="IPv4 or IPv6 address to look up. Omit or null for a self-lookup",
        examples=["8.8.8.8", "2001:4860:4860::8888", None],
    )

    @field_validator("ip")
    @classmethod
    def validate_ip_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate IP address format."""
        if v is None:
            return v
        try:
            ipaddress.ip_address(v)
            return v
        except ValueError:
            raise ValueError(f"Invalid IP address format: {v}")


class LookupResponse(BaseModel):
    """Normalized lookup result wrapping the provider's raw payload."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ip": "8.8.8.8",
                "raw": {
                    "status": "success",
                    "country": "United States",
                    "countryCode": "US",
                    "city": "Ashburn",
                    "isp": "Google LLC",
                    "query": "8.8.8.8",
                },
                "latency_ms": 42,
                "request_id": "6f1c2b7e-3f4a-4c1e-9a51-0d2f7c1b9e10",
            }
        }
    )

    ip: str = Field(..., description="Resolved IP address, or 'unknown'")
    raw: Any = Field(
        ...,
        description=(
            "Provider payload: the ip-api JSON document for explicit lookups, "
            "the structured public IP record for self-lookups"
        ),
    )
    latency_ms: int = Field(..., ge=0, description="Upstream call duration in ms")
    request_id: str = Field(..., description="Correlation id for this request")
