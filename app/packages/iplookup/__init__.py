"""IP lookup package - IP geolocation via an upstream provider."""

from packages.iplookup.routes import router as iplookup_router
from packages.iplookup.schemas import LookupRequest, LookupResponse
from packages.iplookup.service import lookup_ip

__all__ = [
    "iplookup_router",
    "lookup_ip",
    "LookupRequest",
    "LookupResponse",
]
