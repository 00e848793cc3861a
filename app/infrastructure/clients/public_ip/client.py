"""Public IP discovery client for self-lookups.

Resolves the public address of the machine running the service, along with
whatever location metadata the discovery endpoint reports for it.
"""

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import urlparse

import requests

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_request_error

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


@dataclass
class PublicIpLookup:
    """Public address of this host and its reported metadata."""

    ip: str
    provider: str
    hostname: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    time_zone: Optional[str] = None
    asn_org: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary format."""
        return asdict(self)


def _parse_loc(loc: Any) -> tuple[Optional[float], Optional[float]]:
    """Split a ``"lat,lon"`` string into floats."""
    if not isinstance(loc, str) or "," not in loc:
        return None, None
    lat, _, lon = loc.partition(",")
    try:
        return float(lat), float(lon)
    except ValueError:
        return None, None


class PublicIpClient:
    """Client for the public IP discovery endpoint.

    Args:
        settings: Settings instance with the public_ip section
    """

    def __init__(self, settings: "Settings") -> None:
        self._url = settings.public_ip.PUBLIC_IP_LOOKUP_URL
        self._timeout: Optional[float] = settings.public_ip.PUBLIC_IP_TIMEOUT
        self._provider = urlparse(self._url).hostname or self._url
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        self._logger = logger.bind(component="public_ip_client")

    def lookup(self) -> OperationResult:
        """Discover the public address of this host.

        Returns:
            OperationResult with a PublicIpLookup as data, or an error result
            when the URL is unusable, the endpoint cannot be reached or its
            body has no ip
        """
        log = self._logger.bind(provider=self._provider)
        log.debug("public_ip_request")

        try:
            response = self._session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            payload: Any = response.json()
        except (requests.RequestException, ValueError) as e:
            result = classify_request_error(e)
            log.warning(
                "public_ip_request_failed", error_code=result.error_code, error=str(e)
            )
            return result

        if not isinstance(payload, dict) or not payload.get("ip"):
            log.warning("public_ip_missing_address")
            return OperationResult.transient_error(
                message="Public IP endpoint returned no address",
                error_code="INVALID_RESPONSE",
            )

        latitude, longitude = _parse_loc(payload.get("loc"))
        lookup = PublicIpLookup(
            ip=str(payload["ip"]),
            provider=self._provider,
            hostname=payload.get("hostname"),
            city=payload.get("city"),
            region=payload.get("region"),
            country=payload.get("country"),
            postal_code=payload.get("postal"),
            latitude=latitude,
            longitude=longitude,
            time_zone=payload.get("timezone"),
            asn_org=payload.get("org"),
        )

        log.debug("public_ip_resolved", ip_address=lookup.ip)
        return OperationResult.success(data=lookup, message="Public IP resolved")
