"""ip-api.com client for explicit IP geolocation.

Issues a single GET against the provider's JSON endpoint and returns the
decoded body unchanged inside an OperationResult.
"""

from typing import TYPE_CHECKING, Any, Optional

import requests

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_request_error

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


class IpApiClient:
    """Client for the ip-api.com geolocation API.

    All methods return OperationResult for consistent error handling.
    Requests are never retried.

    Args:
        settings: Settings instance with the ip_api section
    """

    def __init__(self, settings: "Settings") -> None:
        self._base_url = settings.ip_api.IP_API_BASE_URL.rstrip("/")
        self._fields = settings.ip_api.IP_API_FIELDS
        self._timeout: Optional[float] = settings.ip_api.IP_API_TIMEOUT
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        self._logger = logger.bind(component="ip_api_client")

    def build_url(self, ip_address: str) -> str:
        """Return the provider URL for an IP address."""
        return f"{self._base_url}/{ip_address}"

    def lookup(self, ip_address: str) -> OperationResult:
        """Look up geolocation data for an IP address.

        Args:
            ip_address: IPv4 or IPv6 address to query

        Returns:
            OperationResult with the provider's JSON body as data, a transient
            error when the provider cannot be reached or replies with something
            that is not a JSON object, or a permanent error for an unusable URL
        """
        log = self._logger.bind(ip_address=ip_address)
        log.debug("ip_api_request")

        try:
            response = self._session.get(
                self.build_url(ip_address),
                params={"fields": self._fields},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload: Any = response.json()
        except (requests.RequestException, ValueError) as e:
            result = classify_request_error(e)
            log.warning(
                "ip_api_request_failed", error_code=result.error_code, error=str(e)
            )
            return result

        if not isinstance(payload, dict):
            log.warning("ip_api_unexpected_body", body_type=type(payload).__name__)
            return OperationResult.transient_error(
                message="ip-api returned a non-object JSON body",
                error_code="INVALID_RESPONSE",
            )

        # status=fail (private range, reserved address) is passed through as-is
        log.debug("ip_api_response", provider_status=payload.get("status"))
        return OperationResult.success(
            data=payload, message="IP looked up successfully"
        )
