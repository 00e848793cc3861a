"""Error classifiers for upstream HTTP exceptions.

Converts ``requests`` exceptions raised while talking to an upstream
provider into standardized OperationResult objects, so every client
reports upstream failures the same way.

Usage:
    from infrastructure.operations.classifiers import classify_request_error

    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        return classify_request_error(exc)
"""

from typing import Optional

import requests

from infrastructure.operations.result import OperationResult

# Raised before any bytes leave the process: the configured URL is unusable
_CONFIGURATION_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
    requests.exceptions.URLRequired,
)


def classify_request_error(exc: Exception) -> OperationResult:
    """Classify an upstream request failure into an OperationResult.

    Mapping:
    - Body is not valid JSON → TRANSIENT_ERROR (INVALID_RESPONSE)
    - Unusable configured URL → PERMANENT_ERROR (CONFIGURATION_ERROR)
    - Timeout → TRANSIENT_ERROR (TIMEOUT)
    - Connection failure → TRANSIENT_ERROR (CONNECTION_ERROR)
    - HTTP error status → TRANSIENT_ERROR (UPSTREAM_HTTP_ERROR)
    - Any other requests failure → TRANSIENT_ERROR (REQUEST_ERROR)

    Transient errors are upstream faults and surface as gateway errors.
    Configuration errors are local faults and surface as internal errors.

    Args:
        exc: Exception raised by requests or by JSON decoding

    Returns:
        OperationResult with an error status and an error code
    """
    # requests' JSONDecodeError is a RequestException as well as a ValueError
    if isinstance(exc, requests.exceptions.InvalidJSONError):
        return _invalid_response(exc)

    # The URL family subclasses ValueError too, so it must precede the fallback
    if isinstance(exc, _CONFIGURATION_ERRORS):
        return OperationResult.permanent_error(
            f"Upstream URL is misconfigured: {type(exc).__name__}: {exc}",
            error_code="CONFIGURATION_ERROR",
        )

    if isinstance(exc, requests.exceptions.Timeout):
        return OperationResult.transient_error(
            f"Upstream request timed out: {exc}",
            error_code="TIMEOUT",
        )

    if isinstance(exc, requests.exceptions.ConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {exc}",
            error_code="CONNECTION_ERROR",
        )

    if isinstance(exc, requests.exceptions.HTTPError):
        status_code: Optional[int] = None
        if exc.response is not None:
            status_code = exc.response.status_code
        return OperationResult.transient_error(
            f"Upstream returned HTTP {status_code}",
            error_code="UPSTREAM_HTTP_ERROR",
        )

    if isinstance(exc, requests.exceptions.RequestException):
        return OperationResult.transient_error(
            f"Upstream request failed: {type(exc).__name__}: {exc}",
            error_code="REQUEST_ERROR",
        )

    if isinstance(exc, ValueError):
        return _invalid_response(exc)

    return OperationResult.transient_error(
        f"Upstream request failed: {type(exc).__name__}: {exc}",
        error_code="REQUEST_ERROR",
    )


def _invalid_response(exc: Exception) -> OperationResult:
    return OperationResult.transient_error(
        f"Upstream returned an unparsable body: {exc}",
        error_code="INVALID_RESPONSE",
    )
