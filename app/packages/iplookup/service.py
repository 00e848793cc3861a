"""
Business logic for looking up IP addresses.

An explicit IP goes to the ip-api client. A missing IP triggers a
self-lookup through the public IP discovery client. Either way exactly one
upstream call is made and timed.
"""

import re
import time
import uuid
from functools import partial
from typing import Any, Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from infrastructure.services import get_ip_api_client, get_public_ip_client

logger = get_module_logger()

UNKNOWN_IP = "unknown"

# Visible ASCII plus space and tab, the text an HTTP header value can carry
_HEADER_TEXT = re.compile(r"^[\t\x20-\x7e]+$")


def resolve_request_id(header_value: Optional[str]) -> str:
    """Return the caller's request id, or a fresh UUID4 when unusable.

    Args:
        header_value: Raw ``x-request-id`` header value, if any

    Returns:
        The header value when present and readable as text, otherwise a new
        random UUID string
    """
    if header_value and _HEADER_TEXT.match(header_value):
        return header_value
    return str(uuid.uuid4())


def extract_ip(raw: Any) -> str:
    """Pick the normalized IP out of a provider payload.

    ``query`` wins over ``ip``. Payloads with neither yield ``"unknown"``.
    """
    if isinstance(raw, dict):
        for key in ("query", "ip"):
            value = raw.get(key)
            if isinstance(value, str) and value:
                return value
    return UNKNOWN_IP


def _elapsed_ms(started: float) -> int:
    return max(0, int((time.perf_counter() - started) * 1000))


def lookup_ip(ip_address: Optional[str] = None) -> OperationResult:
    """
    Look up an IP address, or this host's public address when none is given.

    Args:
        ip_address: IP address to look up. None means self-lookup.

    Returns:
        OperationResult whose data is ``{"ip", "raw", "latency_ms"}`` on
        success, or the upstream client's error result
    """
    log = logger.bind(ip_address=ip_address, operation="lookup_ip")
    log.debug("looking_up_ip", self_lookup=ip_address is None)

    # Clients are resolved first so their construction stays out of latency_ms
    if ip_address is None:
        call_upstream = get_public_ip_client().lookup
    else:
        call_upstream = partial(get_ip_api_client().lookup, ip_address=ip_address)

    started = time.perf_counter()
    result = call_upstream()
    latency_ms = _elapsed_ms(started)

    if not result.is_success:
        return result

    if ip_address is None:
        # Self-lookups carry a structured record rather than a JSON document
        lookup = result.data
        resolved_ip = lookup.ip
        raw = lookup.to_dict()
    else:
        raw = result.data
        resolved_ip = extract_ip(raw)

    return OperationResult.success(
        data={"ip": resolved_ip, "raw": raw, "latency_ms": latency_ms},
        message="IP looked up successfully",
    )
