"""FastAPI routes for iplookup package."""

from typing import Annotated, Optional

from fastapi import APIRouter, Header, HTTPException

from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.operations import OperationStatus
from packages.iplookup.schemas import LookupRequest, LookupResponse
from packages.iplookup.service import lookup_ip, resolve_request_id

logger = get_module_logger()
router = APIRouter(tags=["adatari-ip"])


@router.post(
    "/lookup",
    response_model=LookupResponse,
    summary="Look up an IP address",
    description=(
        "Query the upstream geolocation provider for an IP address, or for "
        "this service's own public address when no IP is given"
    ),
    responses={
        422: {"description": "Malformed body or invalid IP address"},
        500: {"description": "Internal failure"},
        502: {"description": "Upstream provider unreachable or unparsable"},
    },
)
def post_lookup(
    request: Optional[LookupRequest] = None,
    x_request_id: Annotated[Optional[str], Header()] = None,
) -> LookupResponse:
    """Look up an IP address via HTTP POST.

    Args:
        request: Optional body; a missing body or null ip means self-lookup
        x_request_id: Caller-supplied correlation id

    Returns:
        LookupResponse with the normalized IP and raw provider payload

    Raises:
        HTTPException: 502 for upstream failures, 500 for anything else
    """
    request_id = resolve_request_id(x_request_id)
    ip_address = request.ip if request else None

    with bind_request_context(
        correlation_id=request_id, request_path="/lookup", request_method="POST"
    ):
        result = lookup_ip(ip_address=ip_address)

        if result.is_success:
            data = result.data
            logger.info(
                "lookup",
                ip=data["ip"],
                latency_ms=data["latency_ms"],
                request_id=request_id,
            )
            return LookupResponse(request_id=request_id, **data)

        if result.status == OperationStatus.TRANSIENT_ERROR:
            logger.error(
                "lookup_failed",
                ip_address=ip_address,
                error_code=result.error_code,
                error=result.message,
                request_id=request_id,
            )
            raise HTTPException(status_code=502, detail="Upstream lookup failed")

        logger.error(
            "lookup_error",
            status=result.status.value,
            error=result.message,
            request_id=request_id,
        )
        raise HTTPException(status_code=500, detail="Lookup service error")
