"""
Response envelope builders for the HTTP handlers.

Every HTTP response body is an ``ApiResponse`` envelope:
``{"success": true, "data": ..., "timestamp": ...}`` or
``{"success": false, "error": ..., "timestamp": ...}``, returned as a
Powertools ``Response`` that the resolver turns into the API Gateway proxy
response. CORS headers are added by the resolver.
"""

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response, content_types

from crud_service.models.output import ApiResponse


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    """Create standardized JSON response."""

    response_headers = {
        "X-Request-ID": str(uuid.uuid4()),
    }
    if headers:
        response_headers.update(headers)

    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=body if isinstance(body, str) else json.dumps(body),
        headers=response_headers,
    )


def build_success(
    data: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    """
    Build a success envelope response.

    Args:
        data: Payload; pydantic models, lists and JSON-compatible values are accepted
        status_code: HTTP status code
        headers: Extra response headers

    Returns:
        Response carrying the envelope
    """
    envelope = ApiResponse(success=True, data=data, timestamp=utc_timestamp())
    return create_api_response(status_code=status_code, body=envelope.to_body(), headers=headers)


def build_error(
    message: str,
    status_code: int = 400,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    """
    Build an error envelope response.

    Args:
        message: Human-readable error message
        status_code: HTTP status code
        headers: Extra response headers

    Returns:
        Response carrying the envelope
    """
    envelope = ApiResponse(success=False, error=message, timestamp=utc_timestamp())
    return create_api_response(status_code=status_code, body=envelope.to_body(), headers=headers)
