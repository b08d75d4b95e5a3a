"""
HTTP helpers shared by the fitness score Lambda handlers.

Builds API Gateway proxy responses with CORS headers, extracts request data
from proxy events, and writes structured JSON log lines to stdout where
CloudWatch collects them.

Functions:
    create_response: Create a JSON HTTP response
    create_empty_response: Create a response with an empty body
    create_error_response: Render a FitnessScoreError as an HTTP response
    get_query_params: Extract query string parameters from an event
    get_request_body: Extract the (decoded) request body from an event
    log_api_request: Log an incoming request
    log_api_error: Log an error with context
"""

import base64
import binascii
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..models.errors import FitnessScoreError


def get_cors_headers(cors_origin: str = "*") -> Dict[str, str]:
    """
    Get CORS headers for API responses.

    Args:
        cors_origin: Allowed origin

    Returns:
        Dictionary of CORS headers
    """
    return {
        "Access-Control-Allow-Origin": cors_origin,
        "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    }


def create_response(
    status_code: int, data: Dict[str, Any], cors_origin: str = "*"
) -> Dict[str, Any]:
    """
    Create an HTTP response with a JSON body.

    Args:
        status_code: HTTP status code
        data: Response data to serialize as JSON
        cors_origin: Allowed CORS origin

    Returns:
        API Gateway proxy response dictionary
    """
    return {
        "statusCode": status_code,
        "headers": {**get_cors_headers(cors_origin), "Content-Type": "application/json"},
        "body": json.dumps(data),
    }


def create_empty_response(status_code: int = 200, cors_origin: str = "*") -> Dict[str, Any]:
    """Create an HTTP response with an empty body."""
    return {
        "statusCode": status_code,
        "headers": get_cors_headers(cors_origin),
        "body": "",
    }


def create_error_response(error: FitnessScoreError, cors_origin: str = "*") -> Dict[str, Any]:
    """
    Render an error as ``{"type": ..., "message": ...}`` with its status code.

    Args:
        error: Error to render
        cors_origin: Allowed CORS origin

    Returns:
        API Gateway proxy response dictionary
    """
    return create_response(error.status_code, error.to_dict(), cors_origin)


def get_query_params(event: Dict[str, Any]) -> Dict[str, str]:
    """Query string parameters of a proxy event; API Gateway sends null when there are none."""
    return event.get("queryStringParameters") or {}


def get_request_body(event: Dict[str, Any]) -> Optional[str]:
    """
    Extract the request body from a proxy event.

    Bodies flagged with ``isBase64Encoded`` are decoded as UTF-8. A body that
    cannot be decoded is returned as None, i.e. treated as missing.

    Args:
        event: API Gateway proxy event

    Returns:
        Body text, or None when the request has no usable body
    """
    body = event.get("body")
    if body is None or not event.get("isBase64Encoded"):
        return body

    try:
        return base64.b64decode(body, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        log_api_error("BODY_DECODE_ERROR", str(e))
        return None


def log_api_request(event: Dict[str, Any], environment: Optional[str] = None) -> None:
    """
    Log API request information for monitoring.

    The request body is left out.

    Args:
        event: API Gateway proxy event
        environment: Deployment stage the handler runs in
    """
    request_context = event.get("requestContext") or {}
    log_data = {
        "event": "API_REQUEST",
        "environment": environment,
        "httpMethod": event.get("httpMethod"),
        "resource": event.get("resource"),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "requestId": request_context.get("requestId"),
        "sourceIp": (request_context.get("identity") or {}).get("sourceIp"),
    }

    query_params = get_query_params(event)
    if query_params:
        log_data["queryParams"] = query_params

    print(json.dumps(log_data, default=str))


def log_api_error(
    error_type: str, error_message: str, context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log API errors with context for debugging.

    Args:
        error_type: Type of error that occurred
        error_message: Detailed error message
        context: Additional context information, ``body`` is dropped
    """
    log_data = {
        "event": "API_ERROR",
        "errorType": error_type,
        "errorMessage": error_message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    if context:
        log_data["context"] = {k: v for k, v in context.items() if k != "body"}

    print(json.dumps(log_data, default=str))
