"""
Response envelopes: {statusCode, headers, body} with a JSON-encoded body.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

from app.config import settings
from app.exceptions import ServiceError
from core.utils.helpers import to_jsonable

logger = logging.getLogger("nutrition.responses")


def allowed_origin(origin: Optional[str] = None) -> str:
    """Single Access-Control-Allow-Origin value: "*", the caller's origin when
    it is allowed, otherwise the first configured origin."""
    origins = settings.cors_origins
    if "*" in origins or not origins:
        return "*"
    if origin in origins:
        return origin
    return origins[0]


def cors_headers(origin: Optional[str] = None) -> Dict[str, str]:
    headers = {
        "Access-Control-Allow-Origin": allowed_origin(origin),
        "Access-Control-Allow-Methods": ", ".join(settings.cors_allow_methods),
        "Access-Control-Allow-Headers": ",".join(settings.cors_allow_headers),
    }
    if headers["Access-Control-Allow-Origin"] != "*":
        headers["Vary"] = "Origin"
    return headers


def with_request_origin(
    response: Dict[str, Any], request_headers: Mapping[str, str]
) -> Dict[str, Any]:
    """Re-issue the CORS headers of an envelope for the request's Origin"""
    origin = next(
        (value for name, value in request_headers.items() if name.lower() == "origin"), None
    )
    response["headers"].update(cors_headers(origin))
    return response


def json_response(status_code: int, data: Any) -> Dict[str, Any]:
    """Create a success response"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **cors_headers()},
        "body": json.dumps(to_jsonable(data), ensure_ascii=False),
    }


def error_response(
    status_code: int, message: str, error: Optional[str] = None, details: Optional[dict] = None
) -> Dict[str, Any]:
    """Create an error response: {"message", "error"?, "details"?}"""
    if status_code >= 500:
        logger.error("Error %s: %s %s", status_code, message, error or "")
    else:
        logger.warning("Error %s: %s %s", status_code, message, error or "")
    payload: Dict[str, Any] = {"message": message}
    if error:
        payload["error"] = error
    if details:
        payload["details"] = details
    return json_response(status_code, payload)


def exception_response(exc: ServiceError) -> Dict[str, Any]:
    """Create the response for a ServiceError (validation, not found, store, upstream)"""
    return error_response(exc.http_status, exc.message, exc.error, exc.details)


def options_response() -> Dict[str, Any]:
    """Pre-flight response: success, CORS headers, empty body"""
    return {"statusCode": 200, "headers": cors_headers(), "body": ""}
