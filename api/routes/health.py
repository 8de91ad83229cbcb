"""Health check routes"""

from typing import Any, Dict

from api.events import Request
from api.responses import json_response
from app.config import settings
from core.utils.helpers import utc_timestamp

HEALTH_PATHS = ("/health", "/")


def matches(request: Request) -> bool:
    return request.path in HEALTH_PATHS


def health_check(request: Request) -> Dict[str, Any]:
    """Basic liveness check; does not touch the record store"""
    return json_response(
        200,
        {
            "status": "ok",
            "timestamp": utc_timestamp(),
            "api": settings.api_title,
            "version": settings.app_version,
        },
    )
