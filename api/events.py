"""
Inbound request model.

The router consumes a plain Request. Events arrive either in the minimal form
{method, path, queryParameters, body} or as AWS Lambda Function URL / HTTP API
(v2) and REST API (v1) proxy events.
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from app.exceptions import ServiceValidationError


def normalize_path(path: Optional[str]) -> str:
    """Ensure a leading slash and drop trailing slashes ("/inventory/" -> "/inventory")"""
    path = (path or "/").strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


@dataclass
class Request:
    method: str
    path: str
    query_params: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    request_id: Optional[str] = None

    def __post_init__(self):
        self.method = (self.method or "").upper()
        self.path = normalize_path(self.path)
        self.query_params = dict(self.query_params or {})

    @property
    def user_id(self) -> Optional[str]:
        return self.query_params.get("userId")

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "Request":
        """Build a Request from any supported event shape.

        Raises:
            ServiceValidationError: no method could be found in the event
        """
        context = event.get("requestContext") or {}
        http = context.get("http") or {}

        method = event.get("method") or http.get("method") or event.get("httpMethod")
        if not method:
            raise ServiceValidationError("Invalid request event", error="missing HTTP method")

        path = event.get("rawPath") or event.get("path") or http.get("path")

        query = event.get("queryParameters")
        if query is None:
            query = event.get("queryStringParameters")

        body = event.get("body")
        if body is not None and event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as exc:
                raise ServiceValidationError(
                    "Invalid request body format", error=str(exc)
                ) from exc

        return cls(
            method=method,
            path=path,
            query_params={k: v for k, v in (query or {}).items() if v is not None},
            body=body,
            headers=dict(event.get("headers") or {}),
            request_id=context.get("requestId"),
        )
