"""Method/path dispatch shared by the record collections"""

import logging
import re
from typing import Any, Callable, Dict, Optional, Type

from sqlalchemy.orm import Session

from api.events import Request
from api.responses import exception_response, json_response
from app.exceptions import RouteNotFoundError, ServiceError
from services.record_service import RecordService

logger = logging.getLogger("nutrition.api.records")


class RecordRoutes:
    """
    Routes for one record collection mounted at prefix:

        POST   {prefix}        -> create
        GET    {prefix}        -> list
        GET    {prefix}/{id}   -> get
        PUT    {prefix}/{id}   -> update
        DELETE {prefix}/{id}   -> delete

    Any other method/path combination under the prefix is a 404. A fresh
    session is opened per dispatched request and closed afterwards.
    """

    def __init__(
        self,
        prefix: str,
        service_class: Type[RecordService],
        session_factory: Callable[[], Session],
    ):
        self.prefix = prefix.rstrip("/")
        self.service_class = service_class
        self.session_factory = session_factory
        self._id_pattern = re.compile(rf"^{re.escape(self.prefix)}/([^/]+)$")

    def matches(self, request: Request) -> bool:
        return request.path == self.prefix or request.path.startswith(self.prefix + "/")

    def extract_id(self, path: str) -> Optional[str]:
        match = self._id_pattern.match(path)
        return match.group(1) if match else None

    def resolve(self, request: Request) -> Callable[[RecordService], Any]:
        """Pick the operation for (method, collection-or-id); RouteNotFoundError otherwise"""
        method = request.method
        record_id = self.extract_id(request.path)
        is_collection = request.path == self.prefix
        user_id = request.user_id

        if method == "POST" and is_collection:
            return lambda service: (201, service.create(user_id, request.body))
        if method == "GET" and is_collection:
            return lambda service: (200, service.list_records(user_id, request.query_params))
        if method == "GET" and record_id:
            return lambda service: (200, service.get(user_id, record_id))
        if method == "PUT" and record_id:
            return lambda service: (200, service.update(user_id, record_id, request.body))
        if method == "DELETE" and record_id:
            return lambda service: (200, service.delete(user_id, record_id))
        raise RouteNotFoundError(method, request.path)

    def __call__(self, request: Request) -> Dict[str, Any]:
        logger.info("Handling %s route: %s %s", self.prefix, request.method, request.path)
        try:
            operation = self.resolve(request)
            with self.session_factory() as db:
                status_code, data = operation(self.service_class(db))
        except ServiceError as exc:
            return exception_response(exc)
        return json_response(status_code, data)
