"""Food category route: GET /food-category?foodName=..."""

import logging
from typing import Any, Dict

from api.events import Request
from api.responses import exception_response, json_response
from app.exceptions import RouteNotFoundError, ServiceError
from services.food_category_service import FoodCategoryService

PREFIX = "/food-category"

logger = logging.getLogger("nutrition.api.food_category")


class FoodCategoryRoutes:
    def __init__(self, service: FoodCategoryService):
        self.service = service

    def matches(self, request: Request) -> bool:
        return request.path == PREFIX or request.path.startswith(PREFIX + "/")

    def __call__(self, request: Request) -> Dict[str, Any]:
        logger.info("Handling food category route: %s %s", request.method, request.path)
        try:
            if request.method != "GET" or request.path != PREFIX:
                raise RouteNotFoundError(request.method, request.path, resource="food category")
            result = self.service.categorize(request.query_params.get("foodName"))
        except ServiceError as exc:
            return exception_response(exc)
        return json_response(200, result)
