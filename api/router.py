"""
Request router.

Routes are an ordered list of (predicate, handler) pairs; the first predicate
that accepts the request wins. OPTIONS short-circuits before any matching,
unmatched paths get a structured 404, and nothing raised by a handler escapes:
it becomes a 500 envelope.

`handler(event, context)` is the serverless entry point.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from api.events import Request
from api.responses import (
    error_response,
    exception_response,
    options_response,
    with_request_origin,
)
from api.routes import food_category, health, inventory, meals, purchases
from app.config import settings
from app.exceptions import ServiceError
from services.food_category_service import FoodCategoryService

logger = logging.getLogger("nutrition.router")

Predicate = Callable[[Request], bool]
Handler = Callable[[Request], Dict[str, Any]]
Route = Tuple[Predicate, Handler]


class Router:
    def __init__(self, routes: Sequence[Route]):
        self.routes: List[Route] = list(routes)

    def dispatch(self, request: Request) -> Dict[str, Any]:
        logger.info("Received %s %s", request.method, request.path)
        return with_request_origin(self._route(request), request.headers)

    def _route(self, request: Request) -> Dict[str, Any]:
        if request.method == "OPTIONS":
            return options_response()

        try:
            for predicate, route_handler in self.routes:
                if predicate(request):
                    return route_handler(request)
            return error_response(
                404, f"Not Found: The requested path ({request.path}) does not exist."
            )
        except ServiceError as exc:
            return exception_response(exc)
        except Exception as exc:
            logger.exception("Unhandled error in router for %s %s", request.method, request.path)
            return error_response(
                500,
                "An unexpected error occurred while processing the request.",
                error=str(exc),
            )

    def __call__(self, event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
        try:
            request = Request.from_event(event)
        except ServiceError as exc:
            return exception_response(exc)
        return self.dispatch(request)


def build_router(
    session_factory: Optional[Callable[[], Session]] = None,
    food_category_service: Optional[FoodCategoryService] = None,
) -> Router:
    """Wire the route table. Order matters: first match wins."""
    if session_factory is None:
        from domain.models import SessionLocal

        session_factory = SessionLocal

    inventory_routes = inventory.make_routes(session_factory)
    purchase_routes = purchases.make_routes(session_factory)
    meal_routes = meals.make_routes(session_factory)
    food_routes = food_category.FoodCategoryRoutes(
        food_category_service or FoodCategoryService()
    )

    return Router(
        [
            (inventory_routes.matches, inventory_routes),
            (purchase_routes.matches, purchase_routes),
            (meal_routes.matches, meal_routes),
            (food_routes.matches, food_routes),
            (health.matches, health.health_check),
        ]
    )


_router: Optional[Router] = None


def get_router() -> Router:
    """Router bound to the configured record store, created on first use"""
    global _router
    if _router is None:
        from domain.models import init_database

        logging.basicConfig(
            level=getattr(logging, settings.log_level.upper()), format=settings.log_format
        )
        init_database()
        _router = build_router()
    return _router


def handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    """AWS Lambda entry point"""
    return get_router()(event, context)
