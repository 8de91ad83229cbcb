"""Meal record routes: /meals, /meals/{recordId}

GET /meals accepts startDate / endDate (inclusive, YYYY-MM-DD) to narrow by recordDate.
"""

from typing import Callable

from sqlalchemy.orm import Session

from api.routes.records import RecordRoutes
from services.meal_service import MealService

PREFIX = "/meals"


def make_routes(session_factory: Callable[[], Session]) -> RecordRoutes:
    return RecordRoutes(PREFIX, MealService, session_factory)
