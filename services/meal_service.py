"""Meal record operations"""

from typing import Any, Dict, Mapping

from domain.schemas import (
    MEAL_UPDATABLE_FIELDS,
    MealRecordCreate,
    MealRecordUpdate,
    MealRecordResponse,
)
from repositories import MealRepository
from services.record_service import RecordService, parse_date_filter


class MealService(RecordService[MealRepository]):
    """
    Meal records. Listing accepts an inclusive recordDate range through the
    startDate / endDate query parameters.
    """

    label = "Meal record"
    plural = "meal records"
    repository_class = MealRepository
    create_schema = MealRecordCreate
    update_schema = MealRecordUpdate
    response_schema = MealRecordResponse
    updatable_fields = MEAL_UPDATABLE_FIELDS

    def list_filters(self, query: Mapping[str, str]) -> Dict[str, Any]:
        return {
            "start_date": parse_date_filter("startDate", query.get("startDate")),
            "end_date": parse_date_filter("endDate", query.get("endDate")),
        }
