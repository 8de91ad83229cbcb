from pydantic import Field, field_validator
from typing import Optional, List, Dict, Any

from domain.schemas.common import (
    CamelModel,
    check_iso_date,
    check_non_negative_number,
    check_not_null,
)

MEAL_UPDATABLE_FIELDS = ("record_date", "meal_type", "items", "notes")


class MealItem(CamelModel):
    """One food eaten as part of a meal"""

    name: str = Field(..., min_length=1)
    quantity: float
    unit: Optional[str] = None
    food_id: Optional[str] = Field(None, description="Optional catalogue reference")

    @field_validator("quantity", mode="before")
    @classmethod
    def validate_quantity(cls, v):
        return check_non_negative_number(v)


class MealRecordCreate(CamelModel):
    """Schema for creating a meal record"""

    record_date: str = Field(..., description="ISO date of the meal (YYYY-MM-DD)")
    meal_type: str = Field(
        ..., min_length=1, description="Free-form label (e.g., 'breakfast', 'snack')"
    )
    items: List[MealItem] = Field(..., min_length=1)
    notes: Optional[str] = None

    @field_validator("record_date", mode="before")
    @classmethod
    def validate_record_date(cls, v):
        return check_iso_date(v)


class MealRecordUpdate(CamelModel):
    """Schema for a partial meal record update"""

    record_date: Optional[str] = None
    meal_type: Optional[str] = Field(None, min_length=1)
    items: Optional[List[MealItem]] = Field(None, min_length=1)
    notes: Optional[str] = None

    @field_validator("record_date", mode="before")
    @classmethod
    def validate_record_date(cls, v):
        return check_iso_date(v)

    @field_validator("meal_type", "items", mode="before")
    @classmethod
    def validate_required(cls, v):
        return check_not_null(v)


class MealRecordResponse(CamelModel):
    """Schema for a meal record as stored"""

    user_id: str
    record_id: str
    record_date: str
    meal_type: str
    items: List[Dict[str, Any]]
    notes: Optional[str] = None
    created_at: str
    updated_at: str
