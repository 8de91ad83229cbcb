"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.common import CamelModel, parse_payload
from domain.schemas.inventory_schemas import (
    INVENTORY_UPDATABLE_FIELDS,
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemResponse,
)
from domain.schemas.meal_schemas import (
    MEAL_UPDATABLE_FIELDS,
    MealItem,
    MealRecordCreate,
    MealRecordUpdate,
    MealRecordResponse,
)
from domain.schemas.purchase_schemas import (
    PURCHASE_UPDATABLE_FIELDS,
    PurchaseItem,
    PurchaseRecordCreate,
    PurchaseRecordUpdate,
    PurchaseRecordResponse,
)
from domain.schemas.food_category_schemas import FoodCategoryResponse

__all__ = [
    "CamelModel",
    "parse_payload",
    # Inventory
    "INVENTORY_UPDATABLE_FIELDS",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "InventoryItemResponse",
    # Meals
    "MEAL_UPDATABLE_FIELDS",
    "MealItem",
    "MealRecordCreate",
    "MealRecordUpdate",
    "MealRecordResponse",
    # Purchases
    "PURCHASE_UPDATABLE_FIELDS",
    "PurchaseItem",
    "PurchaseRecordCreate",
    "PurchaseRecordUpdate",
    "PurchaseRecordResponse",
    # Food category
    "FoodCategoryResponse",
]
