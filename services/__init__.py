"""Services package - Business logic layer"""

from services.inventory_service import InventoryService
from services.meal_service import MealService
from services.purchase_service import PurchaseService
from services.food_category_service import FoodCategoryService

__all__ = [
    "InventoryService",
    "MealService",
    "PurchaseService",
    "FoodCategoryService",
]
