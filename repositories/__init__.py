"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.inventory_repository import InventoryRepository
from repositories.meal_repository import MealRepository
from repositories.purchase_repository import PurchaseRepository

__all__ = [
    "BaseRepository",
    "InventoryRepository",
    "MealRepository",
    "PurchaseRepository",
]
