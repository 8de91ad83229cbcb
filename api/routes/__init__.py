"""API routes package"""

from . import inventory, meals, purchases, food_category, health

__all__ = ["inventory", "meals", "purchases", "food_category", "health"]
