"""
Domain enums for the nutrition application.
"""

import enum


class FoodCategory(str, enum.Enum):
    """Categories the food classifier may answer with"""

    VEGETABLES = "Vegetables"
    FRUITS = "Fruits"
    MEAT = "Meat"
    SEAFOOD = "Seafood"
    DAIRY = "Dairy"
    GRAINS = "Grains"
    SEASONINGS = "Seasonings"
    OTHER = "Other"
