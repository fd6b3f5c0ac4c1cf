"""SQLAlchemy models."""

from src.models.food_category import FoodCategory, FoodCategoryOnFoodItem
from src.models.food_item import FoodItem
from src.models.user import User

__all__ = [
    "User",
    "FoodItem",
    "FoodCategory",
    "FoodCategoryOnFoodItem",
]
