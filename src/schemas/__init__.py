"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from src.schemas.food_item import (
    FoodItemCreate,
    FoodItemDelete,
    FoodItemDeleteResponse,
    FoodItemResponse,
    FoodItemUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "FoodItemCreate",
    "FoodItemUpdate",
    "FoodItemDelete",
    "FoodItemResponse",
    "FoodItemDeleteResponse",
]
