"""Food category and food item/category junction models."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class FoodCategory(Base, TimestampMixin):
    """Reusable named tag such as "Breakfast" or "Veggie"."""

    __tablename__ = "food_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)  # Case-sensitive as stored

    # Relationships
    item_links = relationship(
        "FoodCategoryOnFoodItem",
        back_populates="food_category",
        cascade="all, delete-orphan",
    )


class FoodCategoryOnFoodItem(Base):
    """Link between a food item and a category. At most one row per pair."""

    __tablename__ = "food_category_on_food_items"

    food_item_id = Column(
        String(36),
        ForeignKey("food_items.id", ondelete="CASCADE"),
        primary_key=True,
    )
    food_category_id = Column(
        Integer,
        ForeignKey("food_categories.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    # Relationships
    food_item = relationship("FoodItem", back_populates="category_links")
    food_category = relationship("FoodCategory", back_populates="item_links")
