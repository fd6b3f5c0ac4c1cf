"""Food item model for tracking what is stored in the pantry."""

import uuid

from sqlalchemy import JSON, Boolean, CheckConstraint, Column, DateTime, Integer, String, false
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


def generate_food_item_id() -> str:
    """Generate an opaque identifier for a new food item."""
    return str(uuid.uuid4())


class FoodItem(Base, TimestampMixin):
    """One pantry entry."""

    __tablename__ = "food_items"
    __table_args__ = (CheckConstraint("quantity > 0", name="ck_food_items_quantity_positive"),)

    id = Column(String(36), primary_key=True, default=generate_food_item_id)
    name = Column(String(255), nullable=False)
    expiration_date = Column(DateTime(timezone=True), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    image_url = Column(String(2048), nullable=True)
    keywords = Column(JSON, nullable=False, default=list)  # ["milk", "dairy"]
    placement = Column(String(255), nullable=False)  # Free text: "Fridge", "Top shelf"
    hidden = Column(Boolean, nullable=False, default=False, server_default=false(), index=True)

    # Relationships
    category_links = relationship(
        "FoodCategoryOnFoodItem",
        back_populates="food_item",
        cascade="all, delete-orphan",
    )

    @property
    def category_names(self) -> list[str]:
        """Names of the linked categories, sorted."""
        return sorted(link.food_category.name for link in self.category_links)
