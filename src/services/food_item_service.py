"""Food item service for persistence and category linking."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, selectinload

from src.models.food_category import FoodCategory, FoodCategoryOnFoodItem
from src.models.food_item import FoodItem
from src.schemas.food_item import FoodItemCreate, FoodItemUpdate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletedFoodItem:
    """What is left of a food item once its row is gone."""

    id: str
    image_url: str | None


class FoodItemService:
    """Service for food item CRUD operations.

    Every mutating method commits exactly once, so an item and its category
    links are written together or not at all.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query(self) -> Query:
        return self.db.query(FoodItem).options(
            selectinload(FoodItem.category_links).selectinload(FoodCategoryOnFoodItem.food_category)
        )

    def get(self, item_id: str) -> FoodItem | None:
        """Get one food item by id. Hidden items are included."""
        return self._query().filter(FoodItem.id == item_id).first()

    def list_visible(self) -> list[FoodItem]:
        """List non-hidden food items, soonest to expire first."""
        return (
            self._query()
            .filter(FoodItem.hidden.is_(False))
            .order_by(FoodItem.expiration_date.asc(), FoodItem.created_at.asc())
            .all()
        )

    def create(self, data: FoodItemCreate) -> FoodItem:
        """Create a food item and link its categories."""
        item = FoodItem(
            name=data.name,
            expiration_date=data.expiration_date,
            quantity=data.quantity,
            image_url=data.image_url or None,
            keywords=list(data.keywords),
            placement=data.placement,
        )
        try:
            self.db.add(item)
            self.db.flush()
            self._link_categories(item, data.category_names)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(item)
        logger.info(f"Created food item {item.id} ('{item.name}')")
        return item

    def update(self, data: FoodItemUpdate) -> FoodItem | None:
        """Apply the fields present in ``data``.

        When ``categoryNames`` is present the item's links are replaced
        wholesale rather than diffed. Returns None if the item does not exist.
        """
        item = self.get(data.id)
        if item is None:
            return None

        try:
            for field, value in data.changes().items():
                setattr(item, field, value)

            if "category_names" in data.model_fields_set:
                item.category_links.clear()
                self.db.flush()
                self._link_categories(item, data.category_names)

            item.touch()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(item)
        return item

    def delete(self, item_id: str) -> DeletedFoodItem | None:
        """Delete a food item and its category links.

        Returns the deleted id with the image reference it held, so the caller
        can clean up the hosted file. Returns None if the item does not exist.
        """
        item = self._query().filter(FoodItem.id == item_id).with_for_update().first()
        if item is None:
            return None

        deleted = DeletedFoodItem(id=item.id, image_url=item.image_url)
        try:
            self.db.delete(item)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Deleted food item {deleted.id}")
        return deleted

    def _link_categories(self, item: FoodItem, category_names: list[str]) -> None:
        for name in dict.fromkeys(category_names):
            category = self._get_or_create_category(name)
            item.category_links.append(FoodCategoryOnFoodItem(food_category=category))
        self.db.flush()

    def _get_or_create_category(self, name: str) -> FoodCategory:
        category = self.db.query(FoodCategory).filter(FoodCategory.name == name).first()
        if category:
            return category

        try:
            with self.db.begin_nested():
                category = FoodCategory(name=name)
                self.db.add(category)
        except IntegrityError:
            # A concurrent request inserted the same name first
            logger.info(f"Category '{name}' created concurrently, reusing it")
            category = self.db.query(FoodCategory).filter(FoodCategory.name == name).one()
        return category
