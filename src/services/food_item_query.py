"""Search and sort helpers for an already-fetched food item listing.

These functions never touch the database: a client changing the search term
or sort order re-applies them to the same snapshot.
"""

from collections.abc import Iterable
from enum import StrEnum

from src.schemas.food_item import FoodItemResponse


class SortOrder(StrEnum):
    """Orderings offered for the pantry listing."""

    NAME_ASC = "name-asc"
    QUANTITY_DESC = "quantity-desc"
    QUANTITY_ASC = "quantity-asc"
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"


def exclude_hidden(items: Iterable[FoodItemResponse]) -> list[FoodItemResponse]:
    """Drop archived items."""
    return [item for item in items if not item.hidden]


def matches_search(item: FoodItemResponse, search: str) -> bool:
    """Case-insensitive substring match on name, keywords, placement and categories.

    ``search`` must already be lowercased and trimmed.
    """
    if search in item.name.lower() or search in item.placement.lower():
        return True
    if any(search in keyword.lower() for keyword in item.keywords):
        return True
    return any(search in category.lower() for category in item.categories)


def filter_food_items(
    items: Iterable[FoodItemResponse], search: str | None
) -> list[FoodItemResponse]:
    """Keep the items matching ``search``; a blank search keeps everything."""
    term = (search or "").strip().lower()
    if not term:
        return list(items)
    return [item for item in items if matches_search(item, term)]


def sort_food_items(items: Iterable[FoodItemResponse], order: SortOrder) -> list[FoodItemResponse]:
    """Return the items in ``order``. Ties keep their original sequence."""
    items = list(items)
    if order == SortOrder.NAME_ASC:
        return sorted(items, key=lambda item: item.name.casefold())
    if order == SortOrder.QUANTITY_DESC:
        return sorted(items, key=lambda item: item.quantity, reverse=True)
    if order == SortOrder.QUANTITY_ASC:
        return sorted(items, key=lambda item: item.quantity)
    if order == SortOrder.DATE_DESC:
        return sorted(items, key=lambda item: item.expiration_date, reverse=True)
    return sorted(items, key=lambda item: item.expiration_date)


def apply_listing_view(
    items: Iterable[FoodItemResponse],
    search: str | None = None,
    order: SortOrder | None = None,
) -> list[FoodItemResponse]:
    """Hide archived items, then search, then sort (if an order is given)."""
    visible = filter_food_items(exclude_hidden(items), search)
    if order is None:
        return visible
    return sort_food_items(visible, order)
