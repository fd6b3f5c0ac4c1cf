"""Food item API endpoints.

All operations share one resource path. Update and delete take the item id
in the JSON body rather than the URL.
"""

from typing import Annotated, Any

from fastapi import APIRouter, BackgroundTasks, Body, Depends, HTTPException, Query, status

from src.api.dependencies import get_current_user, get_food_item_service
from src.models.user import User
from src.schemas.food_item import FoodItemDeleteResponse, FoodItemResponse
from src.services.file_storage import delete_item_image
from src.services.food_item_query import SortOrder, apply_listing_view
from src.services.food_item_service import FoodItemService
from src.services.validation import (
    validate_create_body,
    validate_delete_body,
    validate_update_body,
)

router = APIRouter(prefix="/api/fooditem", tags=["fooditem"])

NOT_FOUND_DETAIL = "Food item not found."


def parse_sort_order(sort: str | None) -> SortOrder | None:
    """Turn the ``sort`` query parameter into a SortOrder, or raise a 400."""
    if sort is None:
        return None
    try:
        return SortOrder(sort)
    except ValueError:
        allowed = ", ".join(order.value for order in SortOrder)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid sort order '{sort}'. Allowed values: {allowed}",
        ) from None


@router.get("", response_model=FoodItemResponse | list[FoodItemResponse])
def read_food_items(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FoodItemService, Depends(get_food_item_service)],
    item_id: Annotated[str | None, Query(alias="id")] = None,
    search: str | None = None,
    sort: str | None = None,
):
    """Get one food item by id, or list the visible ones.

    Without an id, hidden items are left out and the rest come back soonest
    to expire first, unless ``sort`` asks for another order. ``search``
    narrows the listing by name, keyword, placement or category.
    """
    if item_id:
        item = service.get(item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
        return FoodItemResponse.model_validate(item)

    order = parse_sort_order(sort)
    items = [FoodItemResponse.model_validate(item) for item in service.list_visible()]
    return apply_listing_view(items, search=search, order=order)


@router.post("", response_model=FoodItemResponse, status_code=status.HTTP_201_CREATED)
def create_food_item(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FoodItemService, Depends(get_food_item_service)],
    body: Annotated[Any, Body()] = None,
):
    """Add a food item, creating any categories it names that don't exist yet."""
    verdict = validate_create_body(body)
    if not verdict.is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=verdict.error)

    return service.create(verdict.payload)


@router.put("", response_model=FoodItemResponse)
def update_food_item(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FoodItemService, Depends(get_food_item_service)],
    body: Annotated[Any, Body()] = None,
):
    """Update the fields present in the body; ``categoryNames`` replaces all links."""
    verdict = validate_update_body(body)
    if not verdict.is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=verdict.error)

    item = service.update(verdict.payload)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    return item


@router.delete("", response_model=FoodItemDeleteResponse)
def delete_food_item(
    background_tasks: BackgroundTasks,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FoodItemService, Depends(get_food_item_service)],
    body: Annotated[Any, Body()] = None,
):
    """Delete a food item.

    The hosted photo, if any, is removed after the response is sent; a
    failure there does not affect the result.
    """
    verdict = validate_delete_body(body)
    if not verdict.is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=verdict.error)

    deleted = service.delete(verdict.payload.id)
    if deleted is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)

    if deleted.image_url:
        background_tasks.add_task(delete_item_image, deleted.image_url)

    return FoodItemDeleteResponse(
        message="Food item deleted successfully.",
        deleted_id=deleted.id,
    )
