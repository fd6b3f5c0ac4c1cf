"""Request body validation for food item operations.

Each validator takes the raw decoded JSON body and returns a verdict instead
of raising, so the caller decides how to answer a malformed request.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from src.schemas.food_item import FoodItemCreate, FoodItemDelete, FoodItemUpdate

CREATE_REQUIRED_MESSAGE = "Missing required fields: name, expirationDate, quantity, placement."
UPDATE_REQUIRED_MESSAGE = "Food item ID is required for update."
DELETE_REQUIRED_MESSAGE = "Food item ID is required for deletion."


@dataclass(frozen=True)
class Verdict:
    """Outcome of validating a request body."""

    payload: BaseModel | None = None
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.payload is not None


def describe_errors(exc: ValidationError) -> str:
    """Flatten pydantic errors into one line, e.g. ``quantity: Input should be greater than 0``."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def _validate(
    schema: type[BaseModel], body: Any, required: tuple[str, ...], required_message: str
) -> Verdict:
    if not isinstance(body, dict) or any(key not in body for key in required):
        return Verdict(error=required_message)
    try:
        return Verdict(payload=schema.model_validate(body))
    except ValidationError as e:
        return Verdict(error=f"Invalid food item: {describe_errors(e)}")


def validate_create_body(body: Any) -> Verdict:
    """Check a create body: name, expirationDate, quantity and placement are required."""
    return _validate(
        FoodItemCreate,
        body,
        ("name", "expirationDate", "quantity", "placement"),
        CREATE_REQUIRED_MESSAGE,
    )


def validate_update_body(body: Any) -> Verdict:
    """Check an update body: only id is required."""
    return _validate(FoodItemUpdate, body, ("id",), UPDATE_REQUIRED_MESSAGE)


def validate_delete_body(body: Any) -> Verdict:
    """Check a delete body: only id is required."""
    return _validate(FoodItemDelete, body, ("id",), DELETE_REQUIRED_MESSAGE)
