"""Food item schemas.

Request bodies use camelCase keys (``expirationDate``, ``categoryNames``) and
strict types: a quantity must be a JSON integer, not a numeric string.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic.alias_generators import to_camel

# Upper bound of the INTEGER quantity column
MAX_QUANTITY = 2_147_483_647

CategoryName = Annotated[StrictStr, Field(max_length=100)]


def parse_expiration_date(value: object) -> datetime:
    """Parse an ISO date or datetime string into an aware UTC datetime.

    A bare date such as ``2024-01-10`` means midnight UTC of that day.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"'{value}' is not a valid date") from None
    else:
        raise ValueError("must be a date string")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


class FoodItemFields(BaseModel):
    """Validation rules shared by the create and update payloads."""

    model_config = ConfigDict(strict=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("expiration_date", mode="before", check_fields=False)
    @classmethod
    def validate_expiration_date(cls, value: object) -> datetime:
        return parse_expiration_date(value)

    @field_validator("name", "placement", check_fields=False)
    @classmethod
    def validate_not_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("category_names", check_fields=False)
    @classmethod
    def validate_category_names(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        if any(not name.strip() for name in value):
            raise ValueError("category names must not be blank")
        # Drop repeats, keep first occurrence order
        return list(dict.fromkeys(value))


class FoodItemCreate(FoodItemFields):
    """Create a food item."""

    name: StrictStr = Field(..., max_length=255)
    expiration_date: datetime
    quantity: StrictInt = Field(..., gt=0, le=MAX_QUANTITY)
    placement: StrictStr = Field(..., max_length=255)
    image_url: StrictStr | None = Field(None, max_length=2048)
    keywords: list[StrictStr] = Field(default_factory=list)
    category_names: list[CategoryName] = Field(default_factory=list)

    @field_validator("keywords", "category_names", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class FoodItemUpdate(FoodItemFields):
    """Sparse update of a food item.

    Only keys present in the request body change the stored item; use
    ``model_fields_set`` (or ``model_dump(exclude_unset=True)``) to tell an
    absent field from one explicitly sent. ``imageUrl: null`` clears the photo.
    """

    id: StrictStr
    name: StrictStr | None = Field(None, max_length=255)
    expiration_date: datetime | None = None
    quantity: StrictInt | None = Field(None, gt=0, le=MAX_QUANTITY)
    placement: StrictStr | None = Field(None, max_length=255)
    image_url: StrictStr | None = Field(None, max_length=2048)
    keywords: list[StrictStr] | None = None
    hidden: StrictBool | None = None
    category_names: list[CategoryName] | None = None

    @field_validator(
        "name", "quantity", "placement", "keywords", "hidden", "category_names", mode="before"
    )
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict:
        """Column values explicitly supplied in the request, keyed by field name."""
        return self.model_dump(exclude_unset=True, exclude={"id", "category_names"})


class FoodItemDelete(BaseModel):
    """Delete a food item."""

    model_config = ConfigDict(strict=True)

    id: StrictStr


class FoodItemResponse(BaseModel):
    """Food item response, with resolved category names."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    expiration_date: datetime
    quantity: int
    image_url: str | None
    keywords: list[str]
    placement: str
    hidden: bool
    categories: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("category_names", "categories"),
    )
    created_at: datetime
    updated_at: datetime

    @field_validator("expiration_date", "created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset of stored timestamps
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class FoodItemDeleteResponse(BaseModel):
    """Confirmation of a deleted food item."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    deleted_id: str
