from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, Field, WrapValidator, field_validator
from pydantic.alias_generators import to_camel

PropertyType = Literal["sale", "rent"]
PROPERTY_TYPES: tuple[str, ...] = ("sale", "rent")


def _whole_number(value: Any) -> Any:
    # 2.0 is an integer room count, 1.5 is not
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _keep_int(value: Any, handler) -> Any:
    """Validate as a float but hand back integers unchanged, so 310000 stays 310000."""
    result = handler(value)
    return value if type(value) is int else result


Title = Annotated[str, Field(min_length=3, max_length=100)]
Description = Annotated[str, Field(min_length=10)]
City = Annotated[str, Field(min_length=2)]
Address = Annotated[str, Field(min_length=5)]
Amount = Annotated[float, Field(gt=0, allow_inf_nan=False), WrapValidator(_keep_int)]
Rooms = Annotated[int, Field(gt=0), BeforeValidator(_whole_number)]


class PropertyCreate(BaseModel):
    title: Title
    description: Description
    city: City
    address: Address
    price: Amount
    surface: Amount
    rooms: Rooms
    type: PropertyType

    model_config = {"strict": True, "extra": "ignore"}


class PropertyUpdate(BaseModel):
    """Partial patch: absent fields are left unchanged, null is rejected."""

    title: Title | None = None
    description: Description | None = None
    city: City | None = None
    address: Address | None = None
    price: Amount | None = None
    surface: Amount | None = None
    rooms: Rooms | None = None
    type: PropertyType | None = None

    model_config = {"strict": True, "extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value):
        # defaults are not validated, so this only sees supplied values
        if value is None:
            raise ValueError("Field may not be null")
        return value


class PropertyRead(BaseModel):
    """Wire shape of a listing. Seed records may lack fields, so those are nullable."""

    id: str
    title: str | None = None
    description: str | None = None
    city: str | None = None
    address: str | None = None
    price: int | float | None = None
    surface: int | float | None = None
    rooms: int | None = None
    type: PropertyType
    created_at: datetime
    updated_at: datetime

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class PropertyFilters(BaseModel):
    city: str | None = None
    type: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    def is_empty(self) -> bool:
        return not self.city and not self.type and self.min_price is None and self.max_price is None


class FieldErrorRead(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: list[FieldErrorRead] | None = None


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
