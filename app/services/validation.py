"""Payload validation that reports failures as values instead of raising.

``validate_property`` runs a payload through the create or update schema and
returns either ``Valid`` holding the parsed model or ``Invalid`` holding every
field-level violation, in schema field order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ValidationError

from app.schemas.property import PropertyCreate, PropertyUpdate

T = TypeVar("T")

Mode = Literal["create", "update"]

_SCHEMAS: dict[str, type[BaseModel]] = {
    "create": PropertyCreate,
    "update": PropertyUpdate,
}

_UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: list[FieldError]


ValidationResult = Union[Valid[T], Invalid]


def field_errors(exc: ValidationError) -> list[FieldError]:
    """Flatten a pydantic ValidationError into ordered field/message pairs."""
    return [
        FieldError(".".join(str(part) for part in err["loc"]), err["msg"])
        for err in exc.errors()
    ]


def validate_property(payload: Any, mode: Mode = "create") -> ValidationResult:
    try:
        schema = _SCHEMAS[mode]
    except KeyError:
        raise ValueError(f"unknown validation mode: {mode!r}") from None
    try:
        return Valid(schema.model_validate(payload))
    except ValidationError as exc:
        return Invalid(field_errors(exc))


def validate_property_id(value: Any) -> ValidationResult:
    """Check that a path identifier is a hyphenated UUID before it is looked up."""
    if isinstance(value, str) and _UUID_RE.match(value):
        return Valid(value)
    return Invalid([FieldError("id", "Invalid UUID")])
