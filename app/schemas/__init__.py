"""Pydantic request/response schemas."""

from app.schemas.property import (
    PROPERTY_TYPES,
    PropertyType,
    PropertyCreate,
    PropertyUpdate,
    PropertyRead,
    PropertyFilters,
    FieldErrorRead,
    ErrorResponse,
    MessageResponse,
    HealthResponse,
)

__all__ = [
    "PROPERTY_TYPES", "PropertyType",
    "PropertyCreate", "PropertyUpdate", "PropertyRead", "PropertyFilters",
    "FieldErrorRead", "ErrorResponse", "MessageResponse", "HealthResponse",
]
