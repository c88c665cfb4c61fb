from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Property:
    """A stored listing. Instances are owned by ListingStore; readers get copies."""

    id: str
    title: str | None
    description: str | None
    city: str | None
    address: str | None
    price: int | float | None
    surface: int | float | None
    rooms: int | None
    type: str
    created_at: datetime
    updated_at: datetime
