"""Listing service: validates raw payloads and delegates storage to ListingStore."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from app.models.property import Property
from app.schemas.property import PropertyFilters
from app.services.listing_store import ListingStore
from app.services.validation import Invalid, ValidationResult, Valid, validate_property

logger = logging.getLogger(__name__)


class ListingService:
    def __init__(self, store: ListingStore):
        self.store = store

    @classmethod
    def from_seed_file(cls, path: str | Path) -> ListingService:
        return cls(ListingStore.from_seed_file(path))

    def list_properties(self, criteria: PropertyFilters | None = None) -> list[Property]:
        """All listings in insertion order, narrowed by any supplied criteria."""
        if criteria is None or criteria.is_empty():
            return self.store.list()
        return self.store.filter(criteria)

    def get_property(self, property_id: str) -> Property | None:
        return self.store.get(property_id)

    def create_property(self, payload: Any) -> ValidationResult:
        result = validate_property(payload, "create")
        if isinstance(result, Invalid):
            return result
        prop = self.store.create(result.value)
        logger.info("Created listing %s (%s, %s)", prop.id, prop.city, prop.type)
        return Valid(prop)

    def update_property(self, property_id: str, payload: Any) -> ValidationResult | None:
        """Apply a partial patch. Returns None when the listing does not exist."""
        result = validate_property(payload, "update")
        if isinstance(result, Invalid):
            return result
        prop = self.store.update(property_id, result.value)
        if prop is None:
            return None
        logger.info("Updated listing %s", property_id)
        return Valid(prop)

    def delete_property(self, property_id: str) -> bool:
        deleted = self.store.delete(property_id)
        if deleted:
            logger.info("Deleted listing %s", property_id)
        return deleted
