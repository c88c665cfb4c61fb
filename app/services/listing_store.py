"""In-memory listing store.

The store is the only owner of Property records. Records live in an
insertion-ordered dict keyed by id, and every public operation runs under a
single lock so a request never observes a half-applied mutation. Callers only
ever receive copies.
"""

from __future__ import annotations

import json
import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Iterable

from pydantic import TypeAdapter, ValidationError

from app.exceptions import SeedDataError
from app.models.property import Property
from app.schemas.property import PROPERTY_TYPES, PropertyCreate, PropertyFilters, PropertyUpdate
from app.services.validation import Valid, validate_property_id

logger = logging.getLogger(__name__)

_datetime_adapter = TypeAdapter(datetime)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _touch(previous: datetime) -> datetime:
    """Return a timestamp strictly later than ``previous``."""
    now = _utcnow()
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


def _parse_timestamp(value: Any, field: str, record_id: str, default: datetime) -> datetime:
    if value is None:
        return default
    try:
        parsed = _datetime_adapter.validate_python(value)
    except ValidationError:
        logger.warning("Seed record %s has unreadable %s %r, using load time", record_id, field, value)
        return default
    return parsed.replace(tzinfo=timezone.utc) if parsed.tzinfo is None else parsed


_SEED_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "title": (str,),
    "description": (str,),
    "city": (str,),
    "address": (str,),
    "price": (int, float),
    "surface": (int, float),
    "rooms": (int,),
}


def _seed_field(raw: dict, field: str, record_id: str) -> Any:
    """Seed value for ``field``, or None when it is missing or of the wrong kind."""
    value = raw.get(field)
    if value is None:
        return None
    if field == "rooms" and isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, _SEED_FIELD_TYPES[field]):
        logger.warning("Seed record %s has unusable %s %r, dropped", record_id, field, value)
        return None
    return value


def _normalize_seed_record(raw: Any, now: datetime) -> Property:
    if not isinstance(raw, dict):
        raise SeedDataError(f"seed record must be an object, got {type(raw).__name__}")

    record_id = raw.get("id")
    if not isinstance(validate_property_id(record_id), Valid):
        new_id = str(uuid.uuid4())
        logger.warning("Seed record id %r is not a UUID, reassigned to %s", record_id, new_id)
        record_id = new_id

    prop_type = raw.get("type")
    if prop_type not in PROPERTY_TYPES:
        logger.warning("Seed record %s has type %r, coerced to 'sale'", record_id, prop_type)
        prop_type = "sale"

    created_at = _parse_timestamp(raw.get("createdAt"), "createdAt", record_id, now)
    updated_at = _parse_timestamp(raw.get("updatedAt"), "updatedAt", record_id, now)
    if updated_at < created_at:
        updated_at = created_at

    return Property(
        id=record_id,
        **{field: _seed_field(raw, field, record_id) for field in _SEED_FIELD_TYPES},
        type=prop_type,
        created_at=created_at,
        updated_at=updated_at,
    )


class ListingStore:
    def __init__(self, records: Iterable[Property] = ()):
        self._lock = threading.Lock()
        self._records: dict[str, Property] = {}
        for record in records:
            if record.id in self._records:
                logger.warning("Duplicate listing id %s skipped", record.id)
                continue
            self._records[record.id] = record

    @classmethod
    def from_records(cls, raw_records: Iterable[Any]) -> ListingStore:
        """Bulk-load bootstrap data without running it through the create schema.

        Invalid ``type`` values become ``sale``; missing timestamps default to now.
        Fields that are missing or of the wrong kind are kept as None.
        """
        now = _utcnow()
        store = cls(_normalize_seed_record(raw, now) for raw in raw_records)
        logger.info("Loaded %d seed listings", len(store))
        return store

    @classmethod
    def from_seed_file(cls, path: str | Path) -> ListingStore:
        path = Path(path)
        if not path.exists():
            logger.warning("Seed file %s not found, starting with an empty store", path)
            return cls()
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise SeedDataError(f"cannot read seed file {path}: {exc}") from exc
        if not isinstance(data, list):
            raise SeedDataError(f"seed file {path} must contain a JSON array")
        return cls.from_records(data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list(self) -> list[Property]:
        with self._lock:
            return [replace(p) for p in self._records.values()]

    def get(self, property_id: str) -> Property | None:
        with self._lock:
            prop = self._records.get(property_id)
            return replace(prop) if prop else None

    def create(self, data: PropertyCreate) -> Property:
        now = _utcnow()
        prop = Property(id=str(uuid.uuid4()), **data.model_dump(), created_at=now, updated_at=now)
        with self._lock:
            self._records[prop.id] = prop
            return replace(prop)

    def update(self, property_id: str, patch: PropertyUpdate) -> Property | None:
        changes = patch.model_dump(exclude_unset=True)
        with self._lock:
            current = self._records.get(property_id)
            if current is None:
                return None
            updated = replace(current, **changes, updated_at=_touch(current.updated_at))
            self._records[property_id] = updated
            return replace(updated)

    def delete(self, property_id: str) -> bool:
        with self._lock:
            return self._records.pop(property_id, None) is not None

    def filter(self, criteria: PropertyFilters) -> list[Property]:
        city = criteria.city.lower() if criteria.city else None
        with self._lock:
            return [
                replace(p)
                for p in self._records.values()
                if (city is None or (p.city is not None and city in p.city.lower()))
                and (not criteria.type or p.type == criteria.type)
                # a listing without a price never satisfies a price bound
                and (criteria.min_price is None or (p.price is not None and p.price >= criteria.min_price))
                and (criteria.max_price is None or (p.price is not None and p.price <= criteria.max_price))
            ]
