from __future__ import annotations

import pytest

from app.services.listing_store import ListingStore
from app.services.listings import ListingService

PARIS_ID = "3f1c2a6e-8b4d-4f0a-9c2e-1d5b7a9e4c10"
LYON_ID = "a7e9d2b4-5c1f-4e8a-b3d6-2f4c8e1a9b57"
PARIS_RENT_ID = "e2d4a6c8-9b1e-4f3a-a5c7-6e8b0d2f4a93"

SEED_RECORDS = [
    {
        "id": PARIS_ID,
        "title": "Appartement au Marais",
        "description": "Trois pièces traversant, parquet d'origine.",
        "city": "Paris",
        "address": "12 rue des Rosiers",
        "price": 300000,
        "surface": 68,
        "rooms": 3,
        "type": "sale",
        "createdAt": "2024-01-15T10:00:00.000Z",
        "updatedAt": "2024-01-15T10:00:00.000Z",
    },
    {
        "id": LYON_ID,
        "title": "Studio meublé",
        "description": "Studio meublé avec cuisine équipée.",
        "city": "Lyon",
        "address": "45 boulevard Vivier-Merle",
        "price": 720,
        "surface": 24,
        "rooms": 1,
        "type": "rent",
        "createdAt": "2024-02-03T08:30:00.000Z",
        "updatedAt": "2024-02-10T14:12:00.000Z",
    },
    {
        "id": PARIS_RENT_ID,
        "title": "Deux pièces avec balcon",
        "description": "Deux pièces rénové avec balcon plein sud.",
        "city": "paris",
        "address": "31 avenue Daumesnil",
        "price": 1450,
        "surface": 42,
        "rooms": 2,
        "type": "rent",
        "createdAt": "2024-04-02T16:20:00.000Z",
        "updatedAt": "2024-04-05T11:00:00.000Z",
    },
]


@pytest.fixture
def listing_payload() -> dict:
    """A payload that passes the create schema."""
    return {
        "title": "Maison avec jardin",
        "description": "Maison de cinq pièces sur un terrain arboré.",
        "city": "Bordeaux",
        "address": "8 allée des Acacias",
        "price": 495000,
        "surface": 142.5,
        "rooms": 5,
        "type": "sale",
    }


@pytest.fixture
def store() -> ListingStore:
    return ListingStore.from_records(SEED_RECORDS)


@pytest.fixture
def service(store) -> ListingService:
    return ListingService(store)


@pytest.fixture
def seed_ids() -> dict[str, str]:
    return {"paris": PARIS_ID, "lyon": LYON_ID, "paris_rent": PARIS_RENT_ID}
