from dataclasses import asdict

import pytest

from app.schemas import PropertyCreate, PropertyRead, PropertyUpdate, PropertyFilters
from app.services.validation import Invalid, Valid, validate_property, validate_property_id


def _fields(result):
    assert isinstance(result, Invalid)
    return [e.field for e in result.errors]


def test_property_create_valid(listing_payload):
    result = validate_property(listing_payload, "create")
    assert isinstance(result, Valid)
    assert isinstance(result.value, PropertyCreate)
    assert result.value.city == "Bordeaux"
    assert result.value.rooms == 5


def test_create_reports_every_missing_field_in_order():
    assert _fields(validate_property({}, "create")) == [
        "title", "description", "city", "address", "price", "surface", "rooms", "type",
    ]


def test_create_reports_violations_across_fields_together(listing_payload):
    listing_payload.update(title="ab", price=-5, type="lease")
    assert _fields(validate_property(listing_payload, "create")) == ["title", "price", "type"]


def test_price_zero_rejected(listing_payload):
    listing_payload["price"] = 0
    assert _fields(validate_property(listing_payload, "create")) == ["price"]


def test_fractional_rooms_rejected(listing_payload):
    listing_payload["rooms"] = 1.5
    assert _fields(validate_property(listing_payload, "create")) == ["rooms"]


def test_numeric_strings_not_coerced(listing_payload):
    listing_payload["rooms"] = "3"
    listing_payload["price"] = "495000"
    assert _fields(validate_property(listing_payload, "create")) == ["price", "rooms"]


def test_nan_price_rejected(listing_payload):
    listing_payload["price"] = float("nan")
    assert _fields(validate_property(listing_payload, "create")) == ["price"]


def test_integer_price_accepted(listing_payload):
    listing_payload["price"] = 1
    result = validate_property(listing_payload, "create")
    assert isinstance(result, Valid)
    assert result.value.price == 1
    assert type(result.value.price) is int


def test_float_price_kept_as_float(listing_payload):
    listing_payload["price"] = 1250.5
    assert validate_property(listing_payload, "create").value.price == 1250.5


@pytest.mark.parametrize("mode", ["create", "update"])
def test_whole_valued_float_rooms_accepted(listing_payload, mode):
    listing_payload["rooms"] = 2.0
    result = validate_property(listing_payload, mode)
    assert isinstance(result, Valid)
    assert result.value.rooms == 2
    assert type(result.value.rooms) is int


def test_boolean_rooms_rejected(listing_payload):
    listing_payload["rooms"] = True
    assert _fields(validate_property(listing_payload, "create")) == ["rooms"]


@pytest.mark.parametrize("title", ["abc", "x" * 100])
def test_title_length_bounds_accepted(listing_payload, title):
    listing_payload["title"] = title
    assert isinstance(validate_property(listing_payload, "create"), Valid)


def test_title_too_long_rejected(listing_payload):
    listing_payload["title"] = "x" * 101
    assert _fields(validate_property(listing_payload, "create")) == ["title"]


def test_unknown_type_is_single_field_error(listing_payload):
    listing_payload["type"] = "auction"
    result = validate_property(listing_payload, "create")
    assert _fields(result) == ["type"]
    assert "sale" in result.errors[0].message


def test_unknown_fields_ignored(listing_payload):
    listing_payload["agent"] = "Jane"
    result = validate_property(listing_payload, "create")
    assert isinstance(result, Valid)
    assert "agent" not in result.value.model_dump()


def test_non_object_payload_rejected():
    result = validate_property(["not", "an", "object"], "create")
    assert _fields(result) == [""]


def test_update_accepts_empty_patch():
    result = validate_property({}, "update")
    assert isinstance(result, Valid)
    assert result.value.model_dump(exclude_unset=True) == {}


def test_update_keeps_field_constraints():
    assert _fields(validate_property({"price": -1, "rooms": 0}, "update")) == ["price", "rooms"]


def test_update_rejects_explicit_null():
    assert _fields(validate_property({"title": None}, "update")) == ["title"]


def test_update_only_sets_supplied_fields():
    result = validate_property({"city": "Nantes", "type": "rent"}, "update")
    assert isinstance(result.value, PropertyUpdate)
    assert result.value.model_dump(exclude_unset=True) == {"city": "Nantes", "type": "rent"}


def test_unknown_mode_raises(listing_payload):
    with pytest.raises(ValueError):
        validate_property(listing_payload, "replace")


def test_property_id_shape():
    assert isinstance(validate_property_id("3f1c2a6e-8b4d-4f0a-9c2e-1d5b7a9e4c10"), Valid)
    result = validate_property_id("42")
    assert _fields(result) == ["id"]
    assert _fields(validate_property_id("3f1c2a6e8b4d4f0a9c2e1d5b7a9e4c10")) == ["id"]


def test_property_read_serializes_camel_case(store, seed_ids):
    prop = store.get(seed_ids["paris"])
    data = PropertyRead.model_validate(asdict(prop)).model_dump(by_alias=True)
    assert "createdAt" in data and "updatedAt" in data
    assert "created_at" not in data


def test_filters_empty():
    assert PropertyFilters().is_empty()
    assert PropertyFilters(city="").is_empty()
    assert not PropertyFilters(min_price=0).is_empty()
