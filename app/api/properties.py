from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from app.dependencies import get_listing_service
from app.schemas import ErrorResponse, MessageResponse, PropertyFilters, PropertyRead
from app.services.listings import ListingService
from app.services.validation import Invalid, validate_property_id

router = APIRouter(
    prefix="/api/properties",
    tags=["properties"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)

NOT_FOUND = "Property not found"


def _rejected(result: Invalid) -> HTTPException:
    return HTTPException(400, [e.as_dict() for e in result.errors])


def _require_uuid(property_id: str) -> None:
    result = validate_property_id(property_id)
    if isinstance(result, Invalid):
        raise _rejected(result)


@router.get("", response_model=list[PropertyRead])
async def list_properties(
    city: str | None = None,
    type: str | None = None,
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    service: ListingService = Depends(get_listing_service),
):
    criteria = PropertyFilters(city=city, type=type, min_price=min_price, max_price=max_price)
    return service.list_properties(criteria)


@router.get("/{property_id}", response_model=PropertyRead)
async def get_property(
    property_id: str,
    service: ListingService = Depends(get_listing_service),
):
    _require_uuid(property_id)
    prop = service.get_property(property_id)
    if not prop:
        raise HTTPException(404, NOT_FOUND)
    return prop


@router.post("", response_model=PropertyRead, status_code=201)
async def create_property(
    body: Any = Body(None),
    service: ListingService = Depends(get_listing_service),
):
    result = service.create_property(body)
    if isinstance(result, Invalid):
        raise _rejected(result)
    return result.value


@router.put("/{property_id}", response_model=PropertyRead)
async def update_property(
    property_id: str,
    body: Any = Body(None),
    service: ListingService = Depends(get_listing_service),
):
    """Partial update: fields missing from the body keep their current values."""
    _require_uuid(property_id)
    result = service.update_property(property_id, body if body is not None else {})
    if result is None:
        raise HTTPException(404, NOT_FOUND)
    if isinstance(result, Invalid):
        raise _rejected(result)
    return result.value


@router.delete("/{property_id}", response_model=MessageResponse)
async def delete_property(
    property_id: str,
    service: ListingService = Depends(get_listing_service),
):
    _require_uuid(property_id)
    if not service.delete_property(property_id):
        raise HTTPException(404, NOT_FOUND)
    return {"message": "Property deleted"}
