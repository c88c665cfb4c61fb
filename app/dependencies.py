"""FastAPI dependency providers."""

from __future__ import annotations

from fastapi import Request

from app.services.listings import ListingService


def get_listing_service(request: Request) -> ListingService:
    """The service built by create_app for this application instance."""
    return request.app.state.listing_service
