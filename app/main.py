"""FastAPI application entry point."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.config import Settings, get_settings
from app.schemas import HealthResponse
from app.services.listings import ListingService


def create_app(settings: Settings | None = None, service: ListingService | None = None) -> FastAPI:
    """Build the API around one ListingService, seeding it from settings when none is given."""
    settings = settings or get_settings()
    if service is None:
        service = ListingService.from_seed_file(settings.seed.path)

    app = FastAPI(
        title="Listings API",
        description="Real-estate listings for sale and rent: create, browse, filter, update and remove.",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.listing_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # API routes
    app.include_router(api_router)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return {"status": "ok", "timestamp": datetime.now(timezone.utc)}

    return app


app = create_app()
