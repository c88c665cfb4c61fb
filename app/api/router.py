"""Central router that includes all sub-routers."""

from fastapi import APIRouter

from app.api.properties import router as properties_router

api_router = APIRouter()
api_router.include_router(properties_router)
