"""Domain records held by the listing store."""

from app.models.property import Property

__all__ = ["Property"]
