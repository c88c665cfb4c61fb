"""Exception hierarchy for the listings service."""


class ListingsError(Exception):
    """Base exception for all listings errors."""


class SeedDataError(ListingsError):
    """Raised when the initial dataset cannot be read or is not a list of records."""
