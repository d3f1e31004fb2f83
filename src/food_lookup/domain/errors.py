"""Engine error types."""


class FoodLookupError(Exception):
    """Base class for engine errors."""


class InvalidInputError(FoodLookupError, ValueError):
    """Raised when a query, barcode or submission is rejected up front."""


class MalformedResponseError(FoodLookupError):
    """Raised inside adapters when a provider payload does not match its schema."""
