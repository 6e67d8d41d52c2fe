"""Domain errors raised by application services."""


class HomeBarError(Exception):
    """Base error for home bar services."""


class NotFoundError(HomeBarError):
    """Raised when an inventory item or recipe does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(HomeBarError):
    """Raised when a request cannot be applied."""
