"""Errors raised by the energy-balance services."""


class HealthyTrackerError(Exception):
    """Base exception for tracker errors."""


class NotFoundError(HealthyTrackerError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidInputError(HealthyTrackerError):
    """Raised when a caller supplies an unparseable value."""
