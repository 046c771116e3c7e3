"""Domain exceptions.

Tagged error taxonomy shared by the store, the services and the API layer.
The API maps each kind to its own HTTP status:

- ValidationFailedError -> 400
- NotFoundError -> 404
- anything else -> 500
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors inherit from this class so the application layer
    can catch them without catching programming errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str) -> None:
        """Initialize not found error.

        Args:
            entity_type: Human-readable entity name (e.g., "Product SKU").
            entity_id: The id that could not be resolved.
        """
        super().__init__(
            f"{entity_type} not found: {entity_id}",
            details={"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ValidationFailedError(DomainError):
    """Raised when input violates a domain rule.

    Attributes:
        errors: Field-level problems as ``{"field": ..., "message": ...}``.
    """

    def __init__(self, message: str, errors: list[dict[str, str]] | None = None) -> None:
        super().__init__(message, details={"errors": errors or []})
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationFailedError":
        """Build an error describing a single bad field."""
        return cls(message, errors=[{"field": field, "message": message}])
