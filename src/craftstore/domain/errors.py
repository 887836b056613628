"""Domain error classes.

Storefront failures expressed independently of the transport.
The HTTP layer translates them into status codes and JSON bodies.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all storefront domain errors.

    Carries a human-readable message, a stable error code and free-form
    context (resource names, identifiers, offending values).
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context (e.g. field names, identifiers)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Malformed input.

    Examples:
        - Non-numeric identifier where an id is required
        - Quantity below 1 or not an integer
        - min_price greater than max_price
        - Customization value that is not a primitive

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-specific errors, each with 'field', 'message' and optionally 'code'
                   Example: [{"field": "quantity", "message": "Must be >= 1"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """A well-formed reference to an entity that does not exist.

    Examples:
        - Product with id 42 not found
        - Adding an item to a cart that was never created
        - Updating a cart item that was already removed

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | int | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Product", "Cart")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier is not None:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - Username already registered
        - Email already registered

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class InternalError(DomainError):
    """Unexpected failure in the store layer.

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
