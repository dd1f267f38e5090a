"""Domain exceptions for the orders API.

Services raise these; app.core.exception_handlers turns them into JSON
error bodies with a status picked from error_code.
"""

from typing import Any


class OrdersApiException(Exception):
    """Base for every error the API reports with a structured body.

    Attributes:
        message: Text shown to the client.
        error_code: Stable machine-readable code (e.g. RESOURCE_NOT_FOUND).
        details: Extra context such as the offending field.
    """

    default_code = "ORDERS_API_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error code, message and details."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(OrdersApiException):
    """A request is well-formed but refers to something that does not exist."""

    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, details={"field": field} if field else None)


class AuthenticationException(OrdersApiException):
    """Credentials or token rejected."""

    default_code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class ResourceNotFoundException(OrdersApiException):
    """No row with the requested id.

    Args:
        resource_type: Entity name, e.g. 'organization' or 'order'.
        resource_id: The id that was looked up.
    """

    default_code = "RESOURCE_NOT_FOUND"

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateEmailException(OrdersApiException):
    """Another user already has this email."""

    default_code = "DUPLICATE_EMAIL"

    def __init__(self) -> None:
        super().__init__("Email is already registered")
