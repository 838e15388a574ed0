"""
Error taxonomy for the HTTP handlers.

Every failure a handler can report to a client is a ``ServiceError`` carrying
the HTTP status code and the message placed in the error envelope. The router
converts these into responses; nothing here is retried.
"""

from typing import Any, Dict, Iterable, Optional


class ServiceError(Exception):
    """Base exception class for client-visible service errors."""

    status_code: int = 500
    error_code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_code": self.error_code,
            "status_code": self.status_code,
            "message": self.message,
        }


class ValidationError(ServiceError):
    """Raised when request input is missing or invalid."""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class InvalidRequestBodyError(ValidationError):
    """Raised when the request body cannot be decoded."""

    error_code = "INVALID_REQUEST_BODY"

    def __init__(self, message: str = "Invalid request body"):
        super().__init__(message)


class ResourceNotFoundError(ServiceError):
    """Raised when a requested resource is not found."""

    status_code = 404
    error_code = "RESOURCE_NOT_FOUND"

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id

    def to_dict(self) -> Dict[str, Any]:
        details = super().to_dict()
        details.update({"resource_type": self.resource_type, "resource_id": self.resource_id})
        return details


class RouteNotFoundError(ServiceError):
    """Raised when no route template matches the request path."""

    status_code = 404
    error_code = "ROUTE_NOT_FOUND"

    def __init__(self, path: str):
        super().__init__("Not found")
        self.path = path


class MethodNotAllowedError(ServiceError):
    """Raised when a route exists but does not accept the request method."""

    status_code = 405
    error_code = "METHOD_NOT_ALLOWED"

    def __init__(self, method: str, allowed_methods: Iterable[str]):
        super().__init__("Method not allowed")
        self.method = method
        self.allowed_methods = sorted(allowed_methods)


class MalformedMessageError(Exception):
    """Raised by the queue consumer for messages it refuses to process."""

    def __init__(self, message: str, message_id: Optional[str] = None):
        super().__init__(message)
        self.message_id = message_id
