"""
Exceptions raised by the inventory service.

Each HTTP-facing error carries the status code it is reported with; the
application's exception handlers turn them into ``{"error": message}``.
"""

from typing import Optional


class InventoryError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(InventoryError):
    """Request payload or path parameter is malformed or out of range."""

    status_code = 400
    message = "Validation failed"

    def __init__(self, message: Optional[str] = None, details: Optional[list] = None):
        super().__init__(message)
        self.details = details or []


class NotFoundError(InventoryError):
    """The targeted product does not exist."""

    status_code = 404
    message = "Product not found"


class AuthorizationError(InventoryError):
    """Admin token missing or wrong."""

    status_code = 403
    message = "Access denied: invalid security key"


class PersistenceError(InventoryError):
    """Any database or connectivity failure, including timeouts."""

    status_code = 500
    message = "Database operation failed"


class FatalBootstrapError(Exception):
    """Schema setup failed; the process must exit without serving."""
