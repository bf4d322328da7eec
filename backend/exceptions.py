"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application. They are raised by the
service layer and translated into HTTP responses by the global handlers in
utils.error_handlers; routers never catch them.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when a requested resource does not exist"""

    def __init__(self, resource: str, resource_id: int | str, message: str | None = None):
        details = {"resource": resource, "id": resource_id}
        msg = message or f"{resource} '{resource_id}' not found"
        super().__init__(msg, details)


class ConflictError(ApplicationError):
    """Raised when a change would violate a uniqueness rule"""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class AuthenticationError(ApplicationError):
    """Raised when a request carries no valid bearer token"""

    def __init__(self, message: str = "Invalid or missing bearer token"):
        super().__init__(message)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
