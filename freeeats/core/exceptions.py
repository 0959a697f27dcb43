"""
Custom Exceptions for the FreeEats API

This module defines the exception taxonomy raised by repositories and
services and rendered by the API exception handlers.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONTENT_REJECTED = "CONTENT_REJECTED"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # External service errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


class AuthenticationError(BaseAppException):
    """Raised when no valid identity accompanies the request"""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, None, 401)


class AuthorizationError(BaseAppException):
    """Raised when the caller is not allowed to act on a resource"""

    def __init__(
        self,
        message: str = "Not authorized",
        action: Optional[str] = None,
        resource: Optional[str] = None
    ):
        details = {}
        if action:
            details["action"] = action
        if resource:
            details["resource"] = resource
        super().__init__(message, ErrorCode.AUTHORIZATION_FAILED, details, 403)


class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 422
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class ModerationRejectedError(BaseAppException):
    """Raised when the content classifier rejects a new post"""

    DEFAULT_REASON = "This doesn't appear to be about food"

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason or self.DEFAULT_REASON
        super().__init__(self.reason, ErrorCode.CONTENT_REJECTED, {"reason": self.reason}, 422)


class ExternalServiceError(BaseAppException):
    """Exception raised when an upstream dependency fails"""

    def __init__(self, service: str, message: Optional[str] = None):
        super().__init__(
            message or f"{service} is unavailable",
            ErrorCode.EXTERNAL_SERVICE_ERROR,
            {"service": service},
            502
        )


class RepositoryError(BaseAppException):
    """Exception raised when a database operation fails"""

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, ErrorCode.DATABASE_ERROR, None, 500)


class EntityAlreadyExistsError(RepositoryError):
    """Exception raised on unique constraint violations"""

    def __init__(self, message: str = "Entity already exists"):
        super().__init__(message)
        self.error_code = ErrorCode.DUPLICATE_ENTRY
        self.status_code = 409


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "ResourceNotFoundError",
    "ModerationRejectedError",
    "ExternalServiceError",
    "RepositoryError",
    "EntityAlreadyExistsError",
]
