"""Custom exception classes"""
from typing import Any, Optional


class AppException(Exception):
    """Base exception for tripsplit errors"""

    def __init__(
        self,
        message: str,
        error_type: str = "AppError",
        details: Optional[Any] = None
    ):
        self.message = message
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Raised when an expense is rejected before it is accepted"""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(
            message=message,
            error_type="ValidationError",
            details=details
        )


class NotFoundError(AppException):
    """Referenced record not found"""

    def __init__(self, message: str = "Record not found", details: Optional[Any] = None):
        super().__init__(
            message=message,
            error_type="NotFoundError",
            details=details
        )
