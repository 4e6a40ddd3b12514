"""
Domain errors raised by handlers and rendered as {"success": false, "message": ...}
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that map to a client-facing JSON response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Raised when a required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    """Raised when credentials don't match any account."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    """Raised when a referenced record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class PayloadTooLargeError(ValidationError):
    """Raised when an upload exceeds the size limit."""

    status_code = 413


class UnsupportedMediaError(ValidationError):
    """Raised when an upload is not an allowed image type."""

    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE


class ServiceUnavailableError(AppError):
    """Raised when the record store cannot be reached."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
