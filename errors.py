"""
Error types raised by the booking backend.

Every error is an ``HTTPException`` carrying its status code, so route
handlers and helpers can simply ``raise`` them. ``main.py`` renders them as
``{"error": "<message>"}``.
"""

from fastapi import HTTPException, status


class BookingError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(status_code=self.status_code, detail=message)

    @property
    def message(self) -> str:
        return self.detail


class ValidationError(BookingError):
    """Malformed, missing or out-of-range client input."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(BookingError):
    """Missing, malformed, expired or wrong credentials.

    Messages stay uniform so callers can't tell which check failed.
    """
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(BookingError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Booking not found"):
        super().__init__(message)


class StorageError(BookingError):
    """Database failure. The message never includes driver details."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
