"""
Exceptions raised by the message store.

Each error carries an error code and the HTTP status the REST layer
should answer with, so handlers never have to inspect message text.
"""

from typing import Any


class MessageStoreError(Exception):
    """Base exception for all message store errors."""

    error_code: str = "MESSAGE_STORE_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        if status_code:
            self.status_code = status_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "detail": self.message,
            "context": self.context,
        }


class ValidationError(MessageStoreError):
    """Content rejected before it reached the collection."""
    error_code = "VALIDATION_ERROR"
    status_code = 422
