"""
Error taxonomy shared by services and routes.

Services raise these; the handler registered in main.py renders them as
``{"message": ...}`` with the matching HTTP status.
"""
from typing import Optional

from fastapi import status


class RegistryError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Conflict(RegistryError):
    """Username already registered."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class NotFound(RegistryError):
    """Missing registrant, partition or voter record."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidCredentials(RegistryError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class NotApproved(RegistryError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Your signup request is not yet accepted"


class InvalidKey(RegistryError):
    """Malformed voter record key."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid voter ID format"


class Unauthenticated(RegistryError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class Forbidden(RegistryError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied"


class InternalError(RegistryError):
    """Store or session backend failure; carries the underlying cause."""

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause

    @property
    def error(self) -> Optional[str]:
        return str(self.cause) if self.cause is not None else None
