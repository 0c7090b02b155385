"""
Core module - security helpers and the error taxonomy.
"""
from voter_registry.core.exceptions import (
    RegistryError,
    Conflict,
    NotFound,
    InvalidCredentials,
    NotApproved,
    InvalidKey,
    Unauthenticated,
    Forbidden,
    InternalError,
)
from voter_registry.core.security import (
    hash_password,
    verify_password,
    generate_session_token,
)

__all__ = [
    "RegistryError",
    "Conflict",
    "NotFound",
    "InvalidCredentials",
    "NotApproved",
    "InvalidKey",
    "Unauthenticated",
    "Forbidden",
    "InternalError",
    "hash_password",
    "verify_password",
    "generate_session_token",
]
