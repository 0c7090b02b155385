"""
Role-based access control dependencies.
"""
from typing import Callable

from fastapi import Depends

from voter_registry.core.exceptions import Forbidden
from voter_registry.dependencies.auth import get_current_session
from voter_registry.models.registrant import RegistrantRole
from voter_registry.models.session import SessionSnapshot


def require_roles(*allowed_roles: RegistrantRole, detail: str = "Access denied") -> Callable:
    """
    Dependency factory for role-based access control.

    The check runs against the session snapshot, not the stored registrant.

    Usage:
        @router.delete("/voters/{voter_id}")
        async def delete_voter(session: SessionSnapshot = Depends(require_admin())):
            ...

    Args:
        *allowed_roles: Roles that are allowed to access the route
        detail: Message of the Forbidden error

    Returns:
        Dependency function that validates the session role
    """
    allowed = {RegistrantRole(role).value for role in allowed_roles}

    async def role_checker(
        session: SessionSnapshot = Depends(get_current_session),
    ) -> SessionSnapshot:
        if RegistrantRole(session.role).value not in allowed:
            raise Forbidden(detail)
        return session

    return role_checker


def require_admin() -> Callable:
    """Shortcut dependency for admin-only routes."""
    return require_roles(RegistrantRole.ADMIN, detail="Admin access required")


def require_admin_or_authority() -> Callable:
    """Shortcut dependency for routes that admins and authorities share."""
    return require_roles(RegistrantRole.ADMIN, RegistrantRole.AUTHORITY)
