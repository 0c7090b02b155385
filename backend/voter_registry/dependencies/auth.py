"""
Authentication dependencies for route protection.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends, Request

from voter_registry.config import Settings, get_settings
from voter_registry.core.exceptions import Unauthenticated
from voter_registry.dependencies.services import (
    get_registrant_service,
    get_session_service,
)
from voter_registry.models.session import SessionSnapshot
from voter_registry.services.registrant_service import RegistrantService
from voter_registry.services.session_service import SessionService

logger = logging.getLogger(__name__)


def get_session_token(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Optional[str]:
    """Session token from the session cookie, if any."""
    return request.cookies.get(settings.session_cookie_name)


async def get_current_session(
    token: Annotated[Optional[str], Depends(get_session_token)],
    sessions: SessionService = Depends(get_session_service),
    registrants: RegistrantService = Depends(get_registrant_service),
    settings: Settings = Depends(get_settings),
) -> SessionSnapshot:
    """
    Dependency to get the caller's session snapshot.

    By default the snapshot taken at login is trusted as-is. With
    ``session_revalidate`` enabled the registrant is reloaded: a deleted or
    no-longer-accepted registrant loses the session, otherwise role, status
    and constituency are refreshed.

    Raises:
        Unauthenticated: If there is no live session
    """
    if not token:
        raise Unauthenticated("Not authenticated")

    snapshot = await sessions.get(token)
    if snapshot is None:
        raise Unauthenticated("Not authenticated")

    if not settings.session_revalidate:
        return snapshot

    registrant = await registrants.get_by_username(snapshot.username)
    if registrant is None or not registrant.is_accepted:
        logger.info("Revoking stale session of %s", snapshot.username)
        await sessions.destroy(token)
        raise Unauthenticated("Session is no longer valid")

    refreshed = snapshot.model_copy(update={
        "role": registrant.role,
        "status": registrant.status,
        "constituency": registrant.constituency,
    })
    if refreshed != snapshot:
        await sessions.replace(token, refreshed)
    return refreshed


# Type alias for cleaner route signatures
CurrentSession = Annotated[SessionSnapshot, Depends(get_current_session)]
