"""
Authentication router: signup, login, logout and the caller's own data.
"""
import logging

from fastapi import APIRouter, Depends, Response, status

from voter_registry.config import Settings, get_settings
from voter_registry.dependencies.auth import CurrentSession, get_session_token
from voter_registry.dependencies.services import (
    get_registrant_service,
    get_session_service,
    get_voter_service,
)
from voter_registry.models.session import SessionSnapshot
from voter_registry.schemas.auth import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegistrantResponse,
    SignupRequest,
    SignupResponse,
)
from voter_registry.schemas.voter import UserDataResponse
from voter_registry.services.registrant_service import RegistrantService
from voter_registry.services.session_service import SessionService
from voter_registry.services.voter_service import VoterService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post(
    "/signup",
    response_model=SignupResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up",
)
async def signup(
    body: SignupRequest,
    response: Response,
    registrants: RegistrantService = Depends(get_registrant_service),
    sessions: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings),
):
    """
    Request an account.

    - **username**: Unique login name
    - **password**: Password
    - **role**: `user` (default), `authority` or `admin`
    - **constituency**: Constituency the account belongs to

    Admins are accepted and logged in immediately. Everyone else waits for
    an admin to accept the request.
    """
    registrant = await registrants.register(body)

    if not registrant.is_admin:
        return SignupResponse(message="Signup request submitted. Awaiting admin approval.")

    token = await sessions.create(SessionSnapshot.from_registrant(registrant))
    set_session_cookie(response, token, settings)
    return SignupResponse(
        message="Admin signup and login successful",
        user=RegistrantResponse.from_registrant(registrant),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in",
)
async def login(
    body: LoginRequest,
    response: Response,
    registrants: RegistrantService = Depends(get_registrant_service),
    sessions: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings),
):
    """
    Log in with username and password. Sets the session cookie.

    Fails with 400 on bad credentials and 403 while the signup is not accepted.
    """
    registrant = await registrants.authenticate(body.username, body.password)

    token = await sessions.create(SessionSnapshot.from_registrant(registrant))
    set_session_cookie(response, token, settings)
    return LoginResponse(
        message="Login successful",
        user=RegistrantResponse.from_registrant(registrant),
    )


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log out",
)
async def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    sessions: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings),
):
    """Destroy the current session, if any, and clear the session cookie."""
    if token:
        await sessions.destroy(token)
    response.delete_cookie(settings.session_cookie_name)
    return MessageResponse(message="Logout successful")


@router.get(
    "/user",
    response_model=CurrentUserResponse,
    summary="Get current session user",
)
async def get_current_user_info(session: CurrentSession):
    """Return the registrant snapshot held by the caller's session."""
    return CurrentUserResponse(user=session)


@router.get(
    "/user/data",
    response_model=UserDataResponse,
    summary="Get all of the caller's voters",
)
async def get_user_data(
    session: CurrentSession,
    voters: VoterService = Depends(get_voter_service),
):
    """Full, unpaginated contents of the caller's own partition."""
    return UserDataResponse(userData=await voters.list_all(session.username))
