"""
Request and response schemas for API endpoints.
"""
from voter_registry.schemas.auth import (
    SignupRequest,
    SignupResponse,
    LoginRequest,
    LoginResponse,
    DecisionRequest,
    DecisionResponse,
    RegistrantResponse,
    CurrentUserResponse,
    DashboardResponse,
    MessageResponse,
)
from voter_registry.schemas.voter import (
    VoterCreate,
    VoterUpdate,
    VoterCreatedResponse,
    VoterUpdatedResponse,
    VoterPage,
    UserDataResponse,
)

__all__ = [
    # Auth
    "SignupRequest",
    "SignupResponse",
    "LoginRequest",
    "LoginResponse",
    "DecisionRequest",
    "DecisionResponse",
    "RegistrantResponse",
    "CurrentUserResponse",
    "DashboardResponse",
    "MessageResponse",
    # Voter
    "VoterCreate",
    "VoterUpdate",
    "VoterCreatedResponse",
    "VoterUpdatedResponse",
    "VoterPage",
    "UserDataResponse",
]
