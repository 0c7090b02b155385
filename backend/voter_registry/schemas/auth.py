"""
Signup, login and admin decision request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from voter_registry.models.registrant import ApprovalStatus, Registrant, RegistrantRole
from voter_registry.models.session import SessionSnapshot


class SignupRequest(BaseModel):
    """Signup request body."""
    username: str = Field(..., min_length=1, max_length=64, description="Unique login name")
    password: str = Field(..., min_length=1, description="Password")
    role: RegistrantRole = Field(default=RegistrantRole.USER, description="Requested role")
    constituency: Optional[str] = Field(None, description="Electoral constituency")


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., description="Login name")
    password: str = Field(..., description="Password")


class DecisionRequest(BaseModel):
    """Admin accept/refuse request body."""
    username: str = Field(..., description="Registrant to accept or refuse")


class RegistrantResponse(BaseModel):
    """Registrant information (excludes the password hash)."""
    model_config = ConfigDict(use_enum_values=True)

    id: Optional[str] = Field(None, description="Registrant ID")
    username: str
    role: RegistrantRole
    constituency: Optional[str] = None
    status: ApprovalStatus
    created_at: Optional[datetime] = None

    @classmethod
    def from_registrant(cls, registrant: Registrant) -> "RegistrantResponse":
        return cls(
            id=registrant.id,
            username=registrant.username,
            role=registrant.role,
            constituency=registrant.constituency,
            status=registrant.status,
            created_at=registrant.created_at,
        )


class SignupResponse(BaseModel):
    """Signup response; user is only present for auto-logged-in admins."""
    message: str
    user: Optional[RegistrantResponse] = None


class LoginResponse(BaseModel):
    message: str
    user: RegistrantResponse


class DecisionResponse(BaseModel):
    message: str
    user: RegistrantResponse


class CurrentUserResponse(BaseModel):
    """The caller's session snapshot."""
    user: SessionSnapshot


class DashboardResponse(BaseModel):
    """Non-admin registrants in the admin's constituency."""
    pendingUsers: list[RegistrantResponse]
    acceptedUsers: list[RegistrantResponse]


class MessageResponse(BaseModel):
    message: str
