"""
Session snapshot stored server-side in Redis.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from voter_registry.models.registrant import ApprovalStatus, Registrant, RegistrantRole


class SessionSnapshot(BaseModel):
    """
    Identity, role and status of a registrant as of login.

    Not refreshed on later requests unless session revalidation is enabled,
    so an admin decision taken after login is only seen on the next login.
    """
    model_config = ConfigDict(use_enum_values=True)

    username: str
    role: RegistrantRole
    status: ApprovalStatus
    constituency: Optional[str] = None
    issued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_registrant(cls, registrant: Registrant) -> "SessionSnapshot":
        return cls(
            username=registrant.username,
            role=registrant.role,
            status=registrant.status,
            constituency=registrant.constituency,
        )
