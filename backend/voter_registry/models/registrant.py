"""
Registrant model for the auth database.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegistrantRole(str, Enum):
    """Registrant roles."""
    USER = "user"
    AUTHORITY = "authority"
    ADMIN = "admin"


class ApprovalStatus(str, Enum):
    """Signup approval state. accepted and refused are terminal."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"


class Registrant(BaseModel):
    """
    Registrant document model for MongoDB auth_db.users collection.
    """
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., description="Unique login name")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    role: RegistrantRole = Field(default=RegistrantRole.USER)
    constituency: Optional[str] = Field(None, description="Electoral constituency")
    status: ApprovalStatus = Field(default=ApprovalStatus.PENDING)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        return self.role == RegistrantRole.ADMIN.value

    @property
    def is_accepted(self) -> bool:
        return self.status == ApprovalStatus.ACCEPTED.value
