"""
Voter request/response schemas.
"""
from pydantic import BaseModel, Field

from voter_registry.models.voter import VoterFields, VoterRecord


class VoterCreate(VoterFields):
    """Voter creation request; all fields optional."""
    pass


class VoterUpdate(VoterFields):
    """
    Partial voter update. Only fields present in the request body are
    written; omitted fields keep their stored values.
    """

    def to_update_doc(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class VoterCreatedResponse(BaseModel):
    message: str = "Voter added successfully"
    voter: VoterRecord


class VoterUpdatedResponse(BaseModel):
    voter: VoterRecord


class VoterPage(BaseModel):
    """One page of a partition's voters."""
    voters: list[VoterRecord]
    totalPages: int = Field(..., description="ceil(total voters / limit)")


class UserDataResponse(BaseModel):
    """Full contents of the caller's partition."""
    userData: list[VoterRecord]
