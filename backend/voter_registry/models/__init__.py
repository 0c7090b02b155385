"""
Pydantic models for database documents and data structures.
"""
from voter_registry.models.registrant import Registrant, RegistrantRole, ApprovalStatus
from voter_registry.models.session import SessionSnapshot
from voter_registry.models.voter import VoterFields, VoterRecord

__all__ = [
    "Registrant",
    "RegistrantRole",
    "ApprovalStatus",
    "SessionSnapshot",
    "VoterFields",
    "VoterRecord",
]
