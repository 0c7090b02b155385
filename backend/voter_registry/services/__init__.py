"""
Service layer for business logic.
"""
from voter_registry.services.partition_service import PartitionService, partition_of
from voter_registry.services.registrant_service import RegistrantService
from voter_registry.services.session_service import SessionService
from voter_registry.services.voter_service import VoterService

__all__ = [
    "PartitionService",
    "partition_of",
    "RegistrantService",
    "SessionService",
    "VoterService",
]
