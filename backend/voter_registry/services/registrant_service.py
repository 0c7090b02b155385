"""
Registrant service: signup, admin decisions and credential checks.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from voter_registry.core.exceptions import (
    Conflict,
    InvalidCredentials,
    NotApproved,
    NotFound,
)
from voter_registry.core.security import hash_password, verify_password
from voter_registry.database.databases import auth_db
from voter_registry.models.registrant import ApprovalStatus, Registrant, RegistrantRole
from voter_registry.schemas.auth import SignupRequest
from voter_registry.services.partition_service import PartitionService

logger = logging.getLogger(__name__)


def _to_registrant(doc: dict) -> Registrant:
    doc["_id"] = str(doc["_id"])
    return Registrant(**doc)


class RegistrantService:
    """Service for registrant operations."""

    def __init__(self, db: AsyncIOMotorDatabase, partitions: PartitionService):
        """Initialize with auth database and the partition provisioner."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]
        self.partitions = partitions

    async def register(self, request: SignupRequest) -> Registrant:
        """
        Register a new registrant.

        Admins are accepted immediately and get their partition provisioned;
        everyone else starts out pending.

        Raises:
            Conflict: If the username is already taken
        """
        existing = await self.users_collection.find_one({"username": request.username})
        if existing:
            raise Conflict("User already exists")

        role = RegistrantRole(request.role)
        status = (
            ApprovalStatus.ACCEPTED if role == RegistrantRole.ADMIN else ApprovalStatus.PENDING
        )

        user_doc = {
            "username": request.username,
            "hashed_password": hash_password(request.password),
            "role": role.value,
            "constituency": request.constituency,
            "status": status.value,
            "created_at": datetime.now(timezone.utc),
        }

        try:
            result = await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            raise Conflict("User already exists")
        user_doc["_id"] = result.inserted_id

        if role == RegistrantRole.ADMIN:
            await self.partitions.ensure_partition(request.username)

        logger.info("Registered %s as %s (%s)", request.username, role.value, status.value)
        return _to_registrant(user_doc)

    async def _decide(self, username: str, status: ApprovalStatus) -> Optional[Registrant]:
        # Repeating the same decision is idempotent; reversing one matches nothing.
        doc = await self.users_collection.find_one_and_update(
            {
                "username": username,
                "role": {"$ne": RegistrantRole.ADMIN.value},
                "status": {"$in": [ApprovalStatus.PENDING.value, status.value]},
            },
            {"$set": {"status": status.value}},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None
        return _to_registrant(doc)

    async def approve(self, username: str) -> Registrant:
        """
        Accept a pending registrant and provision their partition.

        Raises:
            NotFound: If no matching non-admin registrant exists
        """
        registrant = await self._decide(username, ApprovalStatus.ACCEPTED)
        if registrant is None:
            raise NotFound("User not found or cannot accept admin users")

        await self.partitions.ensure_partition(username)
        logger.info("Accepted registrant %s", username)
        return registrant

    async def reject(self, username: str) -> Registrant:
        """
        Refuse a pending registrant.

        Raises:
            NotFound: If no matching non-admin registrant exists
        """
        registrant = await self._decide(username, ApprovalStatus.REFUSED)
        if registrant is None:
            raise NotFound("User not found or cannot refuse admin users")

        logger.info("Refused registrant %s", username)
        return registrant

    async def authenticate(self, username: str, password: str) -> Registrant:
        """
        Check credentials and approval status.

        Raises:
            InvalidCredentials: Unknown username or wrong password
            NotApproved: Credentials are valid but the signup is not accepted
        """
        registrant = await self.get_by_username(username)
        if registrant is None or not verify_password(password, registrant.hashed_password):
            raise InvalidCredentials("Invalid credentials")

        if not registrant.is_accepted:
            raise NotApproved("Your signup request is not yet accepted")

        return registrant

    async def get_by_username(self, username: str) -> Optional[Registrant]:
        """
        Get registrant by username.

        Returns:
            Registrant or None if not found
        """
        doc = await self.users_collection.find_one({"username": username})
        if not doc:
            return None
        return _to_registrant(doc)

    async def list_by_constituency_and_status(
        self, constituency: Optional[str], status: ApprovalStatus
    ) -> list[Registrant]:
        """Non-admin registrants of a constituency in the given status."""
        cursor = self.users_collection.find({
            "constituency": constituency,
            "status": ApprovalStatus(status).value,
            "role": {"$ne": RegistrantRole.ADMIN.value},
        })
        docs = await cursor.to_list(length=None)
        return [_to_registrant(doc) for doc in docs]
