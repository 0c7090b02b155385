"""
Voter service: CRUD and pagination over a registrant's own partition.
"""
import logging

from bson import ObjectId
from pydantic import ValidationError
from pymongo import ReturnDocument

from voter_registry.core.exceptions import InvalidKey, NotFound
from voter_registry.models.voter import VoterRecord
from voter_registry.schemas.voter import VoterCreate, VoterPage, VoterUpdate
from voter_registry.services.partition_service import PartitionService

logger = logging.getLogger(__name__)


def parse_voter_key(voter_id: str) -> ObjectId:
    """
    Validate a voter key without touching the database.

    Raises:
        InvalidKey: If voter_id is not a well-formed ObjectId
    """
    if not ObjectId.is_valid(voter_id):
        raise InvalidKey("Invalid voter ID format")
    return ObjectId(voter_id)


def _to_record(doc: dict) -> VoterRecord:
    """
    Build a VoterRecord from a stored document.

    Older partitions were written without type checks, so a field whose
    stored value does not fit the record (e.g. ``Ward_No: "12A"``) is left
    out of the response rather than failing the whole read.
    """
    doc["_id"] = str(doc["_id"])
    try:
        return VoterRecord.model_validate(doc)
    except ValidationError as e:
        bad_keys = {err["loc"][0] for err in e.errors() if err["loc"]}
        if "_id" in bad_keys:
            raise
        logger.warning("Voter %s has unreadable fields: %s", doc["_id"], sorted(map(str, bad_keys)))
        return VoterRecord.model_validate(
            {k: v for k, v in doc.items() if k not in bad_keys}
        )


class VoterService:
    """
    Voter record operations.

    Every method takes the caller's username and works on that username's
    partition only; an authority or user never sees the partition of the
    admin who accepted them.
    """

    def __init__(self, partitions: PartitionService):
        self.partitions = partitions

    async def create(self, username: str, request: VoterCreate) -> VoterRecord:
        """
        Insert a voter into the caller's partition.

        Raises:
            NotFound: If the caller's partition was never provisioned
        """
        if not await self.partitions.exists(username):
            raise NotFound("Voter collection not found")

        voter_doc = request.model_dump(by_alias=True, exclude_none=True)
        result = await self.partitions.collection_for(username).insert_one(voter_doc)
        voter_doc["_id"] = result.inserted_id
        logger.debug("Added voter %s for %s", result.inserted_id, username)
        return _to_record(voter_doc)

    async def list_all(self, username: str) -> list[VoterRecord]:
        """All voters in the caller's partition, in no particular order."""
        cursor = self.partitions.collection_for(username).find()
        docs = await cursor.to_list(length=None)
        return [_to_record(d) for d in docs]

    async def list_paged(self, username: str, page: int = 1, limit: int = 10) -> VoterPage:
        """Get one page of voters, ordered by key so pages do not overlap."""
        collection = self.partitions.collection_for(username)

        total = await collection.count_documents({})
        total_pages = -(-total // limit)

        # skip and limit must fit in a BSON int64; past the end nothing is sent
        skip = (page - 1) * limit
        if skip >= total:
            return VoterPage(voters=[], totalPages=total_pages)

        batch = min(limit, total - skip)
        cursor = collection.find().sort("_id", 1).skip(skip).limit(batch)
        docs = await cursor.to_list(length=batch)

        return VoterPage(
            voters=[_to_record(d) for d in docs],
            totalPages=total_pages,
        )

    async def get_by_id(self, username: str, voter_id: str) -> VoterRecord:
        """
        Raises:
            InvalidKey: Malformed voter_id
            NotFound: No such voter in the caller's partition
        """
        key = parse_voter_key(voter_id)
        doc = await self.partitions.collection_for(username).find_one({"_id": key})
        if not doc:
            raise NotFound("Voter not found")
        return _to_record(doc)

    async def update_by_id(
        self, username: str, voter_id: str, request: VoterUpdate
    ) -> VoterRecord:
        """
        Overwrite the fields present in ``request``; others are untouched.

        Raises:
            InvalidKey: Malformed voter_id
            NotFound: No such voter in the caller's partition
        """
        key = parse_voter_key(voter_id)
        update_data = request.to_update_doc()

        if not update_data:
            return await self.get_by_id(username, voter_id)

        doc = await self.partitions.collection_for(username).find_one_and_update(
            {"_id": key},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            raise NotFound("Voter not found")
        return _to_record(doc)

    async def delete_by_id(self, username: str, voter_id: str) -> None:
        """
        Raises:
            InvalidKey: Malformed voter_id
            NotFound: No such voter in the caller's partition
        """
        key = parse_voter_key(voter_id)
        result = await self.partitions.collection_for(username).delete_one({"_id": key})
        if result.deleted_count == 0:
            raise NotFound("Voter not found")
        logger.debug("Deleted voter %s for %s", voter_id, username)
