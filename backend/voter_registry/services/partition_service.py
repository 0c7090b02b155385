"""
Partition provisioning: one voters_db collection per accepted registrant.

Partition names are derived from the username by ``partition_of``. The
encoding is injective: ASCII letters, digits and ``-`` are kept, and every
other UTF-8 byte (``_`` included) becomes ``_xx`` in lowercase hex, so two
different usernames can never share a collection and no username can smuggle
``$``, ``.`` or NUL into a collection name. Plain usernames keep the familiar
``user_<username>_collection`` form.
"""
import hashlib
import logging
import string
from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import CollectionInvalid

from voter_registry.database.databases import voters_db

logger = logging.getLogger(__name__)

_SAFE_CHARS = frozenset(string.ascii_letters + string.digits + "-")

# Longer encodings are replaced by a digest. The digest form ("h" + 64 hex
# chars) contains no "_" and is 65 chars, so it cannot equal a short encoding.
MAX_ENCODED_LENGTH = 64


def encode_username(username: str) -> str:
    parts = []
    for ch in username:
        if ch in _SAFE_CHARS:
            parts.append(ch)
        else:
            parts.extend(f"_{byte:02x}" for byte in ch.encode("utf-8"))
    encoded = "".join(parts)
    if len(encoded) > MAX_ENCODED_LENGTH:
        encoded = "h" + hashlib.sha256(username.encode("utf-8")).hexdigest()
    return encoded


def partition_of(username: str) -> str:
    """Collection name of the partition owned by ``username``."""
    return f"{voters_db.PARTITION_PREFIX}{encode_username(username)}{voters_db.PARTITION_SUFFIX}"


class PartitionService:
    """Creates and resolves per-registrant voter partitions."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with voters database."""
        self.db = db
        self.registry = db[voters_db.Collections.PARTITIONS]

    def collection_for(self, username: str) -> AsyncIOMotorCollection:
        return self.db[partition_of(username)]

    async def exists(self, username: str) -> bool:
        """Whether the partition collection for ``username`` exists."""
        name = partition_of(username)
        return name in await self.db.list_collection_names()

    async def ensure_partition(self, username: str) -> str:
        """
        Make sure the partition for ``username`` exists.

        Idempotent: an existing partition is left untouched, and losing a
        creation race to a concurrent caller is not an error.

        Returns:
            The partition's collection name
        """
        name = partition_of(username)
        now = datetime.now(timezone.utc)

        await self.registry.update_one(
            {"_id": username},
            {
                "$set": {"collection": name, "last_ensured_at": now},
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )

        if name in await self.db.list_collection_names():
            return name

        try:
            await self.db.create_collection(name)
            logger.info("Created partition %s for %s", name, username)
        except CollectionInvalid:
            logger.debug("Partition %s was created concurrently", name)

        return name
