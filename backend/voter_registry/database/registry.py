"""
Database registry management.
Ensures all databases are registered and indexed on startup.
"""
import logging
from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorClient

from voter_registry.database.databases import auth_db, voters_db, system_db

logger = logging.getLogger(__name__)

ALL_DB_MANIFESTS = [
    auth_db.DB_MANIFEST,
    voters_db.DB_MANIFEST,
    system_db.DB_MANIFEST,
]


async def sync_registry(client: AsyncIOMotorClient) -> None:
    """
    Synchronize the database registry on application startup.
    Ensures all databases are registered in system_db.db_registry.
    """
    sys_db = client[system_db.DB_NAME]
    registry_collection = sys_db[system_db.Collections.DB_REGISTRY]

    for manifest in ALL_DB_MANIFESTS:
        db_name = manifest["db_name"]
        now = datetime.now(timezone.utc)

        await registry_collection.update_one(
            {"_id": db_name},
            {
                "$set": {
                    "purpose": manifest["purpose"],
                    "collections": manifest["collections"],
                    "access_level": manifest["access_level"],
                    "schema_version": "1.0",
                    "updated_at": now,
                },
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )

        metadata_collection = client[db_name]["_metadata"]
        await metadata_collection.update_one(
            {"_id": "db_metadata"},
            {
                "$set": {"db_name": db_name, "last_updated_at": now},
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )

    logger.info("Database registry synced for %d databases", len(ALL_DB_MANIFESTS))


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""
    users = client[auth_db.DB_NAME][auth_db.Collections.USERS]
    await users.create_index("username", unique=True)
    # Admin dashboard lookups
    await users.create_index([("constituency", 1), ("status", 1)])
