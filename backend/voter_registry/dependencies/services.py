"""
Store connections and service instances for dependency injection.

Routes never reach for the global clients directly; tests replace
``get_mongo`` and ``get_redis`` through ``app.dependency_overrides``.
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorClient
from redis.asyncio import Redis

from voter_registry.config import Settings, get_settings
from voter_registry.database.connections import get_mongo_client, get_redis_client
from voter_registry.database.databases import auth_db, voters_db
from voter_registry.services.partition_service import PartitionService
from voter_registry.services.registrant_service import RegistrantService
from voter_registry.services.session_service import SessionService
from voter_registry.services.voter_service import VoterService


async def get_mongo() -> AsyncIOMotorClient:
    """MongoDB client dependency."""
    return await get_mongo_client()


async def get_redis() -> Redis:
    """Redis client dependency (session store)."""
    return await get_redis_client()


async def get_partition_service(
    client: AsyncIOMotorClient = Depends(get_mongo),
) -> PartitionService:
    return PartitionService(client[voters_db.DB_NAME])


async def get_registrant_service(
    client: AsyncIOMotorClient = Depends(get_mongo),
    partitions: PartitionService = Depends(get_partition_service),
) -> RegistrantService:
    return RegistrantService(client[auth_db.DB_NAME], partitions)


async def get_voter_service(
    partitions: PartitionService = Depends(get_partition_service),
) -> VoterService:
    return VoterService(partitions)


async def get_session_service(
    redis: Redis = Depends(get_redis),
    settings: Settings = Depends(get_settings),
) -> SessionService:
    return SessionService(redis, settings)
