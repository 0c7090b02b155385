"""
Store clients shared by the whole process.

auth_db and voters_db live on one MongoDB deployment; sessions live in
Redis. Both clients are created on first use so importing the app never
opens a socket, and closed together on shutdown.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from redis.asyncio import Redis

from voter_registry.config import Settings, get_settings

logger = logging.getLogger(__name__)

APP_NAME = "voter-registry"

_mongo_client: Optional[AsyncIOMotorClient] = None
_redis_client: Optional[Redis] = None


def build_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.mongo_uri,
        appname=APP_NAME,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )


def build_redis_client(settings: Settings) -> Redis:
    # Session payloads are JSON text, so replies are decoded to str
    return Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        decode_responses=True,
    )


async def get_mongo_client() -> AsyncIOMotorClient:
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = build_mongo_client(get_settings())
        logger.info("MongoDB client created")
    return _mongo_client


async def get_redis_client() -> Redis:
    global _redis_client
    if _redis_client is None:
        settings = get_settings()
        _redis_client = build_redis_client(settings)
        logger.info("Redis client created for %s:%s/%s", settings.redis_host, settings.redis_port, settings.redis_db)
    return _redis_client


async def close_connections() -> None:
    """Close whichever clients were opened; safe to call more than once."""
    global _mongo_client, _redis_client

    mongo, _mongo_client = _mongo_client, None
    redis, _redis_client = _redis_client, None

    if mongo is not None:
        mongo.close()
    if redis is not None:
        await redis.aclose()
