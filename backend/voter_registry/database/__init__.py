"""
Database module - MongoDB and Redis connections and database definitions.
"""
from voter_registry.database.connections import (
    get_mongo_client,
    get_redis_client,
    close_connections,
)
from voter_registry.database.databases import auth_db, voters_db, system_db

__all__ = [
    "get_mongo_client",
    "get_redis_client",
    "close_connections",
    "auth_db",
    "voters_db",
    "system_db",
]
