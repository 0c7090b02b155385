"""
Database definitions and collection constants.
"""
from voter_registry.database.databases import auth_db, voters_db, system_db

__all__ = ["auth_db", "voters_db", "system_db"]
