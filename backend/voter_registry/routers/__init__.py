"""
API Routers module.
"""
from voter_registry.routers import admin, auth, health, voters

__all__ = ["admin", "auth", "health", "voters"]
