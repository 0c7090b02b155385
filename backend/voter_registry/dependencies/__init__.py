"""
Dependencies for dependency injection in routes.
"""
from voter_registry.dependencies.auth import CurrentSession, get_current_session
from voter_registry.dependencies.roles import (
    require_roles,
    require_admin,
    require_admin_or_authority,
)
from voter_registry.dependencies.services import (
    get_mongo,
    get_redis,
    get_partition_service,
    get_registrant_service,
    get_session_service,
    get_voter_service,
)

__all__ = [
    "CurrentSession",
    "get_current_session",
    "require_roles",
    "require_admin",
    "require_admin_or_authority",
    "get_mongo",
    "get_redis",
    "get_partition_service",
    "get_registrant_service",
    "get_session_service",
    "get_voter_service",
]
