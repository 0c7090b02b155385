"""
Server-side session store backed by Redis.

The session cookie only carries an opaque token; the registrant snapshot
lives under ``session:<token>`` with a TTL.
"""
import logging
from typing import Optional

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from voter_registry.config import Settings, get_settings
from voter_registry.core.exceptions import InternalError
from voter_registry.core.security import generate_session_token
from voter_registry.models.session import SessionSnapshot

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session:"


class SessionService:
    """Create, resolve and destroy login sessions."""

    def __init__(self, redis: Redis, settings: Optional[Settings] = None):
        self.redis = redis
        self.settings = settings or get_settings()

    @staticmethod
    def _key(token: str) -> str:
        return f"{SESSION_KEY_PREFIX}{token}"

    @property
    def ttl_seconds(self) -> int:
        return self.settings.session_ttl_minutes * 60

    async def create(self, snapshot: SessionSnapshot) -> str:
        """
        Store a snapshot and return the token for the session cookie.

        Raises:
            InternalError: If Redis is unavailable
        """
        token = generate_session_token()
        try:
            await self.redis.set(
                self._key(token), snapshot.model_dump_json(), ex=self.ttl_seconds
            )
        except RedisError as e:
            raise InternalError("Failed to establish session", cause=e)
        logger.info("Session started for %s", snapshot.username)
        return token

    async def get(self, token: str) -> Optional[SessionSnapshot]:
        """Snapshot for ``token``, or None if unknown or expired."""
        try:
            data = await self.redis.get(self._key(token))
        except RedisError as e:
            raise InternalError("Failed to read session", cause=e)

        if data is None:
            return None

        try:
            return SessionSnapshot.model_validate_json(data)
        except ValidationError:
            logger.warning("Discarding unreadable session payload")
            return None

    async def replace(self, token: str, snapshot: SessionSnapshot) -> None:
        """Overwrite the snapshot of an existing session, keeping its TTL."""
        try:
            await self.redis.set(self._key(token), snapshot.model_dump_json(), keepttl=True)
        except RedisError as e:
            raise InternalError("Failed to refresh session", cause=e)

    async def destroy(self, token: str) -> None:
        """
        Delete a session. Unknown tokens are ignored.

        Raises:
            InternalError: If Redis is unavailable
        """
        try:
            await self.redis.delete(self._key(token))
        except RedisError as e:
            raise InternalError("Failed to logout", cause=e)
