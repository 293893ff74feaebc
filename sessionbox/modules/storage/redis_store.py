import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

import redis.asyncio as redis

from ..session.exceptions import DuplicateSessionError, SessionNotFoundError

logger = logging.getLogger(__name__)


class RedisSessionStore:
    def __init__(self, redis_client, key_prefix: str = "session:"):
        """
        Initialize Redis session store.

        Args:
            redis_client: Async Redis client (decode_responses=True)
            key_prefix: Prefix for session keys

        Properties are stored as one JSON document per session, so values
        must be JSON serializable.
        """
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _key(self, session_id: str) -> str:
        return f"{self.key_prefix}{session_id}"

    async def find_by_id(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Find a session by its id.

        Args:
            session_id: Session identifier

        Returns:
            Session properties or None if not found
        """
        data = await self.redis.get(self._key(session_id))

        if data is None:
            return None
        return json.loads(data)

    async def add(self, session_id: str, properties: Mapping[str, Any]) -> None:
        """
        Add a new session.

        Uses SET NX so two requests racing to create the same id cannot
        both succeed.
        """
        created = await self.redis.set(self._key(session_id), json.dumps(dict(properties)), nx=True)
        if not created:
            raise DuplicateSessionError(session_id)

        logger.debug(f"Added session {session_id[:8]}... to Redis")

    async def update(self, session_id: str, properties: Mapping[str, Any]) -> None:
        """
        Replace the properties of an existing session.

        Uses SET XX so a session deleted in the meantime is not resurrected.
        """
        updated = await self.redis.set(self._key(session_id), json.dumps(dict(properties)), xx=True)
        if not updated:
            raise SessionNotFoundError(session_id)

        logger.debug(f"Updated session {session_id[:8]}... in Redis")

    async def delete(self, session_id: str) -> None:
        """Delete a session. Unknown ids are ignored."""
        await self.redis.delete(self._key(session_id))
        logger.debug(f"Deleted session {session_id[:8]}... from Redis")


class RedisConnection:
    """Lazily created Redis client for the session store."""

    def __init__(self, connection_url: Optional[str] = None):
        """Initialize with connection URL."""
        self.url = connection_url or os.getenv("REDIS_URL", "redis://localhost:6379/0")
        self._client = None

    def connect(self) -> redis.Redis:
        """Get Redis client. The socket is opened on first command."""
        if not self._client:
            self._client = redis.from_url(self.url, encoding="utf-8", decode_responses=True)
        return self._client

    async def disconnect(self):
        """Close Redis connection."""
        if self._client:
            await self._client.aclose()
            self._client = None
