import asyncio
import copy
import logging
from typing import Any, Dict, Mapping, Optional

from ..session.exceptions import DuplicateSessionError, SessionNotFoundError

logger = logging.getLogger(__name__)


class InMemorySessionStore:
    """
    Dict-backed session store.

    All data is lost when the process exits. Suitable for tests and
    single-process deployments.
    """

    def __init__(self):
        self._sessions: Dict[str, Dict[str, Any]] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Find a session by its id.

        Returns:
            Copy of the stored properties or None if not found
        """
        async with self._lock:
            properties = self._sessions.get(session_id)
            return copy.deepcopy(properties) if properties is not None else None

    async def add(self, session_id: str, properties: Mapping[str, Any]) -> None:
        """Add a session, failing if the id is already taken."""
        async with self._lock:
            if session_id in self._sessions:
                raise DuplicateSessionError(session_id)
            self._sessions[session_id] = copy.deepcopy(dict(properties))
        logger.debug(f"Added session {session_id[:8]}... with {len(properties)} properties")

    async def update(self, session_id: str, properties: Mapping[str, Any]) -> None:
        """Replace the properties of an existing session."""
        async with self._lock:
            if session_id not in self._sessions:
                raise SessionNotFoundError(session_id)
            self._sessions[session_id] = copy.deepcopy(dict(properties))
        logger.debug(f"Updated session {session_id[:8]}... with {len(properties)} properties")

    async def delete(self, session_id: str) -> None:
        """Delete a session if present."""
        async with self._lock:
            self._sessions.pop(session_id, None)
        logger.debug(f"Deleted session {session_id[:8]}...")

    def __len__(self) -> int:
        return len(self._sessions)

    def __repr__(self) -> str:
        return f"InMemorySessionStore(sessions={len(self._sessions)})"
