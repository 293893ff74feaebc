"""Session store interface following Black Box Design principles."""
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class SessionStore(Protocol):
    """Protocol for session stores - allows swappable persistence backends."""

    async def find_by_id(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Find a session by its id.

        Args:
            session_id: Session identifier

        Returns:
            Session properties (possibly empty) or None if not found
        """
        ...

    async def add(self, session_id: str, properties: Mapping[str, Any]) -> None:
        """
        Add a new session.

        Raises:
            DuplicateSessionError: If the session id already exists
        """
        ...

    async def update(self, session_id: str, properties: Mapping[str, Any]) -> None:
        """
        Replace the properties of an existing session.

        Raises:
            SessionNotFoundError: If the session id does not exist
        """
        ...

    async def delete(self, session_id: str) -> None:
        """Delete a session. Deleting an unknown session is not an error."""
        ...
