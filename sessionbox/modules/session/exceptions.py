"""Session error taxonomy."""

from typing import Any, Optional


class SessionError(Exception):
    """Base class for all session errors."""


class InvalidArgumentError(SessionError, ValueError):
    """Raised when a required argument is missing or empty."""

    def __init__(self, param_name: str, message: Optional[str] = None):
        self.param_name = param_name
        super().__init__(message or f"Argument '{param_name}' must not be empty")


class PropertyTypeError(SessionError, TypeError):
    """Raised when a stored property cannot be viewed as the requested type."""

    def __init__(self, key: str, expected: type, actual: Any):
        self.key = key
        self.expected = expected
        self.actual = type(actual)
        super().__init__(
            f"Session property '{key}' is {self.actual.__name__}, not {expected.__name__}"
        )


class SessionContextMissingError(SessionError, LookupError):
    """Raised when no session context is registered for the current request."""

    def __init__(self, context_key: str):
        self.context_key = context_key
        super().__init__(
            f"No session context found under '{context_key}'. "
            "Install the session middleware before handlers that use the session."
        )


class SessionStoreError(SessionError):
    """Base class for errors raised by session stores."""

    def __init__(self, session_id: str, message: str):
        self.session_id = session_id
        super().__init__(message)


class SessionNotFoundError(SessionStoreError, LookupError):
    """Raised when updating a session that does not exist."""

    def __init__(self, session_id: str):
        super().__init__(session_id, f"Session {session_id[:8]}... not found")


class DuplicateSessionError(SessionStoreError, ValueError):
    """Raised when adding a session whose id already exists."""

    def __init__(self, session_id: str):
        super().__init__(session_id, f"Session {session_id[:8]}... already exists")


__all__ = [
    "SessionError",
    "InvalidArgumentError",
    "PropertyTypeError",
    "SessionContextMissingError",
    "SessionStoreError",
    "SessionNotFoundError",
    "DuplicateSessionError",
]
