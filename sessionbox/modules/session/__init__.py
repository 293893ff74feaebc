"""
Session Module - Black Box Interface

Purpose: Hold one session's properties for the duration of a request
Interface: SessionContext.for_new_session(), SessionContext.for_existing_session(),
           find(), find_as(), add_or_update(), delete(), clear()
Hidden: Dirty tracking, typed property views, id format

Knows nothing about HTTP or storage; the middleware decides what to persist
from the flags this module exposes.
"""

from .context import SessionContext
from .exceptions import (
    DuplicateSessionError,
    InvalidArgumentError,
    PropertyTypeError,
    SessionContextMissingError,
    SessionError,
    SessionNotFoundError,
    SessionStoreError,
)
from .identifiers import MAX_SESSION_ID_LENGTH, unique_session_id_generator

__all__ = [
    "SessionContext",
    "SessionError",
    "InvalidArgumentError",
    "PropertyTypeError",
    "SessionContextMissingError",
    "SessionStoreError",
    "SessionNotFoundError",
    "DuplicateSessionError",
    "MAX_SESSION_ID_LENGTH",
    "unique_session_id_generator",
]
