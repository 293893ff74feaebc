"""Request helpers for reading and changing the current session."""

from typing import Any, Optional, Type, TypeVar

from fastapi import Request

from ..session import SessionContext
from ..session.exceptions import SessionContextMissingError
from .options import CONTEXT_KEY_ATTRIBUTE, DEFAULT_CONTEXT_KEY

T = TypeVar("T")


def get_session_context(request: Request, context_key: Optional[str] = None) -> SessionContext:
    """
    Get the session context of the current request.

    Args:
        request: Current request
        context_key: Key the context is stored under, defaults to the key
            the session middleware recorded for this request

    Raises:
        SessionContextMissingError: If the session middleware did not run
            for this request
    """
    if context_key is None:
        context_key = getattr(request.state, CONTEXT_KEY_ATTRIBUTE, DEFAULT_CONTEXT_KEY)
    context = getattr(request.state, context_key, None)
    if context is None:
        raise SessionContextMissingError(context_key)
    return context


async def session_context(request: Request) -> SessionContext:
    """FastAPI dependency returning the session context."""
    return get_session_context(request)


def get_session_property(request: Request, key: str) -> Any:
    """Get a property of the current session, None if absent."""
    return get_session_context(request).find(key)


def get_session_property_as(request: Request, key: str, type_: Type[T]) -> Optional[T]:
    """Get a property of the current session viewed as ``type_``."""
    return get_session_context(request).find_as(key, type_)


def set_session_property(request: Request, key: str, value: Any) -> None:
    get_session_context(request).add_or_update(key, value)


def delete_session_property(request: Request, key: str) -> None:
    get_session_context(request).delete(key)


def clear_session(request: Request) -> None:
    get_session_context(request).clear()
