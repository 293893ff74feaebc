"""
Session Middleware Module - Black Box Interface

Purpose: Attach a session to every request of a FastAPI application
Interface: SessionMiddleware, install_session_middleware(), get_session_context()
Hidden: Cookie handling, store lookups, end-of-request reconciliation

Usable by any FastAPI or Starlette app; the store and id generator are
injected through SessionMiddlewareOptions.
"""

from .accessors import (
    clear_session,
    delete_session_property,
    get_session_context,
    get_session_property,
    get_session_property_as,
    session_context,
    set_session_property,
)
from .factory import SessionFactory
from .options import DEFAULT_CONTEXT_KEY, DEFAULT_COOKIE_NAME, SessionMiddlewareOptions
from .session_middleware import (
    SessionMiddleware,
    create_session_middleware,
    install_session_middleware,
)

# Module interface - what this module provides
__all__ = [
    "SessionMiddleware",
    "SessionMiddlewareOptions",
    "SessionFactory",
    "DEFAULT_COOKIE_NAME",
    "DEFAULT_CONTEXT_KEY",
    "create_session_middleware",
    "install_session_middleware",
    "get_session_context",
    "session_context",
    "get_session_property",
    "get_session_property_as",
    "set_session_property",
    "delete_session_property",
    "clear_session",
]
