"""
Cookie based session middleware.

Resolves a SessionContext for every request, exposes it on request.state and
writes the request's changes back to the store once the handler returns.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import quote, unquote

from fastapi import Request, Response

from ..session import SessionContext
from ..session.exceptions import InvalidArgumentError
from .options import CONTEXT_KEY_ATTRIBUTE, SessionMiddlewareOptions

logger = logging.getLogger(__name__)


class SessionMiddleware:
    """
    Session middleware for FastAPI/Starlette applications.

    Per request:
    1. Read the session id from the cookie and load the session from the store
    2. Create a new session (and cookie) when there is no usable session id
    3. Run the downstream handlers
    4. Issue at most one store call: add, update or delete

    Concurrent requests for the same session each get their own context and
    the last one to finish wins; the middleware does not lock sessions.
    """

    def __init__(self, options: SessionMiddlewareOptions):
        """
        Initialize session middleware.

        Args:
            options: Cookie settings, store and id generator
        """
        if options is None:
            raise InvalidArgumentError("options")
        self.options = options

    def read_session_id(self, request: Request) -> Optional[str]:
        """Extract the session id from the request cookie."""
        raw_value = request.cookies.get(self.options.cookie_name)
        if not raw_value:
            return None
        return unquote(raw_value) or None

    async def resolve_context(self, request: Request) -> SessionContext:
        """Load the session named by the cookie or start a new one."""
        session_id = self.read_session_id(request)

        if session_id is not None:
            properties = await self.options.store.find_by_id(session_id)
            if properties is not None:
                logger.debug(f"Loaded session {session_id[:8]}... with {len(properties)} properties")
                return SessionContext.for_existing_session(session_id, properties)

            # Stale or forged id: never adopt it, hand out a fresh one
            logger.debug(f"Session {session_id[:8]}... not found in store, starting new session")

        new_session_id = self.options.unique_session_id_generator()
        logger.debug(f"Starting new session {str(new_session_id)[:8]}...")
        return SessionContext.for_new_session(new_session_id)

    async def reconcile(self, context: SessionContext) -> Optional[str]:
        """
        Persist the changes of a context.

        Returns:
            Name of the store operation that was issued, or None
        """
        store = self.options.store
        session_id = context.session_id

        if context.is_new:
            if context.is_empty:
                return None
            await store.add(session_id, context.properties)
            logger.info(f"Created session {session_id[:8]}...")
            return "add"

        if not context.is_modified:
            return None

        if context.is_empty:
            await store.delete(session_id)
            logger.info(f"Deleted empty session {session_id[:8]}...")
            return "delete"

        await store.update(session_id, context.properties)
        logger.debug(f"Updated session {session_id[:8]}...")
        return "update"

    def set_session_cookie(self, response: Response, session_id: str) -> None:
        """Attach the session cookie to the response."""
        options = self.options
        expires = None
        if options.cookie_lifetime is not None:
            expires = datetime.now(timezone.utc) + options.cookie_lifetime

        response.set_cookie(
            key=options.cookie_name,
            value=quote(session_id, safe=""),
            expires=expires,
            path=options.cookie_path,
            domain=options.cookie_domain,
            secure=options.use_secure_cookie,
            httponly=options.cookie_http_only,
            samesite=options.cookie_same_site.lower(),
        )

    async def __call__(self, request: Request, call_next):
        """Process the request through the session middleware."""
        context = await self.resolve_context(request)
        setattr(request.state, self.options.context_key, context)
        setattr(request.state, CONTEXT_KEY_ATTRIBUTE, self.options.context_key)

        # Exceptions, cancellation included, skip reconciliation
        response = await call_next(request)

        await self.reconcile(context)

        if context.is_new:
            self.set_session_cookie(response, context.session_id)

        return response


def create_session_middleware(
    options: Optional[SessionMiddlewareOptions] = None,
) -> SessionMiddleware:
    """
    Factory function to create session middleware.

    Args:
        options: Middleware options, defaults when omitted

    Returns:
        Configured SessionMiddleware instance
    """
    return SessionMiddleware(options or SessionMiddlewareOptions())


def install_session_middleware(app, options: Optional[SessionMiddlewareOptions] = None) -> SessionMiddleware:
    """
    Register the session middleware on a FastAPI or Starlette app.

    Returns:
        The installed SessionMiddleware, useful to reach its options and store
    """
    session_middleware = create_session_middleware(options)

    @app.middleware("http")
    async def session(request: Request, call_next):
        return await session_middleware(request, call_next)

    return session_middleware
