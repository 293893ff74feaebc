"""
Session middleware factory following Black Box Design principles.

This factory:
- Chooses the session store based on configuration
- Maps cookie configuration onto middleware options
- Returns only the middleware (hiding the wiring)
"""

import logging
from typing import Any, Optional

from ...config.provider import ConfigProvider
from ..storage import InMemorySessionStore, RedisSessionStore, SessionStore
from .options import SessionMiddlewareOptions
from .session_middleware import SessionMiddleware

logger = logging.getLogger(__name__)


class SessionFactory:
    """Composition root for the session middleware."""

    @staticmethod
    def build_store(config_provider: ConfigProvider, redis_client: Optional[Any] = None) -> SessionStore:
        """
        Build the configured session store.

        Raises:
            ValueError: If the Redis store is configured without a client
        """
        store_config = config_provider.get_store_config()

        if store_config.uses_redis:
            if redis_client is None:
                raise ValueError("SESSION_STORE=redis requires a Redis client")
            logger.info(f"Using Redis session store (prefix '{store_config.key_prefix}')")
            return RedisSessionStore(redis_client, key_prefix=store_config.key_prefix)

        logger.info("Using in-memory session store")
        return InMemorySessionStore()

    @staticmethod
    def build_options(
        config_provider: ConfigProvider,
        redis_client: Optional[Any] = None,
        store: Optional[SessionStore] = None,
    ) -> SessionMiddlewareOptions:
        """
        Build middleware options.

        Args:
            config_provider: Configuration provider
            redis_client: Optional Redis client for the Redis store
            store: Explicit store, overrides the configured backend
        """
        cookie_config = config_provider.get_cookie_config()

        return SessionMiddlewareOptions(
            cookie_name=cookie_config.name,
            cookie_domain=cookie_config.domain,
            cookie_path=cookie_config.path,
            cookie_lifetime=cookie_config.lifetime,
            use_secure_cookie=cookie_config.secure,
            cookie_http_only=cookie_config.http_only,
            cookie_same_site=cookie_config.same_site,
            store=store if store is not None else SessionFactory.build_store(config_provider, redis_client),
        )

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        redis_client: Optional[Any] = None,
        store: Optional[SessionStore] = None,
    ) -> SessionMiddleware:
        """Build the session middleware."""
        return SessionMiddleware(SessionFactory.build_options(config_provider, redis_client, store))
