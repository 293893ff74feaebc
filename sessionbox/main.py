#!/usr/bin/env python3
"""
SessionBox - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Builds the session store and middleware
3. Runs a small API that reads and writes the caller's session

All session logic is in the modules, following black box principles.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException

from sessionbox.config.provider import ConfigProvider, EnvConfigProvider
from sessionbox.logging_config import configure_logging
from sessionbox.modules.api import (
    HealthResponse,
    PropertyResponse,
    SessionSnapshot,
    SetPropertyRequest,
)
from sessionbox.modules.config import get_config
from sessionbox.modules.middleware import SessionFactory, install_session_middleware, session_context
from sessionbox.modules.session import SessionContext
from sessionbox.modules.storage import RedisConnection, SessionStore

logger = logging.getLogger(__name__)


def create_app(
    config_provider: Optional[ConfigProvider] = None,
    store: Optional[SessionStore] = None,
    redis_connection: Optional[RedisConnection] = None,
) -> FastAPI:
    """
    Create the SessionBox API application.

    Args:
        config_provider: Configuration provider (environment by default)
        store: Explicit session store, overrides SESSION_STORE
        redis_connection: Redis connection used when SESSION_STORE=redis

    Returns:
        FastAPI app with the session middleware installed
    """
    config_provider = config_provider or EnvConfigProvider()
    store_config = config_provider.get_store_config()

    redis_client = None
    if store is None and store_config.uses_redis:
        redis_connection = redis_connection or RedisConnection(get_config().get("redis_url"))
        redis_client = redis_connection.connect()

    options = SessionFactory.build_options(config_provider, redis_client=redis_client, store=store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifecycle - cleanup resources.
        """
        logger.info(f"SessionBox API started with {type(options.store).__name__}")

        yield

        logger.info("Shutting down SessionBox API...")
        if redis_connection:
            await redis_connection.disconnect()

    app = FastAPI(
        title="SessionBox API",
        description="SessionBox - cookie based server-side sessions",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.session_middleware = install_session_middleware(app, options)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint."""
        return HealthResponse(store=store_config.backend if store is None else type(store).__name__)

    @app.get("/session", response_model=SessionSnapshot)
    async def get_session(context: SessionContext = Depends(session_context)):
        """Return all properties of the caller's session."""
        return SessionSnapshot(is_new=context.is_new, properties=context.properties)

    @app.delete("/session", status_code=204)
    async def clear_session(context: SessionContext = Depends(session_context)):
        """Remove all properties, which deletes the stored session."""
        context.clear()

    @app.get("/session/{key}", response_model=PropertyResponse)
    async def get_property(key: str, context: SessionContext = Depends(session_context)):
        """
        Return one session property.

        Returns:
            200: Property found
            404: Property not set
        """
        if key not in context:
            raise HTTPException(404, f"Session property '{key}' not found")
        return PropertyResponse(key=key, value=context.find(key))

    @app.put("/session/{key}", response_model=PropertyResponse)
    async def set_property(
        key: str,
        request: SetPropertyRequest,
        context: SessionContext = Depends(session_context),
    ):
        """Add or update one session property."""
        context.add_or_update(key, request.value)
        return PropertyResponse(key=key, value=request.value)

    @app.delete("/session/{key}", status_code=204)
    async def delete_property(key: str, context: SessionContext = Depends(session_context)):
        """Delete one session property."""
        context.delete(key)

    return app


def main():
    """Run the API server."""
    config = get_config()
    configure_logging(config.get("log_level"))

    uvicorn.run(
        create_app(),
        host=config.get("host"),
        port=config.get("port"),
        log_config=None,
    )


if __name__ == "__main__":
    main()
