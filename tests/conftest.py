"""
Shared pytest fixtures for SessionBox tests.

This module provides common fixtures including:
- Redis mocks for the Redis session store
- A mocked session store for verifying store calls
- FastAPI test app utilities for driving the session middleware
"""

import os
import sys
from typing import Callable, Dict, Optional, Tuple
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sessionbox.modules.middleware import (
    SessionMiddlewareOptions,
    get_session_context,
    install_session_middleware,
)

EXISTING_SESSION_ID = "09e160b22b2d4ab5b2d09d43ddf5e39d.y62hp8MafL0="
EXISTING_SESSION_COOKIE = "09e160b22b2d4ab5b2d09d43ddf5e39d.y62hp8MafL0%3D"


# =============================================================================
# Session Store Mocking Infrastructure
# =============================================================================

@pytest.fixture
def mock_store():
    """
    Mocked session store.

    find_by_id returns an empty property set by default, so any cookie is
    treated as an existing, empty session unless a test says otherwise.
    """
    store = AsyncMock()
    store.find_by_id = AsyncMock(return_value={})
    store.add = AsyncMock()
    store.update = AsyncMock()
    store.delete = AsyncMock()
    return store


def assert_no_store_mutations(store) -> None:
    """Assert that none of add/update/delete were awaited."""
    store.add.assert_not_awaited()
    store.update.assert_not_awaited()
    store.delete.assert_not_awaited()


# =============================================================================
# Redis Mocking Infrastructure
# =============================================================================

@pytest.fixture
def mock_redis():
    """Create a mock Redis client for async operations."""
    redis = AsyncMock()
    redis.get = AsyncMock(return_value=None)
    redis.set = AsyncMock(return_value=True)
    redis.delete = AsyncMock(return_value=1)
    return redis


@pytest.fixture
def mock_redis_with_data():
    """
    Redis mock with in-memory data storage for more realistic tests.

    Supports the NX and XX flags of SET so store semantics can be
    exercised end to end.
    """
    storage = {}

    redis = AsyncMock()

    async def mock_set(key, value, *args, nx=False, xx=False, **kwargs):
        if nx and key in storage:
            return None
        if xx and key not in storage:
            return None
        storage[key] = value
        return True

    async def mock_get(key):
        return storage.get(key)

    async def mock_delete(*keys):
        count = 0
        for key in keys:
            if key in storage:
                del storage[key]
                count += 1
        return count

    redis.set = mock_set
    redis.get = mock_get
    redis.delete = mock_delete
    redis._storage = storage  # Expose for test assertions

    return redis


# =============================================================================
# Test App Setup
# =============================================================================

def create_test_app(
    options: Optional[SessionMiddlewareOptions] = None,
    handler: Optional[Callable[[Request], None]] = None,
) -> FastAPI:
    """
    Create a minimal FastAPI app with the session middleware installed.

    The single "/" endpoint runs ``handler`` (if given) against the request
    and answers 200.
    """
    app = FastAPI()
    install_session_middleware(app, options)

    @app.get("/")
    async def root(request: Request):
        if handler:
            handler(request)
        return {"status": "ok"}

    @app.get("/context")
    async def context(request: Request):
        session = get_session_context(request)
        return {"is_new": session.is_new, "properties": session.properties}

    return app


def parse_set_cookie(header: str) -> Tuple[str, str, Dict[str, str]]:
    """
    Split a Set-Cookie header into name, value and lower-cased attributes.

    Flag attributes (Secure, HttpOnly) map to an empty string.
    """
    parts = [part.strip() for part in header.split(";")]
    name, _, value = parts[0].partition("=")
    attributes = {}
    for part in parts[1:]:
        key, _, attr_value = part.partition("=")
        attributes[key.lower()] = attr_value
    return name, value, attributes


@pytest.fixture
def client_factory():
    """Build a TestClient around create_test_app."""
    def factory(options=None, handler=None) -> TestClient:
        return TestClient(create_test_app(options, handler))

    return factory


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests requiring infrastructure"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take a long time to run"
    )
