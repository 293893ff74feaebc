"""
Storage Module - Black Box Interface

Purpose: Persist session properties between requests
Interface: find_by_id(), add(), update(), delete()
Hidden: Redis specifics, serialization, locking

Any object implementing SessionStore can replace these backends without
affecting the middleware.
"""

from .interfaces import SessionStore
from .memory import InMemorySessionStore
from .redis_store import RedisConnection, RedisSessionStore

__all__ = ["SessionStore", "InMemorySessionStore", "RedisSessionStore", "RedisConnection"]
