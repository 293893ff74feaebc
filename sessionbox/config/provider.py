"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Protocol


@dataclass
class SessionCookieConfig:
    """Session cookie configuration."""
    name: str
    domain: Optional[str]
    path: str
    lifetime_seconds: Optional[int]
    secure: bool
    http_only: bool
    same_site: str

    @property
    def lifetime(self) -> Optional[timedelta]:
        """Cookie lifetime, None for a browser session cookie."""
        if not self.lifetime_seconds:
            return None
        return timedelta(seconds=self.lifetime_seconds)


@dataclass
class StoreConfig:
    """Session store configuration."""
    backend: str
    key_prefix: str

    @property
    def uses_redis(self) -> bool:
        return self.backend == "redis"


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_cookie_config(self) -> SessionCookieConfig:
        """Get session cookie configuration."""
        ...

    def get_store_config(self) -> StoreConfig:
        """Get session store configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_cookie_config(self) -> SessionCookieConfig:
        """Get session cookie configuration from environment variables."""
        lifetime = os.getenv("SESSION_COOKIE_LIFETIME")

        return SessionCookieConfig(
            name=os.getenv("SESSION_COOKIE_NAME", "sbx.sid"),
            domain=os.getenv("SESSION_COOKIE_DOMAIN") or None,
            path=os.getenv("SESSION_COOKIE_PATH", "/"),
            lifetime_seconds=int(lifetime) if lifetime else None,
            secure=os.getenv("SESSION_COOKIE_SECURE", "true").lower() == "true",
            http_only=os.getenv("SESSION_COOKIE_HTTPONLY", "true").lower() == "true",
            same_site=os.getenv("SESSION_COOKIE_SAMESITE", "lax").lower(),
        )

    def get_store_config(self) -> StoreConfig:
        """Get session store configuration from environment variables."""
        backend = os.getenv("SESSION_STORE", "memory").lower()
        if backend not in ("memory", "redis"):
            raise ValueError(
                f"Unsupported SESSION_STORE '{backend}'. Use 'memory' or 'redis'."
            )

        return StoreConfig(
            backend=backend,
            key_prefix=os.getenv("SESSION_KEY_PREFIX", "session:"),
        )
