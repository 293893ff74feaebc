"""Session middleware options."""
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Optional

from ..session.exceptions import InvalidArgumentError
from ..session.identifiers import unique_session_id_generator
from ..storage import InMemorySessionStore, SessionStore

DEFAULT_COOKIE_NAME = "sbx.sid"
DEFAULT_CONTEXT_KEY = "sbx.session_context"

# request.state attribute naming the key the context was stored under
CONTEXT_KEY_ATTRIBUTE = "session_context_key"

SAME_SITE_VALUES = ("lax", "strict", "none")


@dataclass
class SessionMiddlewareOptions:
    """
    Configuration of the session middleware.

    cookie_domain=None produces a host-only cookie and cookie_lifetime=None a
    session cookie that the browser drops when it closes.
    """
    cookie_name: str = DEFAULT_COOKIE_NAME
    cookie_domain: Optional[str] = None
    cookie_path: str = "/"
    cookie_lifetime: Optional[timedelta] = None
    use_secure_cookie: bool = True
    cookie_http_only: bool = True
    cookie_same_site: str = "lax"
    store: SessionStore = field(default_factory=InMemorySessionStore)
    unique_session_id_generator: Callable[[], str] = unique_session_id_generator
    context_key: str = DEFAULT_CONTEXT_KEY

    def __post_init__(self):
        if not self.cookie_name:
            raise InvalidArgumentError("cookie_name")
        if not self.context_key:
            raise InvalidArgumentError("context_key")
        if self.store is None:
            raise InvalidArgumentError("store")
        if not callable(self.unique_session_id_generator):
            raise InvalidArgumentError(
                "unique_session_id_generator", "Session id generator must be callable"
            )
        if self.cookie_lifetime is not None and self.cookie_lifetime <= timedelta(0):
            raise InvalidArgumentError("cookie_lifetime", "Cookie lifetime must be positive")
        if self.cookie_same_site.lower() not in SAME_SITE_VALUES:
            raise InvalidArgumentError(
                "cookie_same_site", f"SameSite must be one of {', '.join(SAME_SITE_VALUES)}"
            )
