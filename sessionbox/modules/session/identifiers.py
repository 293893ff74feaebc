import base64
import secrets
import uuid

# uuid4 hex (32) + "." + base64 of 8 bytes (12)
MAX_SESSION_ID_LENGTH = 45


def unique_session_id_generator() -> str:
    """
    Generate a new session identifier.

    Format: ``<32 hex digits>.<base64 of 8 random bytes>``, 45 characters.
    The random suffix comes from ``secrets`` so ids are not guessable from
    the uuid part alone.
    """
    suffix = base64.b64encode(secrets.token_bytes(8)).decode("ascii")
    return f"{uuid.uuid4().hex}.{suffix}"


__all__ = ["MAX_SESSION_ID_LENGTH", "unique_session_id_generator"]
