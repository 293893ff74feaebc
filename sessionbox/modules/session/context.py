from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union

from .exceptions import InvalidArgumentError, PropertyTypeError

T = TypeVar("T")

PropertySource = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class SessionContext:
    """
    Per-request view of one session's properties.

    Built by the session middleware through ``for_new_session`` or
    ``for_existing_session`` and discarded when the request completes.
    """

    def __init__(self, session_id: str, properties: Dict[str, Any], is_new: bool):
        """
        Initialize session context.

        Args:
            session_id: Session identifier (non-empty)
            properties: Property dict owned by this context
            is_new: True when no stored session backs this context
        """
        if not session_id or not isinstance(session_id, str):
            raise InvalidArgumentError("session_id")
        if properties is None:
            raise InvalidArgumentError("properties")

        self._session_id = session_id
        self._properties = properties
        self._is_new = is_new
        self._is_modified = False

    @classmethod
    def for_new_session(cls, session_id: str) -> "SessionContext":
        """Create an empty context for a session that is not stored yet."""
        return cls(session_id, {}, is_new=True)

    @classmethod
    def for_existing_session(
        cls, session_id: str, properties: Optional[PropertySource]
    ) -> "SessionContext":
        """
        Create a context for a session loaded from the store.

        Args:
            session_id: Session identifier
            properties: Mapping or (key, value) pairs; copied, last key wins

        Raises:
            InvalidArgumentError: If session_id is empty or properties is None
        """
        if properties is None:
            raise InvalidArgumentError("properties")
        return cls(session_id, dict(properties), is_new=False)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def is_new(self) -> bool:
        return self._is_new

    @property
    def is_modified(self) -> bool:
        return self._is_modified

    @property
    def is_empty(self) -> bool:
        return not self._properties

    @property
    def properties(self) -> Dict[str, Any]:
        """Snapshot of the current properties."""
        return dict(self._properties)

    def find(self, key: str, default: Any = None) -> Any:
        """
        Find a property of the current session.

        Returns:
            The stored value, or ``default`` if the key is not present
        """
        self._check_key(key)
        return self._properties.get(key, default)

    def find_as(self, key: str, type_: Type[T]) -> Optional[T]:
        """
        Find a property and view it as ``type_``.

        Returns:
            The stored value, or ``type_()`` if the key is not present
            (``None`` when ``type_`` has no zero-argument constructor)

        Raises:
            PropertyTypeError: If the stored value is not a ``type_``
        """
        self._check_key(key)
        if key not in self._properties:
            try:
                return type_()
            except TypeError:
                return None

        value = self._properties[key]
        if not _is_viewable_as(value, type_):
            raise PropertyTypeError(key, type_, value)
        return value

    def add_or_update(self, key: str, value: Any) -> None:
        """Add or overwrite a property of the current session."""
        self._check_key(key)
        self._properties[key] = value
        self._mark_modified()

    def delete(self, key: str) -> None:
        """Delete a property; deleting an absent key is not an error."""
        self._check_key(key)
        self._properties.pop(key, None)
        self._mark_modified()

    def clear(self) -> None:
        """Remove all properties of the current session."""
        if not self._properties:
            return
        self._properties.clear()
        self._mark_modified()

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return (
            f"SessionContext(session_id={self._session_id[:8]!r}..., "
            f"is_new={self._is_new}, is_modified={self._is_modified}, "
            f"properties={len(self._properties)})"
        )

    def _mark_modified(self) -> None:
        # New sessions are persisted in full by the add call
        if not self._is_new:
            self._is_modified = True

    @staticmethod
    def _check_key(key: str) -> None:
        if key is None or not isinstance(key, str):
            raise InvalidArgumentError("key")


def _is_viewable_as(value: Any, type_: type) -> bool:
    # bool is an int subclass, but a flag is not a number
    if isinstance(value, bool) and type_ not in (bool, object):
        return False
    return isinstance(value, type_)
