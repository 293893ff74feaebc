"""
Unit tests for the session context.
"""

import uuid

import pytest

from sessionbox.modules.session import (
    InvalidArgumentError,
    PropertyTypeError,
    SessionContext,
)


def new_id() -> str:
    return str(uuid.uuid4())


# =============================================================================
# Construction
# =============================================================================


def test_for_new_session_creates_empty_context():
    """A new session starts empty and unmodified."""
    context = SessionContext.for_new_session(new_id())

    assert context.is_new is True
    assert context.is_modified is False
    assert context.is_empty is True
    assert context.properties == {}


def test_for_new_session_copies_session_id():
    session_id = new_id()
    context = SessionContext.for_new_session(session_id)
    assert context.session_id == session_id


@pytest.mark.parametrize("session_id", [None, ""])
def test_for_new_session_rejects_missing_session_id(session_id):
    with pytest.raises(InvalidArgumentError) as exc_info:
        SessionContext.for_new_session(session_id)
    assert exc_info.value.param_name == "session_id"


def test_for_existing_session_is_not_new():
    context = SessionContext.for_existing_session(new_id(), {})
    assert context.is_new is False
    assert context.is_modified is False


def test_for_existing_session_with_empty_properties_is_empty():
    context = SessionContext.for_existing_session(new_id(), [])
    assert context.is_empty is True


def test_for_existing_session_with_properties_is_not_empty():
    context = SessionContext.for_existing_session(new_id(), {"A": 1, "B": 2})

    assert context.is_empty is False
    assert context.is_modified is False
    assert context.properties == {"A": 1, "B": 2}


def test_for_existing_session_accepts_key_value_pairs():
    """Pairs are accepted and a repeated key keeps its last value."""
    context = SessionContext.for_existing_session(new_id(), [("A", 1), ("B", 2), ("A", 3)])
    assert context.properties == {"A": 3, "B": 2}


def test_for_existing_session_copies_properties():
    """Later changes to the source mapping do not leak into the context."""
    source = {"A": 1}
    context = SessionContext.for_existing_session(new_id(), source)

    source["B"] = 2
    context.add_or_update("C", 3)

    assert context.properties == {"A": 1, "C": 3}
    assert source == {"A": 1, "B": 2}


@pytest.mark.parametrize("session_id", [None, ""])
def test_for_existing_session_rejects_missing_session_id(session_id):
    with pytest.raises(InvalidArgumentError) as exc_info:
        SessionContext.for_existing_session(session_id, {})
    assert exc_info.value.param_name == "session_id"


def test_for_existing_session_rejects_missing_properties():
    with pytest.raises(InvalidArgumentError) as exc_info:
        SessionContext.for_existing_session(new_id(), None)
    assert exc_info.value.param_name == "properties"


def test_invalid_argument_error_is_value_error():
    with pytest.raises(ValueError):
        SessionContext.for_new_session("")


def test_properties_returns_snapshot():
    context = SessionContext.for_existing_session(new_id(), {"A": 1})

    snapshot = context.properties
    snapshot["B"] = 2

    assert context.properties == {"A": 1}
    assert context.is_modified is False


# =============================================================================
# find / find_as
# =============================================================================


def test_find_unknown_property_returns_none():
    context = SessionContext.for_existing_session("abc", {})
    assert context.find("B") is None


def test_find_unknown_property_returns_default():
    context = SessionContext.for_existing_session("abc", {})
    assert context.find("B", "fallback") == "fallback"


def test_find_existing_property_returns_value():
    context = SessionContext.for_existing_session(new_id(), {"A": 1, "B": 2})
    assert context.find("B") == 2


def test_find_rejects_missing_key():
    context = SessionContext.for_existing_session(new_id(), {})
    with pytest.raises(InvalidArgumentError) as exc_info:
        context.find(None)
    assert exc_info.value.param_name == "key"


def test_contains_reports_presence():
    context = SessionContext.for_existing_session(new_id(), {"A": None})
    assert "A" in context
    assert "B" not in context


def test_find_as_unknown_property_returns_type_default():
    context = SessionContext.for_new_session("abc")

    assert context.find_as("B", int) == 0
    assert context.find_as("C", bool) is False
    assert context.find_as("D", str) == ""
    assert context.find_as("E", list) == []


def test_find_as_unknown_property_without_default_constructor_returns_none():
    class Token:
        def __init__(self, value):
            self.value = value

    context = SessionContext.for_new_session("abc")
    assert context.find_as("token", Token) is None


def test_find_as_existing_property_of_correct_type_returns_value():
    context = SessionContext.for_new_session("abc")
    context.add_or_update("B", 5)
    context.add_or_update("C", True)

    assert context.find_as("B", int) == 5
    assert context.find_as("C", bool) is True


def test_find_as_existing_property_of_incorrect_type_raises():
    context = SessionContext.for_new_session("abc")
    context.add_or_update("B", "five")

    with pytest.raises(PropertyTypeError) as exc_info:
        context.find_as("B", int)

    assert exc_info.value.key == "B"
    assert exc_info.value.expected is int
    assert exc_info.value.actual is str


def test_find_as_does_not_view_bool_as_int():
    context = SessionContext.for_new_session("abc")
    context.add_or_update("B", True)

    with pytest.raises(TypeError):
        context.find_as("B", int)


def test_find_as_rejects_missing_key():
    context = SessionContext.for_new_session("abc")
    with pytest.raises(InvalidArgumentError):
        context.find_as(None, int)


# =============================================================================
# add_or_update
# =============================================================================


def test_add_or_update_new_property_on_existing_session_sets_modified():
    context = SessionContext.for_existing_session(new_id(), {"A": 1, "B": 2})

    context.add_or_update("C", 3)

    assert context.properties == {"A": 1, "B": 2, "C": 3}
    assert context.is_new is False
    assert context.is_modified is True


def test_add_or_update_existing_property_on_existing_session_sets_modified():
    context = SessionContext.for_existing_session(new_id(), {"A": 1, "B": 2})

    context.add_or_update("A", 4)

    assert context.properties == {"A": 4, "B": 2}
    assert context.is_modified is True


def test_add_or_update_on_new_session_does_not_set_modified():
    context = SessionContext.for_new_session(new_id())

    context.add_or_update("A", 1)
    context.add_or_update("B", 2)
    context.add_or_update("A", 3)

    assert context.properties == {"A": 3, "B": 2}
    assert context.is_new is True
    assert context.is_modified is False


def test_add_or_update_then_find_returns_last_written_value():
    context = SessionContext.for_existing_session(new_id(), {})

    for value in ("first", 2, [3], {"four": 4}):
        context.add_or_update("key", value)
        assert context.find("key") == value


def test_add_or_update_rejects_missing_key():
    context = SessionContext.for_new_session(new_id())
    with pytest.raises(InvalidArgumentError) as exc_info:
        context.add_or_update(None, 2)
    assert exc_info.value.param_name == "key"


# =============================================================================
# delete / clear
# =============================================================================


def test_delete_unknown_property_on_new_session_does_not_raise():
    context = SessionContext.for_new_session(new_id())
    context.delete("A")
    assert context.is_modified is False


def test_delete_unknown_property_on_existing_session_sets_modified():
    """Deletion counts as a modification whether or not the key existed."""
    context = SessionContext.for_existing_session(new_id(), {"A": 1})

    context.delete("B")

    assert context.properties == {"A": 1}
    assert context.is_modified is True


def test_delete_existing_property_from_existing_session_sets_modified():
    context = SessionContext.for_existing_session(new_id(), {"A": 1, "B": 2, "C": 3})

    context.delete("B")

    assert context.properties == {"A": 1, "C": 3}
    assert context.is_modified is True


def test_delete_existing_property_from_new_session_does_not_set_modified():
    context = SessionContext.for_new_session(new_id())
    context.add_or_update("A", 1)
    context.add_or_update("B", 2)

    context.delete("B")

    assert context.properties == {"A": 1}
    assert context.is_modified is False


def test_delete_rejects_missing_key():
    context = SessionContext.for_new_session(new_id())
    with pytest.raises(InvalidArgumentError) as exc_info:
        context.delete(None)
    assert exc_info.value.param_name == "key"


def test_clear_existing_session_removes_properties_and_sets_modified():
    context = SessionContext.for_existing_session(new_id(), {"A": 1, "B": 2})

    context.clear()

    assert context.is_empty is True
    assert context.is_modified is True


def test_clear_existing_empty_session_does_not_set_modified():
    context = SessionContext.for_existing_session(new_id(), {})

    context.clear()

    assert context.is_empty is True
    assert context.is_modified is False


def test_clear_new_session_does_not_set_modified():
    context = SessionContext.for_new_session(new_id())
    context.add_or_update("A", 1)

    context.clear()

    assert context.is_empty is True
    assert context.is_modified is False


def test_modified_flag_is_monotonic():
    """Once modified, later operations never reset the flag."""
    context = SessionContext.for_existing_session(new_id(), {"A": 1})

    context.add_or_update("B", 2)
    context.clear()
    context.clear()
    context.add_or_update("A", 1)

    assert context.is_modified is True
    assert context.is_new is False
