from unittest.mock import MagicMock

import pytest

from unistore import BindingTypeError, bind_action_creators, create_store

from tests.reducers import add_todo, todos


def add_todo_if_empty(text):
    return add_todo(text)


def test_wraps_action_creators_in_mapping() -> None:
    store = create_store(todos)
    action_creators = {
        "add_todo": add_todo,
        "add_todo_if_empty": add_todo_if_empty,
        "foo": 42,
        "bar": "baz",
        "wow": None
    }

    bound = bind_action_creators(action_creators, store.dispatch)

    assert list(bound) == ["add_todo", "add_todo_if_empty"]

    action = bound["add_todo"]("Hello")

    assert action == {"type": "ADD_TODO", "text": "Hello"}
    assert store.get_state() == [{"id": 1, "text": "Hello"}]


def test_wraps_a_single_action_creator() -> None:
    store = create_store(todos)

    bound = bind_action_creators(add_todo, store.dispatch)

    assert bound(text="Hello") == {"type": "ADD_TODO", "text": "Hello"}
    assert store.get_state() == [{"id": 1, "text": "Hello"}]
    assert bound.__name__ == "add_todo"


def test_dispatches_exactly_once_per_call() -> None:
    dispatch = MagicMock()

    bound = bind_action_creators({"inc": lambda: {"type": "INC"}}, dispatch)
    bound["inc"]()

    dispatch.assert_called_once_with({"type": "INC"})


def test_returns_dispatch_result() -> None:
    dispatch = MagicMock(return_value="dispatched")

    bound = bind_action_creators(lambda: {"type": "INC"}, dispatch)

    assert bound() == "dispatched"


@pytest.mark.parametrize(
    "action_creators, received",
    [(None, "None"), ("string", "str"), (42, "int"), (["a"], "list")]
)
def test_rejects_invalid_action_creators(action_creators, received) -> None:
    with pytest.raises(BindingTypeError, match=f"instead received {received}"):
        bind_action_creators(action_creators, MagicMock())
