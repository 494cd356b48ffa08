from unistore import (
    apply_middleware,
    bind_action_creators,
    combine_reducers,
    create_store
)

from tests.reducers import add_todo, counter, todos


def logger_middleware(log):
    def middleware(api):
        def wrap(next_dispatch):
            def dispatch(action):
                before = api.get_state()
                result = next_dispatch(action)
                log.append((action["type"], before, api.get_state()))
                return result

            return dispatch

        return wrap

    return middleware


def test_combined_store_with_middleware_and_bound_creators() -> None:
    log = []
    store = create_store(
        combine_reducers({"counter": counter, "todos": todos}),
        {"counter": 2},
        apply_middleware(logger_middleware(log))
    )
    states = []

    store.observable().subscribe({"next": states.append})

    actions = bind_action_creators(
        {"increment": lambda: {"type": "INC"}, "add_todo": add_todo},
        store.dispatch
    )

    actions["increment"]()
    actions["add_todo"]("Write tests")

    assert store.get_state() == {
        "counter": 3,
        "todos": [{"id": 1, "text": "Write tests"}]
    }
    assert [entry[0] for entry in log] == ["INC", "ADD_TODO"]
    assert log[0][1] == {"counter": 2, "todos": []}
    assert len(states) == 3
    assert states[0] == {"counter": 2, "todos": []}
