from __future__ import annotations

from typing import Any

from unistore import ActionLike, action_type, with_initial_state


def add_todo(text: str) -> dict[str, Any]:
    return {"type": "ADD_TODO", "text": text}


def unknown_action() -> dict[str, Any]:
    return {"type": "UNKNOWN"}


@with_initial_state(lambda: 0)
def counter(state: int, action: ActionLike) -> int:
    if action_type(action) == "INC":
        return state + 1

    if action_type(action) == "DEC":
        return state - 1

    return state


@with_initial_state(list)
def todos(state: list[dict[str, Any]], action: ActionLike) -> list[dict[str, Any]]:
    if action_type(action) == "ADD_TODO":
        return [*state, {"id": len(state) + 1, "text": action["text"]}]

    return state
