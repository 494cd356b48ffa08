from __future__ import annotations

import logging

from collections.abc import Mapping
from typing import Any, Optional
from uuid import uuid4

from ._actions import UNDEFINED, ActionTypes, action_type, is_plain_action
from ._config import get_settings
from ._errors import ShapeError
from ._reducer import Reducer


__all__ = (
    "combine_reducers",
)


logger = logging.getLogger(__name__)


def _type_of(action: Any) -> Any:
    if not is_plain_action(action):
        return UNDEFINED

    return action_type(action)


def _probe_action_type() -> str:
    return ActionTypes.PROBE_UNKNOWN_ACTION + ".".join(uuid4().hex[:7])


def _undefined_state_error_message(key: str, action: Any) -> str:
    type_ = _type_of(action)
    action_name = f"\"{type_}\"" if type_ else "an action"

    return (
        f"Given action {action_name}, reducer \"{key}\" returned undefined. "
        "To ignore an action, you must explicitly return the previous state. "
        "If you want this reducer to hold no value, you can return None "
        "instead of UNDEFINED."
    )


def _unexpected_state_shape_warning_message(
    input_state: Any,
    reducers: Mapping[str, Reducer],
    action: Any,
    unexpected_key_cache: set[Any]
) -> Optional[str]:
    reducer_keys = list(reducers)
    known_keys = "\", \"".join(map(str, reducer_keys))

    if _type_of(action) == ActionTypes.INIT:
        argument_name = "preloaded_state argument passed to create_store"
    else:
        argument_name = "previous state received by the reducer"

    if not reducer_keys:
        return (
            "Store does not have a valid reducer. Make sure the argument "
            "passed to combine_reducers is a mapping whose values are "
            "reducers."
        )

    if not isinstance(input_state, Mapping):
        return (
            f"The {argument_name} has unexpected type of "
            f"\"{type(input_state).__name__}\". Expected argument to be a "
            "mapping with the following keys: "
            f"\"{known_keys}\""
        )

    unexpected_keys = [
        key for key in input_state
        if key not in reducers and key not in unexpected_key_cache
    ]

    unexpected_key_cache.update(unexpected_keys)

    if unexpected_keys:
        noun = "keys" if len(unexpected_keys) > 1 else "key"
        found_keys = "\", \"".join(map(str, unexpected_keys))

        return (
            f"Unexpected {noun} "
            f"\"{found_keys}\" "
            f"found in {argument_name}. Expected to find one of the known "
            f"reducer keys instead: \"{known_keys}\". "
            "Unexpected keys will be ignored."
        )

    return None


def _assert_reducer_shape(reducers: Mapping[str, Reducer]) -> None:
    for key, reducer in reducers.items():
        initial_state = reducer(UNDEFINED, {"type": ActionTypes.INIT})

        if initial_state is UNDEFINED:
            raise ShapeError(
                f"Reducer \"{key}\" returned undefined during "
                "initialization. If the state passed to the reducer is "
                "UNDEFINED, you must explicitly return the initial state. "
                "The initial state may not be UNDEFINED. If you don't want "
                "to set a value for this reducer, you can use None instead."
            )

        probe = {"type": _probe_action_type()}

        if reducer(UNDEFINED, probe) is UNDEFINED:
            raise ShapeError(
                f"Reducer \"{key}\" returned undefined when probed with a "
                f"random type. Don't try to handle {ActionTypes.INIT} or "
                f"other actions in the \"{ActionTypes.PREFIX}\" namespace. "
                "They are considered private. Instead, you must return the "
                "current state for any unknown actions, unless it is "
                "UNDEFINED, in which case you must return the initial state, "
                "regardless of the action type. The initial state may not be "
                "UNDEFINED, but can be None."
            )


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """Fold named reducers into one reducer over a dict of their states."""
    diagnostics = not get_settings().is_production

    final_reducers: dict[str, Reducer] = {}

    for key, reducer in reducers.items():
        if callable(reducer):
            final_reducers[key] = reducer
        elif diagnostics:
            logger.warning("No reducer provided for key \"%s\"", key)

    final_reducer_keys = list(final_reducers)

    unexpected_key_cache: set[Any] = set()

    shape_assertion_error: Optional[Exception] = None

    try:
        _assert_reducer_shape(final_reducers)
    except Exception as error:
        shape_assertion_error = error

    def combination(state: Any, action: Any) -> Any:
        if shape_assertion_error is not None:
            raise shape_assertion_error

        if state is UNDEFINED:
            state = {}

        if diagnostics:
            warning_message = _unexpected_state_shape_warning_message(
                state,
                final_reducers,
                action,
                unexpected_key_cache
            )

            if warning_message:
                logger.warning("%s", warning_message)

        is_mapping = isinstance(state, Mapping)

        has_changed = False
        next_state: dict[str, Any] = {}

        for key in final_reducer_keys:
            reducer = final_reducers[key]
            previous_state_for_key = \
                state.get(key, UNDEFINED) if is_mapping else UNDEFINED
            next_state_for_key = reducer(previous_state_for_key, action)

            if next_state_for_key is UNDEFINED:
                raise ShapeError(_undefined_state_error_message(key, action))

            next_state[key] = next_state_for_key
            has_changed = has_changed or \
                next_state_for_key is not previous_state_for_key

        return next_state if has_changed else state

    return combination
