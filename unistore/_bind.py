from __future__ import annotations

from collections.abc import Mapping
from functools import wraps
from typing import Any, Callable, Union

from ._errors import BindingTypeError
from ._store import Dispatch


__all__ = (
    "bind_action_creators",
)


ActionCreator = Callable[..., Any]


def _bind_action_creator(
    action_creator: ActionCreator,
    dispatch: Dispatch
) -> ActionCreator:
    @wraps(action_creator)
    def bound(*args: Any, **kwargs: Any) -> Any:
        return dispatch(action_creator(*args, **kwargs))

    return bound


def bind_action_creators(
    action_creators: Union[ActionCreator, Mapping[str, ActionCreator]],
    dispatch: Dispatch
) -> Union[ActionCreator, dict[str, ActionCreator]]:
    """Wrap action creators so calling them dispatches their result.

    A single callable yields a single bound callable. A mapping yields a dict
    with the same keys; entries that are not callable are skipped.
    """
    if callable(action_creators):
        return _bind_action_creator(action_creators, dispatch)

    if not isinstance(action_creators, Mapping):
        received = "None" if action_creators is None \
            else type(action_creators).__name__

        raise BindingTypeError(
            "bind_action_creators expected a mapping or a callable, "
            f"instead received {received}."
        )

    return {
        key: _bind_action_creator(action_creator, dispatch)
        for key, action_creator in action_creators.items()
        if callable(action_creator)
    }
