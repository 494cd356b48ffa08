from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

from ._actions import UNDEFINED


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Reducer",
    "StateFactory",

    "with_initial_state"
)


Reducer = Callable[[S, A], S]
StateFactory = Callable[[], S]


def with_initial_state(
    factory: StateFactory
) -> Callable[[Reducer], Reducer]:
    """Substitute ``factory()`` whenever the reducer receives ``UNDEFINED``."""

    def decorate(reducer: Reducer) -> Reducer:
        @wraps(reducer)
        def apply(state: Any, action: Any) -> Any:
            if state is UNDEFINED:
                state = factory()

            return reducer(state, action)

        return apply

    return decorate
