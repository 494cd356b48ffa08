from __future__ import annotations

import logging

from typing import Any, Callable, Optional, TypeVar

from ._actions import UNDEFINED
from ._compose import compose
from ._errors import MiddlewareConstructionError
from ._reducer import Reducer
from ._store import (
    Dispatch,
    Enhancer,
    Listener,
    StateObservable,
    Store,
    StoreCreator,
    Unsubscribe
)


__all__ = (
    "Middleware",
    "MiddlewareAPI",

    "apply_middleware"
)


logger = logging.getLogger(__name__)


A = TypeVar("A")
S = TypeVar("S")


class MiddlewareAPI:
    """The store surface handed to each middleware.

    ``dispatch`` runs the whole middleware chain, so it only becomes usable
    once the chain has been assembled. Calling it while a middleware is still
    being set up raises ``MiddlewareConstructionError``.
    """

    _store: Store
    _dispatch: Optional[Dispatch]

    def __init__(self, store: Store) -> None:
        self._store = store
        self._dispatch = None

    def get_state(self) -> Any:
        return self._store.get_state()

    def dispatch(self, action: Any) -> Any:
        if self._dispatch is None:
            raise MiddlewareConstructionError(
                "Dispatching while constructing your middleware is not "
                "allowed. Other middleware would not be applied to this "
                "dispatch."
            )

        return self._dispatch(action)

    def _resolve(self, dispatch: Dispatch) -> None:
        self._dispatch = dispatch


Middleware = Callable[[MiddlewareAPI], Callable[[Dispatch], Dispatch]]


class _EnhancedStore(Store[S, A]):
    def __init__(self, original_store: Store[S, A], dispatch: Dispatch) -> None:
        self._original_store = original_store
        self._dispatch = dispatch

    def dispatch(self, action: A) -> Any:
        return self._dispatch(action)

    def get_state(self) -> Any:
        return self._original_store.get_state()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._original_store.subscribe(listener)

    def replace_reducer(self, next_reducer: Reducer) -> None:
        self._original_store.replace_reducer(next_reducer)

    def observable(self) -> StateObservable[S]:
        return self._original_store.observable()


def apply_middleware(*middlewares: Middleware) -> Enhancer:
    """Create an enhancer that wraps the store's ``dispatch`` in middleware.

    Each middleware receives a ``MiddlewareAPI`` and returns a function that
    takes the next dispatch and returns a new one. The first middleware is
    the outermost layer.
    """

    def enhance(create_store: StoreCreator) -> StoreCreator:
        def create_enhanced_store(
            reducer: Reducer,
            preloaded_state: Any = UNDEFINED,
            enhancer: Optional[Enhancer] = None
        ) -> Store:
            store = create_store(reducer, preloaded_state, enhancer)

            api = MiddlewareAPI(store)
            chain = [middleware(api) for middleware in middlewares]

            dispatch = compose(*chain)(store.dispatch)
            api._resolve(dispatch)

            logger.debug("Applied %d middleware", len(chain))

            return _EnhancedStore(store, dispatch)

        return create_enhanced_store

    return enhance
