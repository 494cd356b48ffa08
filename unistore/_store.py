from __future__ import annotations

import inspect
import logging

from collections.abc import Mapping
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ._actions import (
    UNDEFINED,
    ActionTypes,
    Undefined,
    action_type,
    is_plain_action
)
from ._errors import (
    ConstructionError,
    DispatchValidationError,
    InteropTypeError,
    InvalidArgumentError,
    ReentrancyError
)
from ._reducer import Reducer


__all__ = (
    "Dispatch",
    "Enhancer",
    "Listener",
    "StateObservable",
    "Store",
    "StoreCreator",
    "Subscription",
    "Unsubscribe",

    "create_store"
)


logger = logging.getLogger(__name__)


A = TypeVar("A")
S = TypeVar("S")


Dispatch = Callable[[Any], Any]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
StoreCreator = Callable[..., "Store"]
Enhancer = Callable[[StoreCreator], StoreCreator]


class Subscription:
    def __init__(self, unsubscribe: Unsubscribe) -> None:
        self._unsubscribe = unsubscribe

    def unsubscribe(self) -> None:
        self._unsubscribe()


def _observer_callback(observer: Any) -> Optional[Callable[[Any], None]]:
    if isinstance(observer, Mapping):
        return observer.get("next")

    return getattr(observer, "next", None)


def _is_observer(value: object) -> bool:
    if value is None or value is UNDEFINED:
        return False

    if isinstance(value, (str, bytes, int, float, complex)):
        return False

    if isinstance(value, type) or inspect.isroutine(value):
        return False

    return not callable(value) or hasattr(value, "next")


class StateObservable(Generic[S]):
    def __init__(self, store: Store[S, Any]) -> None:
        self._store = store

    def subscribe(self, observer: Any) -> Subscription:
        if not _is_observer(observer):
            raise InteropTypeError("Expected the observer to be an object.")

        store = self._store

        def observe_state() -> None:
            callback = _observer_callback(observer)

            if callback is not None:
                callback(store.get_state())

        observe_state()

        return Subscription(store.subscribe(observe_state))

    def observable(self) -> StateObservable[S]:
        return self


class Store(Generic[S, A]):
    def dispatch(self, action: A) -> Any:
        raise NotImplementedError

    def get_state(self) -> Union[S, Undefined]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def replace_reducer(self, next_reducer: Reducer) -> None:
        raise NotImplementedError

    def observable(self) -> StateObservable[S]:
        raise NotImplementedError


class _DefaultStore(Store[S, A]):
    _current_reducer: Reducer
    _current_state: Union[S, Undefined]

    _current_listeners: list[Listener]
    _next_listeners: list[Listener]

    _is_dispatching: bool

    def __init__(
        self,
        reducer: Reducer,
        preloaded_state: Union[S, Undefined]
    ) -> None:
        self._current_reducer = reducer
        self._current_state = preloaded_state

        self._current_listeners = []
        self._next_listeners = self._current_listeners

        self._is_dispatching = False

    def _ensure_can_mutate_next_listeners(self) -> None:
        if self._next_listeners is self._current_listeners:
            self._next_listeners = list(self._current_listeners)

    def get_state(self) -> Union[S, Undefined]:
        if self._is_dispatching:
            raise ReentrancyError(
                "You may not call get_state() while the reducer is executing. "
                "The reducer has already received the state as an argument."
            )

        return self._current_state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        if not callable(listener):
            raise InvalidArgumentError("Expected the listener to be callable.")

        is_subscribed = True

        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed

            if not is_subscribed:
                return

            is_subscribed = False

            self._ensure_can_mutate_next_listeners()
            index = next(
                i for i, registered in enumerate(self._next_listeners)
                if registered is listener
            )
            del self._next_listeners[index]

        return unsubscribe

    def dispatch(self, action: A) -> A:
        if not is_plain_action(action):
            raise DispatchValidationError(
                "Actions must be plain objects. "
                "Use custom middleware for async actions."
            )

        if action_type(action) is UNDEFINED:
            raise DispatchValidationError(
                "Actions may not have an undefined \"type\" property. "
                "Have you misspelled a constant?"
            )

        if self._is_dispatching:
            raise ReentrancyError("Reducers may not dispatch actions.")

        try:
            self._is_dispatching = True
            self._current_state = self._current_reducer(
                self._current_state,
                action
            )
        finally:
            self._is_dispatching = False

        listeners = self._current_listeners = self._next_listeners

        for listener in listeners:
            listener()

        return action

    def replace_reducer(self, next_reducer: Reducer) -> None:
        if not callable(next_reducer):
            raise ConstructionError(
                "Expected the next_reducer to be callable."
            )

        logger.debug("Replacing reducer with %r", next_reducer)

        self._current_reducer = next_reducer
        self.dispatch({"type": ActionTypes.INIT})  # type: ignore[arg-type]

    def observable(self) -> StateObservable[S]:
        return StateObservable(self)


def create_store(
    reducer: Reducer,
    preloaded_state: Any = UNDEFINED,
    enhancer: Optional[Enhancer] = None
) -> Store[S, A]:
    """``enhancer`` may be passed in place of ``preloaded_state``."""
    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = UNDEFINED

    if enhancer is not None:
        if not callable(enhancer):
            raise ConstructionError("Expected the enhancer to be callable.")

        logger.debug("Delegating store creation to enhancer %r", enhancer)

        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise ConstructionError("Expected the reducer to be callable.")

    store: _DefaultStore[S, A] = _DefaultStore(reducer, preloaded_state)

    logger.debug("Created store with reducer %r", reducer)

    store.dispatch({"type": ActionTypes.INIT})  # type: ignore[arg-type]

    return store
