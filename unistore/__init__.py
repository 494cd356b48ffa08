from ._actions import (
    UNDEFINED,
    Action,
    ActionLike,
    ActionTypes,
    Undefined,
    action_type,
    is_plain_action
)
from ._bind import bind_action_creators
from ._combine import combine_reducers
from ._compose import compose
from ._config import Settings, get_settings
from ._errors import (
    BindingTypeError,
    ConstructionError,
    DispatchValidationError,
    InteropTypeError,
    InvalidArgumentError,
    MiddlewareConstructionError,
    ReentrancyError,
    ShapeError,
    StoreError
)
from ._middleware import Middleware, MiddlewareAPI, apply_middleware
from ._reducer import Reducer, StateFactory, with_initial_state
from ._store import (
    Dispatch,
    Enhancer,
    Listener,
    StateObservable,
    Store,
    StoreCreator,
    Subscription,
    Unsubscribe,
    create_store
)


__all__ = (
    "UNDEFINED",
    "Action",
    "ActionLike",
    "ActionTypes",
    "BindingTypeError",
    "ConstructionError",
    "Dispatch",
    "DispatchValidationError",
    "Enhancer",
    "InteropTypeError",
    "InvalidArgumentError",
    "Listener",
    "Middleware",
    "MiddlewareAPI",
    "MiddlewareConstructionError",
    "Reducer",
    "ReentrancyError",
    "Settings",
    "ShapeError",
    "StateFactory",
    "StateObservable",
    "Store",
    "StoreCreator",
    "StoreError",
    "Subscription",
    "Undefined",
    "Unsubscribe",

    "action_type",
    "apply_middleware",
    "bind_action_creators",
    "combine_reducers",
    "compose",
    "create_store",
    "get_settings",
    "is_plain_action",
    "with_initial_state"
)
