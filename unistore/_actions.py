from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Final, Literal, Union

from pydantic import BaseModel, ConfigDict


__all__ = (
    "UNDEFINED",
    "Action",
    "ActionLike",
    "ActionTypes",
    "Undefined",

    "action_type",
    "is_plain_action"
)


class Undefined(Enum):
    """Marker for an absent value.

    ``None`` is a legitimate state; ``UNDEFINED`` means "no state yet" and is
    never a legal reducer result.
    """

    UNDEFINED = "UNDEFINED"

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined.UNDEFINED


class ActionTypes:
    """Action types reserved by the store.

    Reducers must return their current state for any unknown action, and their
    initial state when the current state is ``UNDEFINED``. Never branch on
    these types directly.
    """

    PREFIX: Final = "@@unistore/"
    INIT: Final = f"{PREFIX}INIT"
    PROBE_UNKNOWN_ACTION: Final = f"{PREFIX}PROBE_UNKNOWN_ACTION_"


class Action(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    type: Any


ActionLike = Union[Mapping[str, Any], Action]


def is_plain_action(value: object) -> bool:
    return isinstance(value, (Mapping, Action))


def action_type(action: ActionLike) -> Any:
    if isinstance(action, Action):
        return action.type

    return action.get("type", UNDEFINED)
