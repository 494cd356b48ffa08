from __future__ import annotations

from functools import reduce
from typing import Any, Callable


__all__ = (
    "compose",
)


def _identity(arg: Any) -> Any:
    return arg


def _compose_pair(
    outer: Callable[..., Any],
    inner: Callable[..., Any]
) -> Callable[..., Any]:
    def composed(*args: Any, **kwargs: Any) -> Any:
        return outer(inner(*args, **kwargs))

    return composed


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions right to left.

    ``compose(f, g, h)(*args)`` is ``f(g(h(*args)))``. The rightmost function
    may take any arguments; the others receive a single value.
    """
    if not funcs:
        return _identity

    if len(funcs) == 1:
        return funcs[0]

    return reduce(_compose_pair, funcs)
