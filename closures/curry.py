"""partial wrapper and currying"""

from __future__ import annotations

import logging
from functools import partial
from inspect import Parameter, signature
from typing import Any, Callable, TypeVar

from .errors import InvalidArgumentError, require_callable

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_POSITIONAL = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


def curry(__func: Callable[..., T], *args, **kwargs) -> Callable[..., T]:
    """Wrapper for partial"""

    require_callable(__func)
    return partial(__func, *args, **kwargs)


def _required_arity(func: Callable) -> int:
    try:
        params = signature(func).parameters.values()
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError(
            "arity", f"cannot determine arity of {func!r}, pass it explicitly"
        ) from err
    return sum(
        1 for param in params if param.kind in _POSITIONAL and param.default is Parameter.empty
    )


def curried(__func: Callable[..., T], arity: int | None = None) -> Callable[..., Any]:
    """
    curried form of __func

    positional arguments are collected across calls, one or more at a time,
    and __func is invoked once arity of them are present
    """

    require_callable(__func)
    if arity is None:
        arity = _required_arity(__func)
    elif arity < 0:
        raise InvalidArgumentError("arity", f"arity must not be negative, got {arity}")
    _LOGGER.debug("Currying %r with arity %d", __func, arity)
    return _collect(__func, arity, ())


def _collect(func: Callable[..., T], arity: int, collected: tuple):
    def step(*args):
        received = collected + args
        if len(received) >= arity:
            return func(*received)
        return _collect(func, arity, received)

    return step
