"""Partial application of two argument functions"""

from __future__ import annotations

import logging
from typing import Callable, Generic

from typing_extensions import TypeVar

from .errors import require_callable

_LOGGER = logging.getLogger(__name__)

_X = TypeVar("_X", infer_variance=True)
_Y = TypeVar("_Y", infer_variance=True)
_R = TypeVar("_R", infer_variance=True)


class PartialApplication(Generic[_X, _Y, _R]):
    """
    Two argument function with its first argument fixed

    the fixed argument is captured when the instance is created and cannot
    be replaced afterwards
    """

    __slots__ = ("_func", "_arg")

    _func: Callable[[_X, _Y], _R]
    _arg: _X

    def __init__(self, func: Callable[[_X, _Y], _R], arg: _X) -> None:
        object.__setattr__(self, "_func", func)
        object.__setattr__(self, "_arg", arg)

    def __call__(self, __y: _Y) -> _R:
        return self._func(self._arg, __y)

    def __setattr__(self, __name: str, __value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, __name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._func, self._arg))

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", None) or repr(self._func)
        return f"<{type(self).__name__} {name}({self._arg!r}, ...)>"

    @property
    def func(self) -> Callable[[_X, _Y], _R]:
        """wrapped function"""
        return self._func

    @property
    def arg(self) -> _X:
        """fixed first argument"""
        return self._arg


def partial(fn: Callable[[_X, _Y], _R], x: _X) -> PartialApplication[_X, _Y, _R]:
    """fix x as the first argument of fn, returning a function of the second"""

    require_callable(fn)
    _LOGGER.debug("Creating partial application of %r", fn)
    return PartialApplication(fn, x)

