# A single deferred script: description + zero-arg callable, run on demand.

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, NoReturn

from prsm.errors import ScriptFailure


def fail(error: Any) -> NoReturn:
    """Fail the running script with an arbitrary value (not necessarily an exception)."""
    raise ScriptFailure(error)


def _is_async(func: Callable[..., Any]) -> bool:
    while isinstance(func, functools.partial):
        func = func.func
    return inspect.iscoroutinefunction(func)


class Script:
    """
    A named, parameterless unit of work.
    Nothing runs at construction; `run()` executes the wrapped callable every time it is called.
    """

    __slots__ = ("_description", "_func")

    def __init__(self, description: str, func: Callable[[], Any]) -> None:
        if not callable(func):
            raise TypeError(f"script {description!r}: expected a callable, got {type(func).__name__}")
        if _is_async(func):
            raise TypeError(f"script {description!r}: async functions are not supported, wrap them in a sync call")
        self._description = str(description)
        self._func = func

    @property
    def description(self) -> str:
        return self._description

    def run(self) -> None:
        """
        Run the script now. Return values are dropped.
        Any Exception (or a `fail(value)` call) comes out as ScriptFailure.
        """
        try:
            result = self._func()
        except ScriptFailure:
            raise
        except Exception as e:
            raise ScriptFailure(e) from e
        if inspect.isawaitable(result):
            # the body never ran
            if inspect.iscoroutine(result):
                result.close()
            raise ScriptFailure(TypeError(f"script {self._description!r} returned an awaitable; it was not run"))

    def __repr__(self) -> str:
        return f"Script({self._description!r})"


def script(description: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Script:
    """
    Build a Script that will call fn(*args, **kwargs) later.
    Arguments are captured now, so `script("z", z, 0)` defers `z(0)`.
    """
    if args or kwargs:
        return Script(description, functools.partial(fn, *args, **kwargs))
    return Script(description, fn)
