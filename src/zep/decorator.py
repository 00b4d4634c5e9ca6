"""Decorator API for debouncing plain functions with a Zep."""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any, overload

from zep.config import ZepConfig
from zep.core import Zep


@overload
def debounce(
    func: Callable[..., Any],
    /,
) -> Callable[..., Zep]: ...


@overload
def debounce(
    *,
    period: float | None = None,
    cancel_skips_run: bool = False,
) -> Callable[[Callable[..., Any]], Callable[..., Zep]]: ...


def debounce(
    func: Callable[..., Any] | None = None,
    /,
    *,
    period: float | None = None,
    cancel_skips_run: bool = False,
) -> Callable[..., Zep] | Callable[[Callable[..., Any]], Callable[..., Zep]]:
    """Decorator that routes calls to a function through a :class:`Zep`.

    Calling the decorated function records its arguments and returns the
    backing ``Zep``; the original function runs on the timer with the latest
    arguments. The period defaults to None, like ``Zep``, so a bare
    ``@debounce`` does not debounce: every call runs the function
    immediately. Pass ``period`` to debounce. Debounced calls need a running
    event loop.

    Args:
        func: The function to decorate (when used without parentheses).
        period: Timer period in seconds, or None for immediate execution.
        cancel_skips_run: Skip the execution of a cancelled tick.

    Examples:
    ```python
        @debounce(period=0.3)
        def search(query: str) -> None:
            print(query)

        search("a")
        search("ab")  # only "ab" is searched when the timer fires

        search.zep.on_completed(lambda z: z.write_stats())
    ```
    """
    config = ZepConfig(period=period, cancel_skips_run=cancel_skips_run)

    def decorator(fn: Callable[..., Any]) -> Callable[..., Zep]:
        if inspect.iscoroutinefunction(fn):
            raise TypeError("@debounce only supports regular functions.")

        zep = Zep(fn, config=config)

        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Zep:
            return zep.run(*args, **kwargs)

        wrapper.zep = zep  # type: ignore[attr-defined]
        wrapper.cancel = zep.cancel  # type: ignore[attr-defined]
        wrapper.abort = zep.abort  # type: ignore[attr-defined]
        wrapper.write_stats = zep.write_stats  # type: ignore[attr-defined]

        return wrapper

    if func is not None:
        return decorator(func)

    return decorator
