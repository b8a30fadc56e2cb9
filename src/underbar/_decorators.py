"""Function decorators: wrap a function and change how its calls behave.

Each wrapper owns its private state (called flag, result cache, throttle window), created at decoration time and never shared with another wrapper.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from functools import wraps
from typing import Any

import cytoolz as cz

from ._core import Scheduler, get_config


def once[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Return a function that calls **func** on its first call only.

    Every later call returns the result of that first call, whatever its arguments.

    Args:
        func (Callable[P, R]): The function to guard.

    Returns:
        Callable[P, R]: The guarded function.

    Example:
    ```python
    >>> import underbar as ub
    >>> @ub.once
    ... def setup(name: str) -> str:
    ...     print(f"setting up {name}")
    ...     return name.upper()
    >>> setup("db")
    setting up db
    'DB'
    >>> setup("cache")
    'DB'

    ```
    """
    called = False
    result: Any = None

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        nonlocal called, result
        if not called:
            result = func(*args, **kwargs)
            called = True
        return result

    return wrapper


def _signature(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Hashable:
    key = (args, tuple(sorted(kwargs.items()))) if kwargs else args
    try:
        hash(key)
    except TypeError:
        return repr(key)
    return key


def memoize[**P, R](
    func: Callable[P, R], hasher: Callable[P, Hashable] | None = None
) -> Callable[P, R]:
    """Return a function caching the results of **func** by argument list.

    Calls whose arguments compare equal reuse the cached result without calling **func** again.

    Arguments that can't be hashed, positional or keyword, are keyed by their `repr` instead.

    Hashable arguments are keyed by value, so `f(1)`, `f(1.0)` and `f(True)` share one entry. Pass a **hasher** such as `repr` to keep them apart.

    Results are cached even when falsy (`0`, `""`, `None`).

    Args:
        func (Callable[P, R]): The function to cache.
        hasher (Callable[P, Hashable] | None): Computes the cache key from the call arguments. Defaults to the arguments themselves.

    Returns:
        Callable[P, R]: The caching function.

    Example:
    ```python
    >>> import underbar as ub
    >>> @ub.memoize
    ... def square(n: int) -> int:
    ...     print(f"computing {n}")
    ...     return n * n
    >>> square(3)
    computing 3
    9
    >>> square(3)
    9
    >>> by_length = ub.memoize(lambda s: s.upper(), hasher=len)
    >>> by_length("ab"), by_length("cd")
    ('AB', 'AB')

    ```
    """
    if hasher is None:
        return cz.functoolz.memoize(func, cache={}, key=_signature)
    return cz.functoolz.memoize(
        func, cache={}, key=lambda args, kwargs: hasher(*args, **kwargs)
    )


def delay[*Ts](func: Callable[[*Ts], object], wait_ms: float, *args: *Ts) -> None:
    """Call `func(*args)` once, **wait_ms** milliseconds from now.

    The call goes through the configured `Scheduler`. Its result is discarded, and nothing is returned to cancel it.

    Args:
        func (Callable[[*Ts], object]): The function to call later.
        wait_ms (float): Delay in milliseconds.
        *args (*Ts): Arguments forwarded to **func**.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.delay(print, 10, "a", "b")
    >>> ub.get_config().scheduler.run()
    a b

    ```
    """
    get_config().scheduler.call_later(wait_ms, func, *args)


@dataclass(slots=True)
class _ThrottleState[R]:
    last_fired: float | None = None
    result: R | None = None
    pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None
    window: int = 0  # bumped on every actual call


def throttle[**P, R](
    func: Callable[P, R], wait_ms: float, *, trailing: bool = False
) -> Callable[P, R | None]:
    """Return a function that calls **func** at most once per **wait_ms** milliseconds.

    The first call of a quiet period fires immediately.

    Calls landing within **wait_ms** of the last actual call are dropped and return the last result (`None` before any call).

    With **trailing**, the latest dropped call is not lost: it fires once, when the window closes, through the configured `Scheduler`.

    The `Scheduler` is read from the configuration on each call, not captured at decoration time.

    Args:
        func (Callable[P, R]): The function to throttle.
        wait_ms (float): Window length in milliseconds.
        trailing (bool): Replay the latest dropped call at the end of the window.

    Returns:
        Callable[P, R | None]: The throttled function.

    Example:
    ```python
    >>> import underbar as ub
    >>> calls = []
    >>> log = ub.throttle(calls.append, 60_000)
    >>> log("first")
    >>> log("dropped")
    >>> calls
    ['first']

    ```
    """
    state: _ThrottleState[R] = _ThrottleState()

    def _fire(
        scheduler: Scheduler, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> R:
        state.pending = None
        state.window += 1
        state.last_fired = scheduler.now()
        state.result = func(*args, **kwargs)
        return state.result

    def _flush(scheduler: Scheduler, window: int) -> None:
        if window == state.window and state.pending is not None:
            _fire(scheduler, *state.pending)

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:
        scheduler = get_config().scheduler
        now = scheduler.now()
        if state.last_fired is None or now - state.last_fired >= wait_ms:
            return _fire(scheduler, args, kwargs)
        if trailing:
            if state.pending is None:
                scheduler.call_later(
                    state.last_fired + wait_ms - now, _flush, scheduler, state.window
                )
            state.pending = (args, kwargs)
        return state.result

    return wrapper
