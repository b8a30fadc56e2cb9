from __future__ import annotations

import sched
import time
from collections.abc import Callable


class Scheduler:
    """Single-threaded deferred-callback facility used by `delay` and `throttle`.

    A thin wrapper around `sched.scheduler`, working in milliseconds.

    Nothing runs on its own: the host drives pending callbacks with `run()`.

    Callbacks fire earliest-deadline first, then in insertion order.

    Args:
        clock (Callable[[], float]): Returns the current time in seconds. Defaults to `time.monotonic`.
        sleep (Callable[[float], object]): Waits for the given number of seconds. Defaults to `time.sleep`.

    Example:
    ```python
    >>> import underbar as ub
    >>> scheduler = ub.Scheduler()
    >>> scheduler.call_later(0, print, "fired")
    >>> scheduler.pending()
    1
    >>> scheduler.run()
    fired
    >>> scheduler.pending()
    0

    ```
    """

    __slots__ = ("_clock", "_queue")

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self._clock = clock
        self._queue = sched.scheduler(clock, sleep)

    def now(self) -> float:
        """Return the scheduler's current time, in milliseconds."""
        return self._clock() * 1000

    def call_later[*Ts](
        self, wait_ms: float, func: Callable[[*Ts], object], *args: *Ts
    ) -> None:
        """Schedule `func(*args)` to run `wait_ms` milliseconds from now.

        The return value of **func** is discarded. No cancellation handle is returned.

        Args:
            wait_ms (float): Delay before the call, in milliseconds. Negative values are treated as 0.
            func (Callable[[*Ts], object]): Callback to run.
            *args (*Ts): Positional arguments forwarded to **func**.
        """
        self._queue.enter(max(wait_ms, 0) / 1000, 0, func, args)

    def pending(self) -> int:
        """Return the number of callbacks waiting to run."""
        return len(self._queue.queue)

    def run(self, *, blocking: bool = True) -> None:
        """Run pending callbacks.

        Exceptions raised by a callback propagate to the caller of `run`.

        Args:
            blocking (bool): If True, wait until every pending callback has fired. If False, only fire the ones already due.
        """
        self._queue.run(blocking=blocking)
