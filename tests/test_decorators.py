"""Tests for once, memoize, delay and throttle."""

import pytest

import underbar as ub
from tests.conftest import ManualClock


class Counter:
    """Callable recording the arguments of each call."""

    def __init__(self, result: object = None) -> None:
        self.calls: list[tuple[tuple[object, ...], dict[str, object]]] = []
        self.result = result

    def __call__(self, *args: object, **kwargs: object) -> object:
        self.calls.append((args, kwargs))
        return self.result if self.result is not None else args


def test_once_calls_function_a_single_time() -> None:
    """Later calls return the first result, whatever their arguments."""
    spy = Counter()
    guarded = ub.once(spy)
    first = guarded(1)
    assert guarded(2) is first
    assert guarded(3, key="x") is first
    assert spy.calls == [((1,), {})]


def test_once_caches_falsy_results() -> None:
    """A None or falsy first result still counts as called."""
    calls: list[int] = []

    @ub.once
    def _init() -> None:
        calls.append(1)

    assert _init() is None
    assert _init() is None
    assert calls == [1]


def test_once_preserves_metadata_and_receiver() -> None:
    """Methods receive self, and the wrapper keeps the function name."""

    class Service:
        def __init__(self) -> None:
            self.starts = 0

        @ub.once
        def start(self) -> int:
            self.starts += 1
            return self.starts

    service = Service()
    assert service.start() == 1
    assert service.start() == 1
    assert service.starts == 1
    assert Service.start.__name__ == "start"


def test_once_wrappers_do_not_share_state() -> None:
    """Two wrappers of the same function are independent."""
    spy = Counter()
    first, second = ub.once(spy), ub.once(spy)
    first("a")
    second("b")
    assert spy.calls == [(("a",), {}), (("b",), {})]


def test_memoize_caches_by_argument() -> None:
    """Same argument hits the cache, a new one calls again."""
    spy = Counter()
    cached = ub.memoize(lambda n: spy(n)[0] * 2)
    assert cached(2) == 4
    assert cached(2) == 4
    assert cached(3) == 6
    assert spy.calls == [((2,), {}), ((3,), {})]


def test_memoize_caches_falsy_results() -> None:
    """Falsy results are cached like any other."""
    spy = Counter(result=0)
    cached = ub.memoize(spy)
    assert cached("x") == 0
    assert cached("x") == 0
    assert len(spy.calls) == 1


def test_memoize_distinguishes_keyword_arguments() -> None:
    """Keyword arguments are part of the key."""
    spy = Counter(result="r")
    cached = ub.memoize(spy)
    cached(1, flag=True)
    cached(1, flag=True)
    cached(1, flag=False)
    cached(1)
    assert len(spy.calls) == 3


def test_memoize_unhashable_arguments_fall_back_to_repr() -> None:
    """Lists are keyed by their string form."""
    spy = Counter(result="r")
    cached = ub.memoize(spy)
    cached([1, 2])
    cached([1, 2])
    cached([2, 1])
    assert len(spy.calls) == 2


def test_memoize_unhashable_keyword_arguments_fall_back_to_repr() -> None:
    """Keyword values that can't be hashed are keyed by their string form too."""
    spy = Counter(result="r")
    cached = ub.memoize(spy)
    assert cached(items=[1, 2]) == "r"
    cached(items=[1, 2])
    cached(items=[2, 1])
    cached(1, items={"a": [1]})
    assert len(spy.calls) == 3


def test_memoize_keys_equal_values_together() -> None:
    """Equal hashable arguments share an entry unless a hasher tells them apart."""
    spy = Counter(result="r")
    cached = ub.memoize(spy)
    cached(1)
    cached(True)  # noqa: FBT003
    cached(1.0)
    assert len(spy.calls) == 1
    by_repr = ub.memoize(spy, hasher=repr)
    by_repr(1)
    by_repr(True)  # noqa: FBT003
    assert len(spy.calls) == 3


def test_memoize_with_hasher() -> None:
    """A hasher computes the key from the arguments."""
    spy = Counter(result="r")
    cached = ub.memoize(spy, hasher=lambda s: s.lower())
    cached("Hello")
    cached("HELLO")
    cached("bye")
    assert spy.calls == [(("Hello",), {}), (("bye",), {})]


def test_memoize_wrappers_do_not_share_cache() -> None:
    """Each wrapper owns its cache."""
    spy = Counter(result="r")
    ub.memoize(spy)(1)
    ub.memoize(spy)(1)
    assert len(spy.calls) == 2


def test_delay_runs_after_wait(scheduler: ub.Scheduler, clock: ManualClock) -> None:
    """The call happens once the scheduler reaches its deadline."""
    spy = Counter()
    assert ub.delay(spy, 100, "a", "b") is None
    assert spy.calls == []
    clock.advance_ms(50)
    scheduler.run(blocking=False)
    assert spy.calls == []
    clock.advance_ms(60)
    scheduler.run(blocking=False)
    assert spy.calls == [(("a", "b"), {})]


def test_delay_orders_by_deadline(scheduler: ub.Scheduler) -> None:
    """Earliest deadline fires first, ties keep scheduling order."""
    order: list[str] = []
    ub.delay(order.append, 30, "late")
    ub.delay(order.append, 10, "early")
    ub.delay(order.append, 10, "early-bis")
    scheduler.run()
    assert order == ["early", "early-bis", "late"]


def test_delay_errors_surface_from_the_scheduler(scheduler: ub.Scheduler) -> None:
    """delay reports nothing; the exception escapes whoever runs the loop."""

    def _boom() -> None:
        msg = "boom"
        raise ValueError(msg)

    ub.delay(_boom, 0)
    with pytest.raises(ValueError, match="boom"):
        scheduler.run()


def test_throttle_fires_leading_call_and_drops_the_rest(
    scheduler: ub.Scheduler, clock: ManualClock
) -> None:
    """Calls inside the window are dropped and return the last result."""
    spy = Counter()
    throttled = ub.throttle(spy, 100)
    assert throttled(1) == (1,)
    clock.advance_ms(40)
    assert throttled(2) == (1,)
    clock.advance_ms(59)
    assert throttled(3) == (1,)
    assert spy.calls == [((1,), {})]
    assert scheduler.pending() == 0


def test_throttle_fires_again_after_the_window(
    scheduler: ub.Scheduler, clock: ManualClock
) -> None:
    """The first call of a new quiet period fires immediately."""
    spy = Counter()
    throttled = ub.throttle(spy, 100)
    throttled("a")
    clock.advance_ms(150)
    assert throttled("b") == ("b",)
    assert spy.calls == [(("a",), {}), (("b",), {})]
    assert scheduler.pending() == 0


def test_throttle_trailing_replays_latest_dropped_call(
    scheduler: ub.Scheduler, clock: ManualClock
) -> None:
    """With trailing, the last dropped call fires when the window closes."""
    spy = Counter()
    throttled = ub.throttle(spy, 100, trailing=True)
    throttled(1)
    clock.advance_ms(10)
    throttled(2)
    throttled(3)
    assert scheduler.pending() == 1
    scheduler.run()
    assert clock.now == pytest.approx(0.1)
    assert spy.calls == [((1,), {}), ((3,), {})]


def test_throttle_trailing_superseded_by_new_leading_call(
    scheduler: ub.Scheduler, clock: ManualClock
) -> None:
    """A pending trailing call is discarded if a leading call fires first."""
    spy = Counter()
    throttled = ub.throttle(spy, 100, trailing=True)
    throttled(1)
    clock.advance_ms(10)
    throttled(2)
    clock.advance_ms(200)
    throttled(3)
    scheduler.run()
    assert spy.calls == [((1,), {}), ((3,), {})]


@pytest.mark.usefixtures("scheduler")
def test_throttle_keeps_metadata() -> None:
    """The wrapper keeps the wrapped function name and returns its results."""
    throttled = ub.throttle(len, 10)
    assert throttled.__name__ == "len"
    assert throttled("abc") == 3
    assert throttled("abcdef") == 3


def test_throttle_stale_trailing_flush_does_not_fire_early(
    scheduler: ub.Scheduler, clock: ManualClock
) -> None:
    """A flush left over from an earlier window never fires a later dropped call."""
    spy = Counter()
    throttled = ub.throttle(spy, 100, trailing=True)
    throttled(1)
    clock.advance_ms(10)
    throttled(2)
    clock.advance_ms(200)
    throttled(3)
    clock.advance_ms(5)
    throttled(4)
    scheduler.run(blocking=False)
    assert spy.calls == [((1,), {}), ((3,), {})]
    assert scheduler.pending() == 1
    clock.advance_ms(100)
    scheduler.run(blocking=False)
    assert spy.calls == [((1,), {}), ((3,), {}), ((4,), {})]
    assert scheduler.pending() == 0


def test_throttle_uses_the_current_scheduler(
    scheduler: ub.Scheduler, clock: ManualClock
) -> None:
    """A scheduler installed after decoration receives the trailing call."""
    spy = Counter()
    throttled = ub.throttle(spy, 100, trailing=True)
    replacement = ub.Scheduler(clock.time, clock.sleep)
    ub.set_config(scheduler=replacement)
    throttled(1)
    clock.advance_ms(10)
    throttled(2)
    assert scheduler.pending() == 0
    assert replacement.pending() == 1
    replacement.run()
    assert spy.calls == [((1,), {}), ((2,), {})]
