"""Shared fixtures: a manual clock driving the scheduler, and config isolation."""

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

import underbar as ub


@dataclass(slots=True)
class ManualClock:
    """A clock that only moves when told to, in seconds."""

    now: float = 0.0

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000


@pytest.fixture(autouse=True)
def _isolated_config() -> Iterator[None]:
    previous = ub.get_config()
    yield
    ub.reset_config(previous)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def scheduler(clock: ManualClock) -> ub.Scheduler:
    scheduler = ub.Scheduler(clock.time, clock.sleep)
    ub.set_config(scheduler=scheduler)
    return scheduler
