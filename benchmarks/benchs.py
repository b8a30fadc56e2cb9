"""Benchmarks for underbar - benchs.py."""

import random
from dataclasses import dataclass

import underbar as ub

from ._registery import bench


@dataclass(slots=True)
class Point:  # noqa: D101
    x: int
    y: int


def _nested(size: range) -> list[object]:
    return [[x, [x, (x,)]] for x in size]


def _points(size: range) -> list[Point]:
    rng = random.Random(size.stop)
    return [Point(rng.randrange(100), x) for x in size]


def _with_duplicates(size: range) -> list[int]:
    return [x % 64 for x in size]


# Benchmark classes
# ------------------------------------------------------------


class Kernel:
    """Benchmark the two traversal primitives."""

    @bench()
    @staticmethod
    def each(data: list[int]) -> object:
        """Benchmark each over a list."""
        return ub.each(data, lambda value, *_: value * 2)

    @bench(gen=lambda size: {str(x): x for x in size})
    @staticmethod
    def each_mapping(data: dict[str, int]) -> object:
        """Benchmark each over a dict."""
        return ub.each(data, lambda value, *_: value * 2)

    @bench()
    @staticmethod
    def reduce_seeded(data: list[int]) -> object:
        """Benchmark reduce with a seed."""
        return ub.reduce(data, lambda acc, x: acc + x, 0)

    @bench()
    @staticmethod
    def reduce_unseeded(data: list[int]) -> object:
        """Benchmark reduce without seed."""
        return ub.reduce(data, lambda acc, x: acc + x)


class Transforms:
    """Benchmark operations derived from the kernel."""

    @bench()
    @staticmethod
    def map(data: list[int]) -> object:
        """Benchmark map."""
        return ub.map(data, lambda x: x + 1)

    @bench()
    @staticmethod
    def filter(data: list[int]) -> object:
        """Benchmark filter."""
        return ub.filter(data, lambda x: x % 2)

    @bench()
    @staticmethod
    def reject(data: list[int]) -> object:
        """Benchmark reject, delegating to filter."""
        return ub.reject(data, lambda x: x % 2)

    @bench()
    @staticmethod
    def contains_missing(data: list[int]) -> object:
        """Benchmark contains on a value that is not there."""
        return ub.contains(data, -1)

    @bench(gen=_with_duplicates)
    @staticmethod
    def uniq(data: list[int]) -> object:
        """Benchmark uniq with hashable duplicates."""
        return ub.uniq(data)

    @bench(gen=lambda size: [[x % 64] for x in size])
    @staticmethod
    def uniq_unhashable(data: list[list[int]]) -> object:
        """Benchmark uniq on lists, without hashing."""
        return ub.uniq(data)


class Arrays:
    """Benchmark the array algorithms."""

    @bench()
    @staticmethod
    def shuffle(data: list[int]) -> object:
        """Benchmark shuffle."""
        return ub.shuffle(data)

    @bench(gen=_points)
    @staticmethod
    def sort_by_field(data: list[Point]) -> object:
        """Benchmark sort_by with a field name, on a fresh copy."""
        return ub.sort_by(list(data), "x")

    @bench(gen=_nested)
    @staticmethod
    def flatten(data: list[object]) -> object:
        """Benchmark flatten on three nesting levels."""
        return ub.flatten(data)

    @bench(gen=lambda size: (list(size), list(size)[::2]))
    @staticmethod
    def intersection(data: tuple[list[int], list[int]]) -> object:
        """Benchmark intersection of two lists."""
        return ub.intersection(*data)

    @bench(gen=lambda size: (list(size), list(size)[::2]))
    @staticmethod
    def difference(data: tuple[list[int], list[int]]) -> object:
        """Benchmark difference of two lists."""
        return ub.difference(*data)


class Decorators:
    """Benchmark calls through decorated functions."""

    @bench()
    @staticmethod
    def memoize_hits(data: list[int]) -> object:
        """Benchmark memoize when every call after the first hits the cache."""
        cached = ub.memoize(lambda x: x * x)
        return ub.map(data, lambda _: cached(7))

    @bench(gen=_with_duplicates)
    @staticmethod
    def memoize_mixed(data: list[int]) -> object:
        """Benchmark memoize with a mix of hits and misses."""
        cached = ub.memoize(lambda x: x * x)
        return ub.map(data, cached)

    @bench()
    @staticmethod
    def once(data: list[int]) -> object:
        """Benchmark repeated calls of a once-guarded function."""
        guarded = ub.once(lambda x: x)
        return ub.map(data, guarded)
