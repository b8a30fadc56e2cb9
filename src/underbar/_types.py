from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol

# collection shapes

type Collection[K, V] = Mapping[K, V] | Iterable[V]
"""Either a mapping (traversed by key) or any other iterable (traversed by index)."""

type Nested[T] = T | list[Nested[T]] | tuple[Nested[T], ...]

# callback shapes

type EachFn[K, V] = Callable[[V, K, Any], object]
"""Callback of `each`: `(value, key_or_index, collection)`."""

type ReduceFn[A, V] = Callable[[A, V], A]
"""Callback of `reduce`: `(accumulator, value) -> accumulator`."""

type Predicate[T] = Callable[[T], object]
"""Any function whose result is read for truthiness."""

# typeshed protocols


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


type SupportsRichComparison = SupportsDunderLT[Any] | SupportsDunderGT[Any]
