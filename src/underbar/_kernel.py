"""Iteration kernel: the only two operations holding a traversal loop.

Every other collection operation is expressed through `each` or `reduce`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import singledispatch
from typing import TYPE_CHECKING, Any, Final, overload

if TYPE_CHECKING:
    from ._types import Collection, EachFn, ReduceFn


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Final = _Missing()
"""Sentinel telling an omitted argument apart from an explicit `None`."""


@singledispatch
def entries(collection: Iterable[Any]) -> Iterator[tuple[Any, Any]]:
    """Yield `(key, value)` pairs: indices for sequences, keys for mappings.

    The shape of **collection** is resolved here, through the `Mapping` ABC.
    """
    return enumerate(collection)


@entries.register(Mapping)
def _(collection: Mapping[Any, Any]) -> Iterator[tuple[Any, Any]]:
    return iter(collection.items())


def each[K, V](collection: Collection[K, V], iterator: EachFn[K, V]) -> None:
    """Call `iterator(value, key, collection)` for each element of **collection**.

    Sequences are visited in index order, with the index as key.

    Mappings are visited once per key, in the mapping's own iteration order.

    Args:
        collection (Collection[K, V]): A sequence or a mapping.
        iterator (EachFn[K, V]): Callback receiving `(value, key_or_index, collection)`. Its return value is ignored.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.each(["a", "b"], lambda value, idx, _: print(idx, value))
    0 a
    1 b
    >>> ub.each({"x": 1}, lambda value, key, coll: print(key, value, coll))
    x 1 {'x': 1}

    ```
    """
    for key, value in entries(collection):
        iterator(value, key, collection)


@overload
def reduce[V](collection: Collection[Any, V], iterator: ReduceFn[V, V]) -> V | None: ...
@overload
def reduce[A, V](
    collection: Collection[Any, V], iterator: ReduceFn[A, V], seed: A
) -> A: ...
def reduce[A, V](
    collection: Collection[Any, V],
    iterator: ReduceFn[A | V, V],
    seed: A | _Missing = MISSING,
) -> A | V | None:
    """Fold **collection** into a single value by calling `iterator(accumulator, value)` for each element.

    If **seed** is omitted, the first element becomes the accumulator and is never passed to **iterator**.

    Presence decides, not value: `seed=None` is a real seed.

    An empty collection without seed returns `None`.

    Args:
        collection (Collection[Any, V]): A sequence or a mapping (folded over its values).
        iterator (ReduceFn[A | V, V]): Function `(accumulator, value) -> accumulator`.
        seed (A): Starting value of the accumulator.

    Returns:
        A | V | None: The final accumulator.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.reduce([1, 2, 3], lambda total, n: total + n, 0)
    6
    >>> ub.reduce([5], lambda total, n: total + n * n)
    5
    >>> ub.reduce({"a": 1, "b": 2}, lambda total, n: total + n)
    3
    >>> ub.reduce([], lambda total, n: total + n) is None
    True

    ```
    """
    values = (value for _, value in entries(collection))
    if isinstance(seed, _Missing):
        accumulator: A | V | None = next(values, None)
    else:
        accumulator = seed
    for value in values:
        accumulator = iterator(accumulator, value)
    return accumulator
