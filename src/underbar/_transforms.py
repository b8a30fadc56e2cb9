"""Predicates and transforms derived from the iteration kernel."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz
import more_itertools as mit

from ._kernel import each, reduce

if TYPE_CHECKING:
    from ._types import Collection, Predicate


def identity[T](value: T) -> T:
    """Return **value** unchanged.

    Used as the default predicate or key wherever the caller does not provide one.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.identity(42)
    42

    ```
    """
    return value


def get_field(item: Any, key: Any) -> Any:  # noqa: ANN401
    """Read **key** from **item**: item lookup on mappings or non-string keys, attribute lookup otherwise."""
    if isinstance(item, Mapping) or not isinstance(key, str):
        return item[key]
    return getattr(item, key)


def key_function(key: Any) -> Callable[[Any], Any]:  # noqa: ANN401
    """Turn a key function or a field name into a key function."""
    if callable(key):
        return key
    return lambda item: get_field(item, key)


@overload
def first[T](sequence: Sequence[T]) -> T | None: ...
@overload
def first[T](sequence: Sequence[T], n: int) -> list[T]: ...
def first[T](sequence: Sequence[T], n: int | None = None) -> T | None | list[T]:
    """Return the first element of **sequence**, or a list of its first **n** elements.

    Args:
        sequence (Sequence[T]): The sequence to read from.
        n (int | None): How many elements to take. If omitted, return the first element alone, or `None` when empty.

    Returns:
        T | None | list[T]: The first element, or a list of up to **n** elements.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.first([1, 2, 3])
    1
    >>> ub.first([1, 2, 3], 2)
    [1, 2]
    >>> ub.first([], 2)
    []

    ```
    """
    if n is None:
        return next(iter(sequence), None)
    return list(cz.itertoolz.take(max(n, 0), sequence))


@overload
def last[T](sequence: Sequence[T]) -> T | None: ...
@overload
def last[T](sequence: Sequence[T], n: int) -> list[T]: ...
def last[T](sequence: Sequence[T], n: int | None = None) -> T | None | list[T]:
    """Return the last element of **sequence**, or a list of its last **n** elements.

    Asking for more elements than available returns a copy of the whole sequence.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.last([1, 2, 3])
    3
    >>> ub.last([1, 2, 3], 2)
    [2, 3]
    >>> ub.last([1, 2, 3], 5)
    [1, 2, 3]
    >>> ub.last([]) is None
    True

    ```
    """
    if n is None:
        return sequence[-1] if sequence else None
    if n <= 0:
        return []
    return list(cz.itertoolz.tail(n, sequence))


def map[V, R](collection: Collection[Any, V], iterator: Callable[[V], R]) -> list[R]:  # noqa: A001
    """Return the results of applying **iterator** to each element of **collection**.

    Mappings contribute their values. The input is never modified.

    Args:
        collection (Collection[Any, V]): A sequence or a mapping.
        iterator (Callable[[V], R]): Function applied to each value.

    Returns:
        list[R]: One result per element, in traversal order.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.map([1, 2, 3], lambda x: x * 2)
    [2, 4, 6]
    >>> ub.map({"a": 1, "b": 2}, str)
    ['1', '2']

    ```
    """
    results: list[R] = []
    each(collection, lambda value, *_: results.append(iterator(value)))
    return results


def filter[V](collection: Collection[Any, V], predicate: Predicate[V]) -> list[V]:  # noqa: A001
    """Return the elements of **collection** for which **predicate** is truthy.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.filter([1, 2, 3, 4], lambda x: x % 2 == 0)
    [2, 4]

    ```
    """
    kept: list[V] = []

    def _keep(value: V, *_: object) -> None:
        if predicate(value):
            kept.append(value)

    each(collection, _keep)
    return kept


def reject[V](collection: Collection[Any, V], predicate: Predicate[V]) -> list[V]:
    """Return the elements of **collection** for which **predicate** is falsy.

    The complement of `filter`: together they partition **collection**.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.reject([1, 2, 3, 4], lambda x: x % 2 == 0)
    [1, 3]

    ```
    """
    return filter(collection, lambda value: not predicate(value))


def every[V](collection: Collection[Any, V], predicate: Predicate[V] = identity) -> bool:
    """Return True if **predicate** is truthy for every element.

    An empty collection passes.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.every([2, 4, 6], lambda x: x % 2 == 0)
    True
    >>> ub.every([1, 0, 1])
    False
    >>> ub.every([])
    True

    ```
    """
    return reduce(
        collection, lambda passed, value: passed and bool(predicate(value)), True
    )


def some[V](collection: Collection[Any, V], predicate: Predicate[V] = identity) -> bool:
    """Return True if **predicate** is truthy for at least one element.

    An empty collection fails.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.some([1, 3, 4], lambda x: x % 2 == 0)
    True
    >>> ub.some([0, None, ""])
    False

    ```
    """
    found = False

    def _check(value: V, *_: object) -> None:
        nonlocal found
        found = bool(predicate(value)) or found

    each(collection, _check)
    return found


def contains(collection: Collection[Any, Any], target: object) -> bool:
    """Return True if any element of **collection** equals **target**.

    Mappings are searched by value.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.contains([1, 2, 3], 2)
    True
    >>> ub.contains({"a": 1}, "a")
    False

    ```
    """
    return reduce(
        collection, lambda found, item: found or bool(item == target), False
    )


def index_of(sequence: Sequence[Any], target: object) -> int:
    """Return the index of the first element equal to **target**, or -1 if there is none.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.index_of([10, 20, 10], 10)
    0
    >>> ub.index_of([10, 20], 30)
    -1

    ```
    """
    result = -1

    def _match(item: object, index: int, _: object) -> None:
        nonlocal result
        if result == -1 and item == target:
            result = index

    each(sequence, _match)
    return result


def pluck(collection: Collection[Any, Any], key: Any) -> list[Any]:  # noqa: ANN401
    """Return the **key** field of every element.

    Mapping elements are read by item, other objects by attribute.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.pluck([{"age": 30}, {"age": 40}], "age")
    [30, 40]

    ```
    """
    return map(collection, lambda item: get_field(item, key))


def uniq[T](
    sequence: Collection[Any, T], key: Callable[[T], Any] | Any | None = None  # noqa: ANN401
) -> list[T]:
    """Return the elements of **sequence** without duplicates, keeping first occurrences in order.

    Unhashable elements (lists, dicts) are supported.

    Args:
        sequence (Collection[Any, T]): The elements to deduplicate.
        key (Callable[[T], Any] | Any | None): Function or field name computing the value compared for equality. Defaults to the element itself.

    Returns:
        list[T]: The distinct elements.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.uniq([1, 2, 1, 3, 2])
    [1, 2, 3]
    >>> ub.uniq(["a", "B", "b", "A"], str.lower)
    ['a', 'B']
    >>> ub.uniq([{"id": 1}, {"id": 1, "x": 0}, {"id": 2}], "id")
    [{'id': 1}, {'id': 2}]

    ```
    """
    values = map(sequence, identity)
    if key is None:
        return list(mit.unique_everseen(values))
    return list(mit.unique_everseen(values, key=key_function(key)))
