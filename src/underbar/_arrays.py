"""Array algorithms composed from the kernel and the derived transforms."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from ._core import get_config
from ._kernel import each
from ._transforms import (
    contains,
    every,
    filter,  # noqa: A004
    identity,
    key_function,
    map,  # noqa: A004
    reject,
    some,
    uniq,
)

if TYPE_CHECKING:
    from ._types import Collection, Nested, SupportsRichComparison


def shuffle[T](sequence: Collection[Any, T]) -> list[T]:
    """Return a new list holding the elements of **sequence** in random order.

    Every permutation is equally likely (Fisher-Yates, through the configured `random.Random`).

    The input is left untouched.

    Example:
    ```python
    >>> import underbar as ub
    >>> data = [1, 2, 3, 4]
    >>> sorted(ub.shuffle(data))
    [1, 2, 3, 4]
    >>> data
    [1, 2, 3, 4]

    ```
    """
    shuffled = map(sequence, identity)
    get_config().rng.shuffle(shuffled)
    return shuffled


def invoke(
    collection: Collection[Any, Any],
    method_or_fn: str | Callable[..., Any],
    *args: Any,  # noqa: ANN401
) -> list[Any]:
    """Call a method on each element, or pass each element to a function, and return the results.

    Args:
        collection (Collection[Any, Any]): The elements to call on.
        method_or_fn (str | Callable[..., Any]): A method name, looked up on each element, or a function receiving the element first.
        *args (Any): Extra arguments forwarded to every call.

    Returns:
        list[Any]: One result per element.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.invoke(["a", "b"], "upper")
    ['A', 'B']
    >>> ub.invoke(["a-b", "c-d"], "split", "-")
    [['a', 'b'], ['c', 'd']]
    >>> ub.invoke([[3, 1], [2]], sorted)
    [[1, 3], [2]]

    ```
    """
    if isinstance(method_or_fn, str):
        return map(collection, lambda item: getattr(item, method_or_fn)(*args))
    return map(collection, lambda item: method_or_fn(item, *args))


def sort_by[T](
    collection: Collection[Any, T],
    key: Callable[[T], SupportsRichComparison] | Any,  # noqa: ANN401
) -> list[T]:
    """Sort elements in ascending order of a key, keeping equal elements in input order.

    **key** is either a function applied to each element, or a field name (item lookup on mappings, attribute otherwise).

    A `list` is sorted in place and returned. Any other collection is copied into a new sorted list.

    Example:
    ```python
    >>> import underbar as ub
    >>> people = [{"name": "moe", "age": 40}, {"name": "curly", "age": 30}]
    >>> ub.pluck(ub.sort_by(people, "age"), "name")
    ['curly', 'moe']
    >>> ub.sort_by(("bb", "a", "cc"), len)
    ['a', 'bb', 'cc']

    ```
    """
    if isinstance(collection, list):
        collection.sort(key=key_function(key))
        return collection
    return sorted(map(collection, identity), key=key_function(key))


def zip(*sequences: Sequence[Any]) -> list[tuple[Any, ...]]:  # noqa: A001
    """Group the elements of each sequence by index, up to the longest sequence.

    Shorter sequences are padded with `None`.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.zip(["a", "b", "c", "d"], [1, 2, 3])
    [('a', 1), ('b', 2), ('c', 3), ('d', None)]

    ```
    """
    return list(itertools.zip_longest(*sequences))


def flatten[T](nested: Nested[T]) -> list[T]:
    """Expand nested lists and tuples, at any depth, into one flat list.

    Order is depth-first, left to right. Any other element (strings, mappings, sets) is kept as is.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.flatten([1, [2, [3, [4]], 5]])
    [1, 2, 3, 4, 5]
    >>> ub.flatten([("ab", {"k": 1}), []])
    ['ab', {'k': 1}]

    ```
    """
    flat: list[T] = []

    def _visit(element: Any, *_: object) -> None:  # noqa: ANN401
        if isinstance(element, list | tuple):
            each(element, _visit)
        else:
            flat.append(element)

    each(nested, _visit)
    return flat


def intersection[T](*sequences: Sequence[T]) -> list[T]:
    """Return the values present in every sequence, without duplicates.

    Values keep the order of their first occurrence in the first sequence.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.intersection([1, 2, 3, 2], [2, 3, 4], [3, 2])
    [2, 3]
    >>> ub.intersection()
    []

    ```
    """
    if not sequences:
        return []
    head, *others = sequences
    shared = filter(head, lambda value: every(others, lambda seq: contains(seq, value)))
    return uniq(shared)


def difference[T](sequence: Sequence[T], *others: Sequence[T]) -> list[T]:
    """Return the elements of **sequence** found in none of the **others**.

    Duplicates within **sequence** are kept.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.difference([1, 2, 3, 4], [2, 4])
    [1, 3]
    >>> ub.difference([1, 1, 2], [3], [2])
    [1, 1]

    ```
    """
    return reject(sequence, lambda value: some(others, lambda seq: contains(seq, value)))
