from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping, Sequence
from typing import TYPE_CHECKING, Any, Concatenate, overload

from . import _arrays, _kernel, _objects, _transforms
from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._types import EachFn, Predicate, ReduceFn


class Chain[T](CommonBase[T]):
    """A wrapper exposing underbar's collection operations as chainable methods.

    Each transforming method returns a new `Chain` around the result; predicates and folds return plain values.

    Call `.inner()` to get the wrapped value back.

    Create one with `underbar.chain()`.

    Args:
        data (T): The collection to wrap.

    Example:
    ```python
    >>> import underbar as ub
    >>> (
    ...     ub.chain([[3, 1], [2, [1]]])
    ...     .flatten()
    ...     .uniq()
    ...     .sort_by(ub.identity)
    ...     .map(lambda x: x * 10)
    ...     .inner()
    ... )
    [10, 20, 30]

    ```
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().chain_repr(self._inner)})"

    def _new[**P, U](
        self, func: Callable[Concatenate[Any, P], U], *args: P.args, **kwargs: P.kwargs
    ) -> Chain[U]:
        return Chain(func(self._inner, *args, **kwargs))

    def each(self, iterator: EachFn[Any, Any]) -> Chain[T]:
        """Call `iterator(value, key, collection)` for each element, then return `self`.

        See `underbar.each`.
        """
        _kernel.each(self._inner, iterator)  # type: ignore[arg-type]
        return self

    @overload
    def reduce(self, iterator: ReduceFn[Any, Any]) -> Any: ...  # noqa: ANN401
    @overload
    def reduce[A](self, iterator: ReduceFn[A, Any], seed: A) -> A: ...
    def reduce(self, iterator: ReduceFn[Any, Any], seed: Any = _kernel.MISSING) -> Any:  # noqa: ANN401
        """Fold the wrapped collection into a single value. See `underbar.reduce`.

        ```python
        >>> import underbar as ub
        >>> ub.chain({"a": 1, "b": 2}).reduce(lambda acc, v: acc + v, 10)
        13

        ```
        """
        return _kernel.reduce(self._inner, iterator, seed)  # type: ignore[arg-type]

    def map[R](self, iterator: Callable[[Any], R]) -> Chain[list[R]]:
        return self._new(_transforms.map, iterator)

    def filter(self, predicate: Predicate[Any]) -> Chain[list[Any]]:
        return self._new(_transforms.filter, predicate)

    def reject(self, predicate: Predicate[Any]) -> Chain[list[Any]]:
        return self._new(_transforms.reject, predicate)

    def pluck(self, key: Any) -> Chain[list[Any]]:  # noqa: ANN401
        return self._new(_transforms.pluck, key)

    def uniq(self, key: Callable[[Any], Any] | Any | None = None) -> Chain[list[Any]]:  # noqa: ANN401
        return self._new(_transforms.uniq, key)

    def first(self, n: int) -> Chain[list[Any]]:
        """Keep the first **n** elements. See `underbar.first`."""
        return self._new(_transforms.first, n)

    def last(self, n: int) -> Chain[list[Any]]:
        """Keep the last **n** elements. See `underbar.last`."""
        return self._new(_transforms.last, n)

    def every(self, predicate: Predicate[Any] = _transforms.identity) -> bool:
        return _transforms.every(self._inner, predicate)  # type: ignore[arg-type]

    def some(self, predicate: Predicate[Any] = _transforms.identity) -> bool:
        return _transforms.some(self._inner, predicate)  # type: ignore[arg-type]

    def contains(self, target: object) -> bool:
        return _transforms.contains(self._inner, target)  # type: ignore[arg-type]

    def index_of(self, target: object) -> int:
        return _transforms.index_of(self._inner, target)  # type: ignore[arg-type]

    def extend(self, *sources: Mapping[Any, Any]) -> Chain[MutableMapping[Any, Any]]:
        """Merge **sources** into the wrapped mapping, in place. See `underbar.extend`.

        ```python
        >>> import underbar as ub
        >>> ub.chain({"a": 1}).extend({"b": 2}).defaults({"a": 0, "c": 3})
        Chain({'a': 1, 'b': 2, 'c': 3})

        ```
        """
        return self._new(_objects.extend, *sources)

    def defaults(self, *sources: Mapping[Any, Any]) -> Chain[MutableMapping[Any, Any]]:
        return self._new(_objects.defaults, *sources)

    def shuffle(self) -> Chain[list[Any]]:
        return self._new(_arrays.shuffle)

    def invoke(
        self,
        method_or_fn: str | Callable[..., Any],
        *args: Any,  # noqa: ANN401
    ) -> Chain[list[Any]]:
        return self._new(_arrays.invoke, method_or_fn, *args)

    def sort_by(self, key: Callable[[Any], Any] | Any) -> Chain[list[Any]]:  # noqa: ANN401
        return self._new(_arrays.sort_by, key)

    def flatten(self) -> Chain[list[Any]]:
        return self._new(_arrays.flatten)

    def zip(self, *others: Sequence[Any]) -> Chain[list[tuple[Any, ...]]]:
        """Zip the wrapped sequence with **others**. See `underbar.zip`."""
        return self._new(_arrays.zip, *others)

    def intersection(self, *others: Sequence[Any]) -> Chain[list[Any]]:
        return self._new(_arrays.intersection, *others)

    def difference(self, *others: Sequence[Any]) -> Chain[list[Any]]:
        return self._new(_arrays.difference, *others)


def chain[T](data: T) -> Chain[T]:
    """Wrap **data** in a `Chain`.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.chain([1, 2, 3, 4]).reject(lambda x: x % 2).map(str).inner()
    ['2', '4']

    ```
    """
    return Chain(data)
