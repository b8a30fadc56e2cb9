"""Merging helpers for mutable mappings."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

import cytoolz as cz


def _mappings(sources: tuple[object, ...]) -> list[Mapping[Any, Any]]:
    return [source for source in sources if isinstance(source, Mapping)]


def extend[K, V](
    base: MutableMapping[K, V], *sources: Mapping[K, V]
) -> MutableMapping[K, V]:
    """Copy every key of each source into **base**, and return **base**.

    Sources are applied left to right: later ones overwrite earlier ones and the existing keys of **base**.

    Arguments that are not mappings are skipped.

    Args:
        base (MutableMapping[K, V]): The mapping to update in place.
        *sources (Mapping[K, V]): The mappings to copy from.

    Returns:
        MutableMapping[K, V]: **base** itself.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.extend({"a": 1}, {"b": 2}, {"a": 3})
    {'a': 3, 'b': 2}

    ```
    """
    base.update(cz.dicttoolz.merge(*_mappings(sources)))
    return base


def defaults[K, V](
    base: MutableMapping[K, V], *sources: Mapping[K, V]
) -> MutableMapping[K, V]:
    """Fill in the keys of **base** that are missing or `None`, and return **base**.

    Keys already holding a value are never overwritten. Among sources, the first one providing a key wins.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.defaults({"a": 1, "b": None}, {"a": 9, "b": 2}, {"b": 3, "c": 4})
    {'a': 1, 'b': 2, 'c': 4}

    ```
    """
    for source in _mappings(sources):
        for key, value in source.items():
            if base.get(key) is None:
                base[key] = value
    return base
