from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Any

from ._format import value_repr
from ._scheduler import Scheduler


@dataclass(slots=True)
class UnderbarConfig:
    """Process-wide settings shared by every underbar operation.

    Read it with `get_config()`, change it with `set_config()`.
    """

    scheduler: Scheduler = field(default_factory=Scheduler)
    """Deferred-callback facility used by `delay` and `throttle`."""
    rng: random.Random = field(default_factory=random.Random)
    """Randomness source used by `shuffle`."""
    max_repr_items: int = 20
    """Maximum number of items shown by `Chain.__repr__`."""
    repr_depth: int = 3
    """Maximum nesting depth shown by `Chain.__repr__`."""
    repr_width: int = 80
    """Line width used by `Chain.__repr__`."""

    def chain_repr(self, value: object) -> str:
        return value_repr(
            value, self.max_repr_items, self.repr_depth, self.repr_width
        )


_CONFIG = UnderbarConfig()


def get_config() -> UnderbarConfig:
    """Return the current configuration."""
    return _CONFIG


def set_config(**changes: Any) -> UnderbarConfig:  # noqa: ANN401
    """Replace fields of the current configuration.

    Args:
        **changes (Any): Field names of `UnderbarConfig` and their new values.

    Returns:
        UnderbarConfig: The previous configuration, to be given back to `reset_config()`.

    Example:
    ```python
    >>> import random
    >>> import underbar as ub
    >>> previous = ub.set_config(rng=random.Random(0), max_repr_items=2)
    >>> ub.get_config().max_repr_items
    2
    >>> ub.reset_config(previous)
    >>> ub.get_config().max_repr_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(_CONFIG, **changes)
    return previous


def reset_config(config: UnderbarConfig | None = None) -> None:
    """Install **config**, or a fresh default configuration if omitted."""
    global _CONFIG  # noqa: PLW0603
    _CONFIG = UnderbarConfig() if config is None else config
