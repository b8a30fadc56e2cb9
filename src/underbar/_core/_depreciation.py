import warnings
from collections.abc import Callable
from functools import wraps


def renamed[**P, R](func: Callable[P, R], old_name: str) -> Callable[P, R]:
    """Keep **func** reachable under its legacy camelCase name, with a `DeprecationWarning`."""
    msg = f"`{old_name}` is deprecated, use `{func.__name__}` instead."

    @wraps(func)
    def alias(*args: P.args, **kwargs: P.kwargs) -> R:
        warnings.warn(msg, DeprecationWarning, stacklevel=2)
        return func(*args, **kwargs)

    alias.__name__ = alias.__qualname__ = old_name
    return alias
