from ._arrays import (
    difference,
    flatten,
    intersection,
    invoke,
    shuffle,
    sort_by,
    zip,  # noqa: A004
)
from ._chain import Chain, chain
from ._core import (
    Scheduler,
    UnderbarConfig,
    get_config,
    renamed,
    reset_config,
    set_config,
)
from ._decorators import delay, memoize, once, throttle
from ._kernel import each, reduce
from ._objects import defaults, extend
from ._transforms import (
    contains,
    every,
    filter,  # noqa: A004
    first,
    identity,
    index_of,
    last,
    map,  # noqa: A004
    pluck,
    reject,
    some,
    uniq,
)

indexOf = renamed(index_of, "indexOf")  # noqa: N816
sortBy = renamed(sort_by, "sortBy")  # noqa: N816

__all__ = [
    "Chain",
    "Scheduler",
    "UnderbarConfig",
    "chain",
    "contains",
    "defaults",
    "delay",
    "difference",
    "each",
    "every",
    "extend",
    "filter",
    "first",
    "flatten",
    "get_config",
    "identity",
    "indexOf",
    "index_of",
    "intersection",
    "invoke",
    "last",
    "map",
    "memoize",
    "once",
    "pluck",
    "reduce",
    "reject",
    "reset_config",
    "set_config",
    "shuffle",
    "some",
    "sortBy",
    "sort_by",
    "throttle",
    "uniq",
    "zip",
]
