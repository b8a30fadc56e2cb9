from collections.abc import Mapping
from itertools import islice
from pprint import pformat


def value_repr(
    v: object,
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    match v:
        case Mapping():
            truncated: object = dict(islice(v.items(), max_items))
            size = len(v)
        case list() | tuple():
            truncated = type(v)(v[:max_items])
            size = len(v)
        case _:
            return pformat(v, depth=depth, width=width, compact=compact, sort_dicts=False)
    suffix = "..." if size > max_items else ""
    return (
        pformat(truncated, depth=depth, width=width, compact=compact, sort_dicts=False)
        + suffix
    )
