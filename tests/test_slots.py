"""Tests for slot usage in underbar classes."""

import underbar as ub


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ub.chain([]))
    assert _check_slots(ub.Scheduler())
    assert _check_slots(ub.get_config())


def test_chain_reuses_base_slot() -> None:
    """Chain adds no slot of its own, the wrapped value lives in the base slot."""
    assert ub.Chain.__slots__ == ()
    chained = ub.chain([1])
    assert chained.inner() == [1]
