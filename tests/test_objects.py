"""Tests for extend and defaults."""

from collections import UserDict

import underbar as ub


def test_extend_mutates_and_returns_base() -> None:
    """The same object comes back, updated."""
    base = {"a": 1}
    result = ub.extend(base, {"b": 2})
    assert result is base
    assert base == {"a": 1, "b": 2}


def test_extend_later_sources_win() -> None:
    """Sources apply left to right and overwrite base keys."""
    base = {"a": 1, "b": 1}
    ub.extend(base, {"a": 2, "c": 2}, {"a": 3})
    assert base == {"a": 3, "b": 1, "c": 2}


def test_extend_without_sources_is_a_no_op() -> None:
    """Nothing to copy, nothing changes."""
    base = {"a": 1}
    assert ub.extend(base) == {"a": 1}


def test_extend_skips_non_mapping_sources() -> None:
    """Arguments that are not mappings are ignored."""
    base = {"a": 1}
    ub.extend(base, None, {"b": 2}, 42)  # type: ignore[arg-type]
    assert base == {"a": 1, "b": 2}


def test_extend_accepts_any_mutable_mapping() -> None:
    """Base and sources only need the mapping protocols."""
    base = UserDict({"a": 1})
    ub.extend(base, UserDict({"b": 2}))
    assert dict(base) == {"a": 1, "b": 2}


def test_defaults_never_overwrites_existing_values() -> None:
    """Keys already set in base are kept."""
    base = {"a": 1}
    result = ub.defaults(base, {"a": 2, "b": 2})
    assert result is base
    assert base == {"a": 1, "b": 2}


def test_defaults_first_source_wins() -> None:
    """Among sources, the first one providing a key sets it."""
    base: dict[str, int] = {}
    ub.defaults(base, {"a": 1}, {"a": 2, "b": 2}, {"b": 3})
    assert base == {"a": 1, "b": 2}


def test_defaults_fills_none_values() -> None:
    """A key holding None counts as absent."""
    base = {"a": None, "b": 0, "c": ""}
    ub.defaults(base, {"a": 1, "b": 1, "c": "x"})
    assert base == {"a": 1, "b": 0, "c": ""}
