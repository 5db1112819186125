"""Tests for the name/value store."""

import pytest

from lust.runtime.types import Env, UndefinedName


def test_get_unset_name_fails():
    env = Env.initial()
    with pytest.raises(UndefinedName) as exc:
        env.get("bar")
    assert exc.value.name == "bar"
    assert "bar" in str(exc.value)


def test_set_returns_value_and_get_sees_it():
    env = Env.initial()
    assert env.set("bar", 3) == 3
    assert env.get("bar") == 3


def test_set_overwrites():
    env = Env.initial()
    env.set("bar", 3)
    assert env.set("bar", 17) == 17
    assert env.get("bar") == 17


def test_initial_bindings_are_copied():
    seed = {"x": 1}
    env = Env.initial(seed)
    env.set("x", 2)
    env.set("y", 3)
    assert seed == {"x": 1}
    assert env.contains("y")
    assert list(env.names()) == ["x", "y"]
