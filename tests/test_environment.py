import pytest

from tramp.types.environment import Environment
from tramp.types.symbol import Symbol
from tramp.types import errors


def test_define_and_lookup():
    env = Environment()
    env.define(Symbol("x"), 1.0)
    assert env.lookup(Symbol("x")) == 1.0


def test_lookup_walks_outward():
    root = Environment()
    root.define(Symbol("a"), 1.0)
    mid = Environment(outer=root)
    mid.define(Symbol("b"), 2.0)
    leaf = Environment(outer=mid)
    assert leaf.lookup(Symbol("a")) == 1.0
    assert leaf.lookup(Symbol("b")) == 2.0
    assert leaf.find(Symbol("a")) is root
    assert leaf.find(Symbol("b")) is mid
    assert leaf.find(Symbol("c")) is None


def test_lookup_unbound_raises():
    env = Environment(outer=Environment())
    with pytest.raises(errors.UndefinedVariable) as exc:
        env.lookup(Symbol("missing"))
    assert exc.value.symbol == Symbol("missing")
    assert "missing" in str(exc.value)


def test_child_define_shadows_without_touching_parent():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    child = Environment(outer=root)
    child.define(Symbol("x"), 2.0)
    assert child.lookup(Symbol("x")) == 2.0
    assert root.lookup(Symbol("x")) == 1.0
    assert Symbol("x") in child.vars and root.vars[Symbol("x")] == 1.0


def test_redefine_overwrites_in_same_frame():
    env = Environment()
    env.define(Symbol("x"), 1.0)
    env.define(Symbol("x"), 2.0)
    assert env.lookup(Symbol("x")) == 2.0


def test_falsy_values_are_found():
    env = Environment()
    env.define(Symbol("f"), False)
    env.define(Symbol("z"), 0.0)
    assert env.lookup(Symbol("f")) is False
    assert env.lookup(Symbol("z")) == 0.0


def test_update_bulk_defines_and_validates():
    env = Environment()
    env.update({Symbol("a"): 1.0, Symbol("b"): 2.0})
    assert env.lookup(Symbol("b")) == 2.0
    with pytest.raises(errors.InvalidSymbol):
        env.update({"plain": 3.0})


def test_deep_chain_lookup_is_iterative():
    root = Environment()
    root.define(Symbol("answer"), 42.0)
    env = root
    for _ in range(5000):
        env = Environment(outer=env)
    assert env.lookup(Symbol("answer")) == 42.0


def test_string_forms():
    root = Environment()
    root.define(Symbol("a"), 1.0)
    child = Environment(outer=root)
    assert str(root) == "{a: 1.0}"
    assert str(child) == "{} -> ..."
    assert repr(child) == "<Environment chain: {} -> {a: 1.0}>"


def test_symbols_are_interned_strings():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") is not None and hash(Symbol("abc")) == hash("abc")
    assert repr(Symbol("abc")) == "Symbol('abc')"
    assert str(Symbol("abc")) == "abc"
