import pytest
from hypothesis import given, strategies as st

from minilisp.errors import SymbolNotFound
from minilisp.types import Environment, Symbol


def test_define_and_resolve():
    env = Environment()
    env.define(Symbol("x"), 42)
    assert env.resolve(Symbol("x")) == 42
    # plain strings name the same binding
    assert env.resolve("x") == 42


def test_define_overwrites_in_same_frame():
    env = Environment()
    env.define("x", 1)
    env.define("x", 2)
    assert env.resolve("x") == 2
    assert list(env.names()) == [Symbol("x")]


def test_resolve_walks_to_parent():
    root = Environment()
    root.define("x", 1)
    child = Environment(outer=root)
    grandchild = Environment(outer=child)
    assert grandchild.resolve("x") == 1
    assert grandchild.find("x") is root


def test_child_shadows_parent_without_touching_it():
    root = Environment()
    root.define("x", 1)
    child = Environment(outer=root)
    child.define("x", 2)
    assert child.resolve("x") == 2
    assert root.resolve("x") == 1


def test_define_in_child_is_not_visible_in_parent():
    root = Environment()
    child = Environment(outer=root)
    child.define("y", 3)
    with pytest.raises(SymbolNotFound) as exc:
        root.resolve("y")
    assert exc.value.name == "y"


def test_shared_parent_sees_later_definitions():
    root = Environment()
    a = Environment(outer=root)
    b = Environment(outer=root)
    root.define("z", 9)
    assert a.resolve("z") == 9
    assert b.resolve("z") == 9


def test_unbound_symbol():
    with pytest.raises(SymbolNotFound):
        Environment().resolve(Symbol("missing"))


def test_update_and_contains():
    root = Environment()
    root.update({"a": 1, Symbol("b"): 2})
    child = Environment(outer=root)
    assert "a" in child
    assert Symbol("b") in child
    assert "c" not in child


def test_root_and_depth():
    root = Environment()
    child = Environment(outer=root)
    grandchild = Environment(outer=child)
    assert grandchild.root() is root
    assert root.depth() == 0
    assert grandchild.depth() == 2


def test_str_and_repr():
    root = Environment()
    root.define("x", 1)
    child = Environment(outer=root)
    child.define("y", 2)
    assert str(child) == "{y: 2} -> ..."
    assert repr(child) == "<Environment chain: {y: 2} -> {x: 1}>"


names = st.sampled_from(["a", "b", "c", "d"])
frames = st.lists(st.dictionaries(names, st.integers()), min_size=1, max_size=6)


@given(frames, names)
def test_resolve_finds_nearest_binding(chain, name):
    env = None
    for bindings in chain:
        env = Environment(outer=env)
        env.update(bindings)

    holders = [bindings for bindings in reversed(chain) if name in bindings]
    if holders:
        assert env.resolve(name) == holders[0][name]
    else:
        with pytest.raises(SymbolNotFound):
            env.resolve(name)
