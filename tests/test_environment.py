import pytest

from theta.errors import ThetaMalformedForm, ThetaUnboundVariable
from theta.types.environment import Environment
from theta.types.symbol import Symbol

S = Symbol


@pytest.fixture
def chain():
    root = Environment()
    root.define(S("a"), 1)
    middle = root.extend([S("b")], [2])
    inner = middle.extend([S("c")], [3])
    return root, middle, inner


def test_lookup_walks_outward(chain):
    root, middle, inner = chain
    assert inner.lookup(S("a")) == 1
    assert inner.lookup(S("b")) == 2
    assert inner.lookup(S("c")) == 3
    with pytest.raises(ThetaUnboundVariable):
        middle.lookup(S("c"))


def test_find_returns_holding_frame(chain):
    root, middle, inner = chain
    assert inner.find(S("a")) is root
    assert inner.find(S("b")) is middle
    assert inner.find(S("zzz")) is None


def test_define_only_touches_innermost(chain):
    root, middle, inner = chain
    inner.define(S("a"), 100)
    assert inner.lookup(S("a")) == 100
    assert root.lookup(S("a")) == 1


def test_set_updates_holding_frame(chain):
    root, middle, inner = chain
    inner.set(S("a"), 42)
    assert root.vars[S("a")] == 42
    assert S("a") not in inner.vars


def test_set_unbound(chain):
    _, _, inner = chain
    with pytest.raises(ThetaUnboundVariable) as info:
        inner.set(S("nope"), 1)
    assert info.value.expr == S("nope")


def test_define_requires_symbol():
    with pytest.raises(ThetaMalformedForm):
        Environment().define("a", 1)


def test_extend_binds_positionally(chain):
    root, _, _ = chain
    child = root.extend([S("x"), S("y")], [10, 20])
    assert child.outer is root
    assert child.vars == {S("x"): 10, S("y"): 20}


def test_shared_frame_sees_later_definitions(chain):
    root, middle, _ = chain
    sibling = middle.extend([], [])
    middle.define(S("late"), "seen")
    assert sibling.lookup(S("late")) == "seen"


def test_update_defines_in_frame(chain):
    root, middle, inner = chain
    root.update({S("p"): 1, S("q"): 2})
    assert inner.lookup(S("q")) == 2
    assert S("p") in root.vars


def test_str_and_repr(chain):
    _, middle, inner = chain
    assert str(middle) == "{b: 2} -> ..."
    assert repr(inner) == "<Environment chain: {c: 3} -> {b: 2} -> <global>>"
