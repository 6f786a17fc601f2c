import pytest

from ulc.church import to_church
from ulc.frame import SCHEMA, TRACE_SCHEMA, to_frame, trace
from ulc.term import Apply, Lambda, Variable, lam

x, y = Variable("x"), Variable("y")


def test_to_frame():
    nodes = to_frame(Lambda("x", Apply(x, y)))
    assert nodes.schema == SCHEMA
    assert nodes.to_dicts() == [
        {"id": 0, "kind": "lambda", "name": "x", "ref": None, "arg": None},
        {"id": 1, "kind": "apply", "name": None, "ref": None, "arg": 3},
        {"id": 2, "kind": "variable", "name": "x", "ref": 0, "arg": None},
        {"id": 3, "kind": "variable", "name": "y", "ref": None, "arg": None},
    ]


def test_to_frame_prefix_order():
    # the whole function subtree comes before the argument
    term = Apply(Apply(Lambda("x", x), y), x)
    nodes = to_frame(term)
    assert nodes["kind"].to_list() == [
        "apply",
        "apply",
        "lambda",
        "variable",
        "variable",
        "variable",
    ]
    assert nodes["arg"].to_list()[:2] == [5, 4]


def test_to_frame_innermost_binder():
    nodes = to_frame(lam("x", "x", x))
    assert nodes["ref"].to_list() == [None, None, 1]


def test_to_frame_size():
    term = to_church(3)
    assert len(to_frame(term)) == term.size()


def test_trace(reducer):
    identity = Lambda("x", x)
    table = trace(identity(y), reducer=reducer)
    assert table.schema == TRACE_SCHEMA
    assert table["step"].to_list() == [0, 1]
    assert table["size"].to_list() == [4, 1]
    assert table["term"].to_list() == ["((λx. x) y)", "y"]


def test_trace_bounded(reducer, omega3):
    table = trace(omega3, max_steps=3, reducer=reducer)
    assert table["step"].to_list() == [0, 1, 2, 3]
    sizes = table["size"].to_list()
    assert sizes == sorted(sizes)
    assert sizes[0] < sizes[-1]


def test_trace_negative_bound(reducer, omega3):
    with pytest.raises(ValueError):
        trace(omega3, max_steps=-1, reducer=reducer)
