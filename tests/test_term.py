import dataclasses

import pytest

from ulc import UnboundVariableError
from ulc.term import (
    Apply,
    Lambda,
    NamelessApply,
    NamelessLambda,
    NamelessVariable,
    Variable,
    app,
    lam,
)

x, y, z = Variable("x"), Variable("y"), Variable("z")


def test_str():
    assert str(x) == "x"
    assert str(Lambda("x", x)) == "(λx. x)"
    assert str(Apply(x, y)) == "(x y)"
    assert str(Lambda("x", Apply(x, y))) == "(λx. (x y))"
    assert str(Apply(Lambda("x", x), Lambda("y", y))) == "((λx. x) (λy. y))"


def test_apply_is_left_associated():
    assert x.apply(y) == Apply(x, y)
    assert x.apply(y, z) == Apply(Apply(x, y), z)
    assert x(y)(z) == x.apply(y, z)
    assert app(x, y, z) == x.apply(y, z)


def test_lam():
    assert lam("x", "y", x) == Lambda("x", Lambda("y", x))
    assert lam("x", x) == Lambda("x", x)
    with pytest.raises(ValueError):
        lam(x)
    with pytest.raises(ValueError):
        app(x)


def test_terms_are_immutable():
    term = Lambda("x", x)
    with pytest.raises(dataclasses.FrozenInstanceError):
        term.parameter = "y"  # type: ignore


def test_equality_is_exact():
    assert Lambda("x", x) == Lambda("x", Variable("x"))
    assert Lambda("x", x) != Lambda("y", y)
    assert hash(Lambda("x", x)) == hash(Lambda("x", Variable("x")))


def test_free_variables():
    assert x.free_variables() == {"x"}
    assert Lambda("x", x).free_variables() == frozenset()
    assert Lambda("x", Apply(x, y)).free_variables() == {"y"}
    assert Apply(Lambda("x", x), x).free_variables() == {"x"}
    assert Lambda("x", Lambda("x", x)).free_variables() == frozenset()
    assert Lambda("y", Apply(x, Lambda("x", z))).free_variables() == {"x", "z"}


def test_free_vars_may_repeat():
    assert sorted(Apply(x, x).free_vars()) == ["x", "x"]


def test_is_closed():
    assert Lambda("x", x).is_closed()
    assert not Lambda("x", y).is_closed()


def test_size():
    assert x.size() == 1
    assert Lambda("x", Apply(x, y)).size() == 4


def test_to_nameless():
    assert Lambda("x", x).to_nameless() == NamelessLambda(NamelessVariable(0))
    assert lam("x", "y", x).to_nameless() == NamelessLambda(
        NamelessLambda(NamelessVariable(1))
    )
    assert lam("x", "y", Apply(y, x)).to_nameless() == NamelessLambda(
        NamelessLambda(NamelessApply(NamelessVariable(0), NamelessVariable(1)))
    )


def test_to_nameless_innermost_binder_wins():
    assert lam("x", "x", x).to_nameless() == NamelessLambda(
        NamelessLambda(NamelessVariable(0))
    )
    term = Lambda("x", Apply(x, Lambda("x", x)))
    assert term.to_nameless() == NamelessLambda(
        NamelessApply(NamelessVariable(0), NamelessLambda(NamelessVariable(0)))
    )


def test_to_nameless_unbound_variable():
    with pytest.raises(UnboundVariableError) as info:
        Lambda("x", y).to_nameless()
    assert info.value.name == "y"
    assert isinstance(info.value, ValueError)


def test_to_nameless_with_context():
    assert y.to_nameless(["y"]) == NamelessVariable(0)
    assert Lambda("x", y).to_nameless(["y", "z"]) == NamelessLambda(
        NamelessVariable(2)
    )


def test_nameless_str():
    assert str(lam("x", "y", Apply(x, y)).to_nameless()) == "(λ. (λ. (1 0)))"


def test_nameless_index_is_non_negative():
    with pytest.raises(ValueError):
        NamelessVariable(-1)
