import pytest

from ulc import FreshNames, Reducer
from ulc.term import Lambda, Variable


@pytest.fixture
def names():
    return FreshNames()


@pytest.fixture
def reducer(names):
    return Reducer(names)


@pytest.fixture
def identity():
    return Lambda("x", Variable("x"))


@pytest.fixture
def omega3():
    """(λx. x x x) (λx. x x x), grows at every step"""
    w = Lambda("x", Variable("x").apply(Variable("x"), Variable("x")))
    return w(w)
