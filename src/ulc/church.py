"""
Church encodings of booleans, pairs and natural numbers.

Everything here is an ordinary term built with the public constructors; the
helpers only apply the combinators, nothing is reduced. Use
`ulc.engine.full_reduction` to compute, and `equivalence` or `to_numeral` to
read the results back.

Source: https://en.wikipedia.org/wiki/Church_encoding
"""

from .errors import NotANumeralError
from .term import Apply, Lambda, Term, Variable, lam

__all__ = [
    "TRUE",
    "FALSE",
    "AND",
    "OR",
    "NOT",
    "IF_THEN_ELSE",
    "SUCCESSOR",
    "ADD",
    "MULTIPLY",
    "PAIR",
    "FIRST",
    "SECOND",
    "and_",
    "or_",
    "not_",
    "if_then_else",
    "to_church",
    "to_numeral",
    "successor",
    "add",
    "multiply",
    "pair",
    "first",
    "second",
]

x, y = Variable("x"), Variable("y")

TRUE = lam("x", "y", x)
FALSE = lam("x", "y", y)

AND = lam("x", "y", x.apply(y, FALSE))
OR = lam("x", "y", x.apply(TRUE, y))
NOT = Lambda("x", x.apply(FALSE, TRUE))
IF_THEN_ELSE = lam("c", "l", "r", Variable("c").apply(Variable("l"), Variable("r")))

f, n, m = Variable("f"), Variable("n"), Variable("m")

# λn.λf.λx. f (n f x)
SUCCESSOR = lam("n", "f", "x", f(n.apply(f, x)))
# λn.λm.λf.λx. n f (m f x)
ADD = lam("n", "m", "f", "x", n.apply(f, m.apply(f, x)))
# λn.λm.λf. n (m f)
MULTIPLY = lam("n", "m", "f", n(m(f)))

PAIR = lam("a", "b", "f", f.apply(Variable("a"), Variable("b")))
FIRST = Lambda("p", Variable("p")(TRUE))
SECOND = Lambda("p", Variable("p")(FALSE))

del x, y, f, n, m


def and_(a: Term, b: Term) -> Term:
    return AND.apply(a, b)


def or_(a: Term, b: Term) -> Term:
    return OR.apply(a, b)


def not_(a: Term) -> Term:
    return NOT(a)


def if_then_else(condition: Term, then: Term, otherwise: Term) -> Term:
    return IF_THEN_ELSE.apply(condition, then, otherwise)


def to_church(number: int) -> Term:
    """Church numeral of a natural number: λf.λx. f (f (... x))"""
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"only natural numbers can be encoded, got {number!r}")
    if number < 0:
        raise ValueError(f"only natural numbers can be encoded, got {number}")

    body: Term = Variable("x")
    for _ in range(number):
        body = Apply(Variable("f"), body)
    return lam("f", "x", body)


def to_numeral(term: Term) -> int:
    """
    Decode a Church numeral.

    `term` must already be in normal form, exactly `λf.λx. f (f (... x))`;
    the two parameters may have any name.

    Raises:
        NotANumeralError: on any other shape.
    """
    if not (isinstance(term, Lambda) and isinstance(term.body, Lambda)):
        raise NotANumeralError(term, "expected two nested lambdas")
    f, x = term.parameter, term.body.parameter

    count = 0
    spine = term.body.body
    while isinstance(spine, Apply):
        function = spine.function
        # when both parameters have the same name, `f` is shadowed
        if not (isinstance(function, Variable) and function.name == f != x):
            raise NotANumeralError(term, f"{function} is applied instead of {f}")
        count += 1
        spine = spine.argument

    if spine != Variable(x):
        raise NotANumeralError(term, f"expected {x} at the end, got {spine}")
    return count


def successor(number: Term) -> Term:
    return SUCCESSOR(number)


def add(a: Term, b: Term) -> Term:
    return ADD.apply(a, b)


def multiply(a: Term, b: Term) -> Term:
    return MULTIPLY.apply(a, b)


def pair(a: Term, b: Term) -> Term:
    return PAIR.apply(a, b)


def first(p: Term) -> Term:
    return FIRST(p)


def second(p: Term) -> Term:
    return SECOND(p)
