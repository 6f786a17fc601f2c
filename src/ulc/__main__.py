"""Print a few sample reductions."""

import argparse
import logging

from . import church
from .engine import Reducer
from .frame import trace
from .term import Lambda, Variable


def show(label: str, value):
    print(f"{label:<28} {value}")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="ulc", description=__doc__)
    parser.add_argument(
        "--verbose", action="store_true", help="log every reduction step"
    )
    parser.add_argument(
        "--steps", type=int, default=10, help="maximum steps in the trace table"
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    reducer = Reducer()
    identity = Lambda("x", Variable("x"))
    redex = identity(Variable("y"))
    show("identity", identity)
    show("(λx. x) y", reducer.reduce_step(redex))
    show("(λx. x) (λx. x)", reducer.full_reduction(identity(identity)))
    show("nameless (λx. x)", identity.to_nameless())

    inputs = [
        (church.TRUE, church.TRUE),
        (church.TRUE, church.FALSE),
        (church.FALSE, church.TRUE),
        (church.FALSE, church.FALSE),
    ]
    for name, combinator in [("and", church.and_), ("or", church.or_)]:
        for a, b in inputs:
            label = f"{name}({a == church.TRUE}, {b == church.TRUE})"
            show(label, reducer.equivalence(combinator(a, b), church.TRUE))

    five, seven = church.to_church(5), church.to_church(7)
    show("succ 5", church.to_numeral(reducer.full_reduction(church.successor(five))))
    show("5 + 7", church.to_numeral(reducer.full_reduction(church.add(five, seven))))
    two, three = church.to_church(2), church.to_church(3)
    twelve = church.multiply(church.multiply(two, two), three)
    show("2 * 2 * 3", church.to_numeral(reducer.full_reduction(twelve)))
    p = church.pair(five, seven)
    show("first (5, 7)", church.to_numeral(reducer.full_reduction(church.first(p))))
    show("second (5, 7)", church.to_numeral(reducer.full_reduction(church.second(p))))

    print(trace(church.successor(church.to_church(0)), args.steps, reducer))


if __name__ == "__main__":
    main()
