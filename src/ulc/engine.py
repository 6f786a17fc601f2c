"""
Reduction engine.

A `Reducer` drives the one-step reduction of `ulc.term` to a normal form and
compares terms. It owns the `FreshNames` counter used to rename parameters
during substitution; reducers created without one share `DEFAULT_NAMES`.

`full_reduction` loops until a step leaves the term unchanged. A term without
a normal form, such as `(λx. x x) (λx. x x)`, makes it loop forever: this is
how the untyped calculus behaves, not a bug. Callers that need to stop use
`reduce_bounded` or iterate `reduction_chain` themselves.

The module level functions use a shared default reducer.
"""

import logging
from typing import Iterator, Optional, Sequence

from .errors import ReductionLimitError
from .fresh import DEFAULT_NAMES, FreshNames
from .term import NamelessTerm, Term

__all__ = [
    "Reducer",
    "free_variables",
    "substitute",
    "reduce_step",
    "reduction_chain",
    "full_reduction",
    "reduce_bounded",
    "to_nameless",
    "exact_equivalence",
    "equivalence",
]

logger = logging.getLogger(__name__)


class Reducer:
    def __init__(self, names: Optional[FreshNames] = None):
        self.names = names if names is not None else DEFAULT_NAMES

    def substitute(self, term: Term, name: str, replacement: Term) -> Term:
        return term.substitute(name, replacement, self.names)

    def reduce_step(self, term: Term) -> Term:
        return term.reduce_step(self.names)

    def reduction_chain(self, term: Term) -> Iterator[Term]:
        """
        Yield `term`, then every reduction step until a fixed point.

        The fixed point is yielded once. Never ends if `term` has no normal form.
        """
        step = 0
        while True:
            yield term
            reduced = self.reduce_step(term)
            if reduced == term:
                break
            step += 1
            logger.debug("step %d: %s", step, reduced)
            term = reduced

    def full_reduction(self, term: Term) -> Term:
        """Reduce to normal form. Diverges if there is none."""
        last = term
        for last in self.reduction_chain(term):
            pass
        return last

    def reduce_bounded(self, term: Term, max_steps: int) -> Term:
        """
        Reduce to normal form in at most `max_steps` steps.

        Raises:
            ReductionLimitError: if no fixed point was reached in time. The
                error carries the last term computed.
        """
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        for steps, last in enumerate(self.reduction_chain(term)):
            if steps == max_steps:
                # the fixed point may still be one step away
                if self.reduce_step(last) == last:
                    return last
                raise ReductionLimitError(last, steps)
        return last

    def exact_equivalence(
        self, a: Term, b: Term, context: Sequence[str] = ()
    ) -> bool:
        """Alpha-equivalence, without any reduction."""
        return a.to_nameless(context) == b.to_nameless(context)

    def equivalence(self, a: Term, b: Term, context: Sequence[str] = ()) -> bool:
        """Whether `a` and `b` have alpha-equivalent normal forms."""
        return self.exact_equivalence(
            self.full_reduction(a), self.full_reduction(b), context
        )


_default = Reducer()


def free_variables(term: Term) -> frozenset[str]:
    return term.free_variables()


def substitute(term: Term, name: str, replacement: Term) -> Term:
    return _default.substitute(term, name, replacement)


def reduce_step(term: Term) -> Term:
    return _default.reduce_step(term)


def reduction_chain(term: Term) -> Iterator[Term]:
    return _default.reduction_chain(term)


def full_reduction(term: Term) -> Term:
    return _default.full_reduction(term)


def reduce_bounded(term: Term, max_steps: int) -> Term:
    return _default.reduce_bounded(term, max_steps)


def to_nameless(term: Term, context: Sequence[str] = ()) -> NamelessTerm:
    return term.to_nameless(context)


def exact_equivalence(a: Term, b: Term, context: Sequence[str] = ()) -> bool:
    return _default.exact_equivalence(a, b, context)


def equivalence(a: Term, b: Term, context: Sequence[str] = ()) -> bool:
    return _default.equivalence(a, b, context)
