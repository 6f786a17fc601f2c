"""
Lambda calculus term representation with named variables.

Terms are immutable trees built from three node types:
- `Lambda`, an abstraction binding one parameter in its body
- `Apply`, the application of a function to an argument
- `Variable`, a reference to a parameter by its name

A variable that is not under a lambda with the same parameter is free.

Two terms are equal (`==`) only if they are spelled the same way, bound names
included. Equality up to the renaming of bound variables (alpha-equivalence) is
obtained by comparing the nameless form of the terms, see `Term.to_nameless`.

The nameless form uses De Bruijn indices: a variable is replaced by the number
of binders between the occurrence and the lambda that binds it.

```
λx. λy. x  =>  NamelessLambda(NamelessLambda(NamelessVariable(1)))
λa. λb. a  =>  NamelessLambda(NamelessLambda(NamelessVariable(1)))
```
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generator, Optional, Sequence

from .errors import UnboundVariableError
from .fresh import DEFAULT_NAMES, FreshNames

__all__ = [
    "Term",
    "Lambda",
    "Apply",
    "Variable",
    "NamelessTerm",
    "NamelessLambda",
    "NamelessApply",
    "NamelessVariable",
    "lam",
    "app",
]

logger = logging.getLogger(__name__)


class Term(ABC):
    """
    Base class for lambda calculus terms.

    Every operation returns a new term; a term is never modified once built.
    """

    def __call__(self, arg: Term) -> Term:
        """Apply this term to an argument"""
        return Apply(self, arg)

    def apply(self, other: Term, *others: Term) -> Term:
        """
        Build a left-associated chain of applications.

        `f.apply(a, b)` is `((f a) b)`.
        """
        result = Apply(self, other)
        for arg in others:
            result = Apply(result, arg)
        return result

    @abstractmethod
    def free_vars(self) -> Generator[str]:
        """Names occurring free in this term, possibly with repetitions."""
        ...

    def free_variables(self) -> frozenset[str]:
        return frozenset(self.free_vars())

    def is_closed(self) -> bool:
        return next(self.free_vars(), None) is None

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def substitute(
        self, name: str, replacement: Term, names: Optional[FreshNames] = None
    ) -> Term:
        """
        Replace every free occurrence of `name` by `replacement`.

        A lambda whose parameter is free in `replacement` is renamed first,
        with a name drawn from `names`, so that no free variable of
        `replacement` gets captured.
        """
        ...

    @abstractmethod
    def reduce_step(self, names: Optional[FreshNames] = None) -> Term:
        """
        Perform one level of normal-order beta-reduction.

        Both sides of an application are reduced first; if the reduced
        function is a lambda, the redex is consumed by substitution and
        nothing more is reduced during this call.
        """
        ...

    @abstractmethod
    def to_nameless(self, context: Sequence[str] = ()) -> NamelessTerm:
        """
        Convert to De Bruijn form.

        Args:
            context: names of the enclosing binders, the outermost first.
                The innermost binder with a given name wins.

        Raises:
            UnboundVariableError: if a variable is neither bound in this term
                nor present in `context`.
        """
        ...

    def _repr_html_(self):
        from .display import display

        return f"<div>{display(self).as_str()}</div>"


@dataclass(frozen=True)
class Lambda(Term):
    """
    Lambda abstraction.

    Example:
        λx. x      =>  Lambda("x", Variable("x"))
        λx. λy. x  =>  Lambda("x", Lambda("y", Variable("x")))

    Attributes:
        parameter: The name bound in `body`
        body: The body of the lambda abstraction
    """

    parameter: str
    body: Term

    def __str__(self):
        return f"(λ{self.parameter}. {self.body})"

    def free_vars(self) -> Generator[str]:
        for name in self.body.free_vars():
            if name != self.parameter:
                yield name

    def size(self) -> int:
        return 1 + self.body.size()

    def substitute(
        self, name: str, replacement: Term, names: Optional[FreshNames] = None
    ) -> Term:
        if self.parameter == name:
            # `name` is shadowed here
            return self

        replacement_free = replacement.free_variables()
        if self.parameter not in replacement_free:
            body = self.body.substitute(name, replacement, names)
            return Lambda(self.parameter, body)

        if names is None:
            names = DEFAULT_NAMES
        avoid = replacement_free | self.body.free_variables() | {name}
        parameter = names.fresh(avoid)
        logger.debug("renaming %s to %s to avoid capture", self.parameter, parameter)
        body = self.body.substitute(self.parameter, Variable(parameter), names)
        return Lambda(parameter, body.substitute(name, replacement, names))

    def reduce_step(self, names: Optional[FreshNames] = None) -> Term:
        return Lambda(self.parameter, self.body.reduce_step(names))

    def to_nameless(self, context: Sequence[str] = ()) -> NamelessTerm:
        return NamelessLambda(self.body.to_nameless((*context, self.parameter)))


@dataclass(frozen=True)
class Apply(Term):
    """
    Function application.

    Example:
        (λx. x) y  =>  Apply(Lambda("x", Variable("x")), Variable("y"))

    Attributes:
        function: The function being applied
        argument: The argument to apply
    """

    function: Term
    argument: Term

    def __str__(self):
        return f"({self.function} {self.argument})"

    def free_vars(self) -> Generator[str]:
        yield from self.function.free_vars()
        yield from self.argument.free_vars()

    def size(self) -> int:
        return 1 + self.function.size() + self.argument.size()

    def substitute(
        self, name: str, replacement: Term, names: Optional[FreshNames] = None
    ) -> Term:
        return Apply(
            self.function.substitute(name, replacement, names),
            self.argument.substitute(name, replacement, names),
        )

    def reduce_step(self, names: Optional[FreshNames] = None) -> Term:
        function = self.function.reduce_step(names)
        argument = self.argument.reduce_step(names)
        if isinstance(function, Lambda):
            return function.body.substitute(function.parameter, argument, names)
        return Apply(function, argument)

    def to_nameless(self, context: Sequence[str] = ()) -> NamelessTerm:
        return NamelessApply(
            self.function.to_nameless(context), self.argument.to_nameless(context)
        )


@dataclass(frozen=True)
class Variable(Term):
    """
    A variable reference.

    Attributes:
        name: The parameter this variable refers to. Any string is accepted.
    """

    name: str

    def __str__(self):
        return self.name

    def free_vars(self) -> Generator[str]:
        yield self.name

    def size(self) -> int:
        return 1

    def substitute(
        self, name: str, replacement: Term, names: Optional[FreshNames] = None
    ) -> Term:
        if self.name == name:
            return replacement
        return self

    def reduce_step(self, names: Optional[FreshNames] = None) -> Term:
        return self

    def to_nameless(self, context: Sequence[str] = ()) -> NamelessTerm:
        for depth, parameter in enumerate(reversed(context)):
            if parameter == self.name:
                return NamelessVariable(depth)
        raise UnboundVariableError(self.name)


def lam(*parameters_and_body) -> Term:
    """
    Curried lambda over several parameters.

    `lam("x", "y", body)` is `Lambda("x", Lambda("y", body))`.
    """
    *parameters, body = parameters_and_body
    if not parameters:
        raise ValueError("a lambda needs at least one parameter")
    for parameter in reversed(parameters):
        body = Lambda(parameter, body)
    return body


def app(function: Term, *args: Term) -> Term:
    """Left-associated application, `app(f, a, b)` is `((f a) b)`."""
    if not args:
        raise ValueError("an application needs at least one argument")
    return function.apply(*args)


class NamelessTerm(ABC):
    """
    Base class of terms in De Bruijn form.

    Only used to compare terms; these are never reduced.
    """


@dataclass(frozen=True)
class NamelessLambda(NamelessTerm):
    body: NamelessTerm

    def __str__(self):
        return f"(λ. {self.body})"


@dataclass(frozen=True)
class NamelessApply(NamelessTerm):
    function: NamelessTerm
    argument: NamelessTerm

    def __str__(self):
        return f"({self.function} {self.argument})"


@dataclass(frozen=True)
class NamelessVariable(NamelessTerm):
    """
    A bound variable.

    index=0 is bound by the immediately enclosing lambda, index=1 by the next
    outer one, etc.
    """

    index: int

    def __str__(self):
        return f"{self.index}"

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Variable index must be non-negative, got {self.index}")
