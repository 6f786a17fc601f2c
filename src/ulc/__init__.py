from .engine import (
    Reducer,
    equivalence,
    exact_equivalence,
    free_variables,
    full_reduction,
    reduce_bounded,
    reduce_step,
    reduction_chain,
    substitute,
    to_nameless,
)
from .errors import (
    LambdaError,
    NotANumeralError,
    ReductionLimitError,
    UnboundVariableError,
)
from .fresh import DEFAULT_NAMES, FreshNames
from .term import (
    Apply,
    Lambda,
    NamelessApply,
    NamelessLambda,
    NamelessTerm,
    NamelessVariable,
    Term,
    Variable,
    app,
    lam,
)

__all__ = [
    "Term",
    "Lambda",
    "Apply",
    "Variable",
    "lam",
    "app",
    "NamelessTerm",
    "NamelessLambda",
    "NamelessApply",
    "NamelessVariable",
    "FreshNames",
    "DEFAULT_NAMES",
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
    "LambdaError",
    "UnboundVariableError",
    "NotANumeralError",
    "ReductionLimitError",
]
