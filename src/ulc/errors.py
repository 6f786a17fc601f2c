from typing import Optional

__all__ = [
    "LambdaError",
    "UnboundVariableError",
    "NotANumeralError",
    "ReductionLimitError",
]


class LambdaError(Exception):
    """Base class of every error raised by ulc."""


class UnboundVariableError(LambdaError, ValueError):
    """A variable has no enclosing binder in the conversion context."""

    def __init__(self, name: str):
        super().__init__(f"variable {name} is not bound to any lambda")
        self.name = name


class NotANumeralError(LambdaError, ValueError):
    """The term is not in the shape `λf.λx. f (f (... x))`."""

    def __init__(self, term, reason: Optional[str] = None):
        message = f"{term} is not a Church numeral"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
        self.term = term


class ReductionLimitError(LambdaError, RuntimeError):
    def __init__(self, term, steps: int):
        super().__init__(f"no normal form reached after {steps} steps")
        self.term = term
        self.steps = steps
