"""
Tabular views of terms, as polars DataFrames.

# 1. Node table

`to_frame` lists the nodes of a term in prefix order, one row per node:

1.1 A `lambda` row has its parameter in `name`. Its body is the next row.
1.2 An `apply` row has the id of its argument in `arg`.
    Its function is the next row.
1.3 A `variable` row has its name in `name`, and the id of the lambda it is
    bound to in `ref`. `ref` is null for a free variable.

```
(λx. (x y))  =>  id  kind      name  ref   arg
                 0   lambda    x     null  null
                 1   apply     null  null  3
                 2   variable  x     0     null
                 3   variable  y     null  null
```

# 2. Reduction trace

`trace` lists the successive terms of a reduction, one row per step.
"""

from typing import Iterator, List, Optional

import polars as pl
from polars import Schema, String, UInt32

from .engine import Reducer
from .term import Apply, Lambda, Term, Variable

__all__ = ["SCHEMA", "TRACE_SCHEMA", "to_frame", "trace"]

SCHEMA = Schema(
    {
        "id": UInt32,
        "kind": String,
        "name": String,
        "ref": UInt32,
        "arg": UInt32,
    },
)

TRACE_SCHEMA = Schema(
    {
        "step": UInt32,
        "size": UInt32,
        "term": String,
    },
)


def _row(node_id: int, kind: str, name=None, ref=None, arg=None) -> dict:
    return {"id": node_id, "kind": kind, "name": name, "ref": ref, "arg": arg}


def _rows(term: Term) -> List[dict]:
    rows: List[dict] = []
    # (node, enclosing lambdas as (parameter, id), row to patch with the id)
    stack = [(term, (), None)]
    while stack:
        node, binders, parent = stack.pop()
        node_id = len(rows)
        if parent is not None:
            rows[parent]["arg"] = node_id

        if isinstance(node, Lambda):
            rows.append(_row(node_id, "lambda", name=node.parameter))
            stack.append((node.body, (*binders, (node.parameter, node_id)), None))
        elif isinstance(node, Apply):
            rows.append(_row(node_id, "apply"))
            # the function must come out of the stack first
            stack.append((node.argument, binders, node_id))
            stack.append((node.function, binders, None))
        elif isinstance(node, Variable):
            ref = next(
                (i for parameter, i in reversed(binders) if parameter == node.name),
                None,
            )
            rows.append(_row(node_id, "variable", name=node.name, ref=ref))
        else:
            raise TypeError(f"not a term: {node!r}")
    return rows


def to_frame(term: Term) -> pl.DataFrame:
    return pl.from_dicts(_rows(term), schema=SCHEMA)


def _steps(chain: Iterator[Term], max_steps: Optional[int]) -> Iterator[tuple]:
    for step, term in enumerate(chain):
        yield step, term.size(), str(term)
        if max_steps is not None and step >= max_steps:
            break


def trace(
    term: Term, max_steps: Optional[int] = None, reducer: Optional[Reducer] = None
) -> pl.DataFrame:
    """
    Table of the reduction of `term`, the input being step 0.

    Without `max_steps`, runs until the normal form and diverges if there is
    none. With it, stops silently after that many steps.
    """
    if max_steps is not None and max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")
    if reducer is None:
        reducer = Reducer()
    rows = _steps(reducer.reduction_chain(term), max_steps)
    return pl.from_records(list(rows), schema=TRACE_SCHEMA, orient="row")
