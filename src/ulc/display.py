from dataclasses import dataclass
from typing import Iterable, Optional

import polars as pl
import svg

from .frame import to_frame
from .term import Term

__all__ = ["Span", "compute_layout", "compute_height", "display"]


@dataclass(frozen=True)
class Span:
    """Closed range of grid cells covered by a node, along one axis."""

    low: int
    high: int

    def __or__(self, other: Optional["Span"]) -> "Span":
        if other is None:
            return self
        return Span(min(self.low, other.low), max(self.high, other.high))

    def shift(self, offset: int) -> "Span":
        return Span(self.low + offset, self.high + offset)


def compute_layout(
    nodes: pl.DataFrame,
) -> tuple[dict[int, Span], dict[int, Span]]:
    """
    Horizontal and vertical extent of every node of a node table.

    Variables get one column each, from right to left. A lambda spans the
    columns of its body and of the variables bound to it, an application the
    columns of its function.
    """
    kinds = nodes["kind"]
    y = {0: Span(0, 0)}
    x: dict[int, Span] = {}
    for node, kind, arg in nodes.select("id", "kind", "arg").iter_rows():
        if kind == "variable":
            continue
        child = node + 1
        if kind == "apply":
            y[child] = y[node].shift(1 if kinds[child] == "apply" else 0)
            y[arg] = y[node]
        else:
            y[child] = y[node].shift(1)

    next_var_x = int((kinds == "variable").sum())

    for node, kind, ref in (
        nodes.sort("id", descending=True).select("id", "kind", "ref").iter_rows()
    ):
        if kind == "variable":
            x[node] = Span(next_var_x, next_var_x)
            next_var_x -= 1
            if ref is not None:
                x[ref] = x[node] | x.get(ref)
        else:
            child = node + 1
            x[node] = x[child] | x.get(node)
            y[node] = y[child] | y[node]
    return x, y


def compute_height(nodes: pl.DataFrame) -> int:
    _, y = compute_layout(nodes)
    return max(span.high for span in y.values())


def draw(
    x: dict[int, Span],
    y: dict[int, Span],
    node: int,
    kind: str,
    ref: Optional[int],
    arg: Optional[int],
) -> Iterable[svg.Element]:
    x_node = x[node]
    y_node = y[node]
    if kind == "lambda":
        yield svg.Rect(
            x=0.1 + x_node.low,
            y=0.1 + y_node.low,
            width=0.8 + x_node.high - x_node.low,
            height=0.8,
            fill="blue",
        )
    elif kind == "variable":
        yield svg.Rect(
            x=0.1 + x_node.low,
            y=0.1 + y_node.low,
            width=0.8,
            height=0.8,
            fill="red",
        )
        if ref is not None:
            yield svg.Line(
                x1=x_node.low + 0.5,
                y1=y_node.low + 0.1,
                x2=x_node.low + 0.5,
                y2=y[ref].low + 0.9,
                stroke_width=0.2,
                stroke="gray",
            )
    else:
        x_arg = x[arg]
        y_arg = y[arg]
        yield svg.Line(
            x1=0.5 + x_node.high,
            y1=0.5 + y_node.low,
            x2=0.5 + x_arg.low,
            y2=0.5 + y_arg.low,
            stroke="black",
            stroke_width=0.05,
        )
        yield svg.Circle(cx=0.5 + x_node.high, cy=0.5 + y_node.low, r=0.1, fill="black")


def display(term: Term) -> svg.SVG:
    """Draw a term: lambdas in blue, variables in red wired to their lambda."""
    nodes = to_frame(term)
    x, y = compute_layout(nodes)

    elements = []
    for node, kind, ref, arg in (
        nodes.sort("id", descending=True).select("id", "kind", "ref", "arg").iter_rows()
    ):
        elements.extend(draw(x, y, node, kind, ref, arg))

    n_variables = max(1, int((nodes["kind"] == "variable").sum()))
    # next power of two above the number of columns
    width = (1 << n_variables.bit_length()) + 2
    height = compute_height(nodes) + 1

    # prefered size in pixels
    H = height * 40
    return svg.SVG(
        xmlns="http://www.w3.org/2000/svg",
        viewBox=f"0 0 {width} {height}",  # type: ignore
        style=f"max-height:{H}px",
        elements=elements,
    )
