"""Execution of rewrite scripts on shapes and unit values.

Every rewrite operation is a pure relabeling of the shape tag. The numeric
payload of a unit value already holds the product or quotient computed when
the compound value was built, so executing a script never touches the number:
it only swaps the shape descriptor for a smaller, equivalent one.

Operation semantics (``A``, ``B``, ``C`` are arbitrary shapes):

    commutative          A * B       -> B * A
    associative          (A * B) * C -> A * (B * C)
    scalar               A * Scalar  -> A,   A / Scalar -> A
    reduction            A/B * B     -> A,   A / A      -> Scalar
    reduction_right      (A * B) / B -> A
    reduction_left       (A * B) / A -> B
    inner_left(s)        applies s to the left operand / numerator
    inner_right(s)       applies s to the right operand / denominator
    infuse_numerator     A * (B / C) -> (A * B) / C
    extract_numerator    (A * B) / C -> A * (B / C)
    infuse_denominator   A / B / C   -> A / (B * C)
    extract_denominator  A / (B * C) -> A / B / C
    flip_denominator     A / B / C   -> A / C / B

An operation applied to a shape outside its pattern raises
``ShapeMismatchError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from ..errors import ShapeMismatchError
from .shape_base import SCALAR, Product, Quotient, Shape, render
from .simplify import Op, OpName, Script, format_script, simplify

logger = logging.getLogger(__name__)

CONSOLE = Console()


def _mismatch(op: Op, shape: Shape) -> ShapeMismatchError:
    return ShapeMismatchError(f"{op} cannot rewrite {shape!r}")


def _commutative(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Product):
        return Product(shape.right, shape.left)
    raise _mismatch(op, shape)


def _associative(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Product) and isinstance(shape.left, Product):
        inner = shape.left
        return Product(inner.left, Product(inner.right, shape.right))
    raise _mismatch(op, shape)


def _scalar(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Product) and shape.right == SCALAR:
        return shape.left
    if isinstance(shape, Quotient) and shape.denominator == SCALAR:
        return shape.numerator
    raise _mismatch(op, shape)


def _reduction(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Quotient) and shape.numerator == shape.denominator:
        return SCALAR
    if (
        isinstance(shape, Product)
        and isinstance(shape.left, Quotient)
        and shape.left.denominator == shape.right
    ):
        return shape.left.numerator
    raise _mismatch(op, shape)


def _reduction_right(shape: Shape, op: Op) -> Shape:
    if (
        isinstance(shape, Quotient)
        and isinstance(shape.numerator, Product)
        and shape.numerator.right == shape.denominator
    ):
        return shape.numerator.left
    raise _mismatch(op, shape)


def _reduction_left(shape: Shape, op: Op) -> Shape:
    if (
        isinstance(shape, Quotient)
        and isinstance(shape.numerator, Product)
        and shape.numerator.left == shape.denominator
    ):
        return shape.numerator.right
    raise _mismatch(op, shape)


def _inner_left(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Product):
        return Product(rewrite(shape.left, op.script), shape.right)
    if isinstance(shape, Quotient):
        return Quotient(rewrite(shape.numerator, op.script), shape.denominator)
    raise _mismatch(op, shape)


def _inner_right(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Product):
        return Product(shape.left, rewrite(shape.right, op.script))
    if isinstance(shape, Quotient):
        return Quotient(shape.numerator, rewrite(shape.denominator, op.script))
    raise _mismatch(op, shape)


def _infuse_numerator(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Product) and isinstance(shape.right, Quotient):
        fraction = shape.right
        return Quotient(Product(shape.left, fraction.numerator), fraction.denominator)
    raise _mismatch(op, shape)


def _extract_numerator(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Quotient) and isinstance(shape.numerator, Product):
        product = shape.numerator
        return Product(product.left, Quotient(product.right, shape.denominator))
    raise _mismatch(op, shape)


def _infuse_denominator(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Quotient) and isinstance(shape.numerator, Quotient):
        inner = shape.numerator
        return Quotient(inner.numerator, Product(inner.denominator, shape.denominator))
    raise _mismatch(op, shape)


def _extract_denominator(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Quotient) and isinstance(shape.denominator, Product):
        product = shape.denominator
        return Quotient(Quotient(shape.numerator, product.left), product.right)
    raise _mismatch(op, shape)


def _flip_denominator(shape: Shape, op: Op) -> Shape:
    if isinstance(shape, Quotient) and isinstance(shape.numerator, Quotient):
        inner = shape.numerator
        return Quotient(Quotient(inner.numerator, shape.denominator), inner.denominator)
    raise _mismatch(op, shape)


_HANDLERS: dict[OpName, Callable[[Shape, Op], Shape]] = {
    OpName.COMMUTATIVE: _commutative,
    OpName.ASSOCIATIVE: _associative,
    OpName.SCALAR: _scalar,
    OpName.REDUCTION: _reduction,
    OpName.REDUCTION_RIGHT: _reduction_right,
    OpName.REDUCTION_LEFT: _reduction_left,
    OpName.INNER_LEFT: _inner_left,
    OpName.INNER_RIGHT: _inner_right,
    OpName.INFUSE_NUMERATOR: _infuse_numerator,
    OpName.EXTRACT_NUMERATOR: _extract_numerator,
    OpName.INFUSE_DENOMINATOR: _infuse_denominator,
    OpName.EXTRACT_DENOMINATOR: _extract_denominator,
    OpName.FLIP_DENOMINATOR: _flip_denominator,
}


def apply_op(shape: Shape, op: Op) -> Shape:
    """Apply a single operation to a shape.

    Args:
        shape: Shape to rewrite.
        op: Operation to apply.

    Returns:
        Shape: The rewritten shape.

    Raises:
        ShapeMismatchError: If the shape does not match the operation's pattern.
    """
    return _HANDLERS[op.name](shape, op)


def rewrite(shape: Shape, script: Script) -> Shape:
    """Apply every operation of ``script`` to ``shape`` in order."""
    for op in script:
        shape = apply_op(shape, op)
    return shape


def execute(value, script: Script):
    """Retag a unit value by running ``script`` on its shape.

    The numeric payload is carried over untouched; only the shape descriptor
    changes. The returned value is an instance of the declared unit class for
    the resulting shape when one exists.

    Args:
        value: Unit value whose shape the script was computed for.
        script: Operations to apply.

    Returns:
        UnitValue: Value carrying the rewritten shape.

    Raises:
        ShapeMismatchError: If the script does not fit the value's shape.
    """
    shape = rewrite(value.shape, script)
    logger.debug("executed [%s] on %r -> %r", format_script(script), value.shape, shape)
    return value.with_shape(shape)


@dataclass(frozen=True)
class RewriteStep:
    """One top-level operation of a script with the shapes around it."""

    op: Op
    before: Shape
    after: Shape


def trace(shape: Shape, script: Script) -> list[RewriteStep]:
    """Record the shape before and after each top-level operation."""
    steps = []
    for op in script:
        after = apply_op(shape, op)
        steps.append(RewriteStep(op, shape, after))
        shape = after
    return steps


def print_trace(shape: Shape, script: Script | None = None, console: Console | None = None) -> Table:
    """Print the rewrite steps from ``shape`` to its canonical form as a table.

    Args:
        shape: Starting shape.
        script: Script to trace; computed with ``simplify`` when omitted.
        console: Console to print on, defaults to the module console.

    Returns:
        Table: The rendered table, for embedding in other layouts.
    """
    if script is None:
        script = simplify(shape).script

    table = Table(title=f"Rewrite of {render(shape) or '(scalar)'}")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Operation", style="magenta")
    table.add_column("Before")
    table.add_column("After", style="green")
    for index, step in enumerate(trace(shape, script), start=1):
        table.add_row(str(index), str(step.op), render(step.before), render(step.after))

    (console or CONSOLE).print(table)
    return table
