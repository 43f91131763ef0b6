"""Rewrite engine that reduces compound unit shapes to a canonical form.

``simplify`` takes the shape produced by multiplying or dividing unit values
and returns the canonical shape together with the script of rewrite
operations that retargets a value from the original shape to the canonical
one. Scripts are plain data (tuples of ``Op``) so they can be compared,
logged, replayed by the executor or rendered for inspection.

Rules are tried in priority order, the first match wins, and the rewritten
term is simplified again until no rule applies. Products simplify their
operands first and inspect the simplified pair; quotients inspect their raw
operands first and only fall back to simplifying each side independently.

Example:
    >>> m, s = Atomic("m"), Atomic("s")
    >>> result = simplify(Product(Quotient(m, s), s))
    >>> result.shape
    Atomic('m')
    >>> format_script(result.script)
    'reduction'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from .shape_base import SCALAR, Product, Quotient, Shape

logger = logging.getLogger(__name__)


class OpName(str, Enum):
    """Names of the shape rewrite operations."""

    COMMUTATIVE = "commutative"
    ASSOCIATIVE = "associative"
    REDUCTION = "reduction"
    REDUCTION_LEFT = "reduction_left"
    REDUCTION_RIGHT = "reduction_right"
    SCALAR = "scalar"
    INNER_LEFT = "inner_left"
    INNER_RIGHT = "inner_right"
    # Regroupings available to hand-written scripts; never emitted by simplify
    INFUSE_NUMERATOR = "infuse_numerator"
    EXTRACT_NUMERATOR = "extract_numerator"
    INFUSE_DENOMINATOR = "infuse_denominator"
    EXTRACT_DENOMINATOR = "extract_denominator"
    FLIP_DENOMINATOR = "flip_denominator"


_NESTED = (OpName.INNER_LEFT, OpName.INNER_RIGHT)


@dataclass(frozen=True)
class Op:
    """A single rewrite step.

    Attributes:
        name: Which rewrite to perform.
        script: Sub-script applied to one operand; only used by
            ``inner_left`` and ``inner_right``.
    """

    name: OpName
    script: tuple[Op, ...] = ()

    def __post_init__(self):
        if self.script and self.name not in _NESTED:
            msg = f"{self.name.value} does not take a sub-script"
            raise ValueError(msg)

    def __str__(self) -> str:
        if self.name in _NESTED:
            return f"{self.name.value}({format_script(self.script)})"
        return self.name.value

    def __repr__(self) -> str:
        return f"Op({self})"


Script = tuple[Op, ...]
"""Ordered sequence of rewrite operations."""

COMMUTATIVE = Op(OpName.COMMUTATIVE)
ASSOCIATIVE = Op(OpName.ASSOCIATIVE)
REDUCTION = Op(OpName.REDUCTION)
REDUCTION_LEFT = Op(OpName.REDUCTION_LEFT)
REDUCTION_RIGHT = Op(OpName.REDUCTION_RIGHT)
SCALAR_OP = Op(OpName.SCALAR)
INFUSE_NUMERATOR = Op(OpName.INFUSE_NUMERATOR)
EXTRACT_NUMERATOR = Op(OpName.EXTRACT_NUMERATOR)
INFUSE_DENOMINATOR = Op(OpName.INFUSE_DENOMINATOR)
EXTRACT_DENOMINATOR = Op(OpName.EXTRACT_DENOMINATOR)
FLIP_DENOMINATOR = Op(OpName.FLIP_DENOMINATOR)


def inner_left(script: Script) -> Op:
    """Build an op applying ``script`` to the left operand."""
    return Op(OpName.INNER_LEFT, tuple(script))


def inner_right(script: Script) -> Op:
    """Build an op applying ``script`` to the right operand."""
    return Op(OpName.INNER_RIGHT, tuple(script))


def format_script(script: Script) -> str:
    """Render a script as comma separated op names, e.g. ``commutative, reduction``."""
    return ", ".join(str(op) for op in script)


class Simplification(NamedTuple):
    """Result of ``simplify``: canonical shape and the script reaching it."""

    shape: Shape
    script: Script


def simplify(shape: Shape) -> Simplification:
    """Compute the canonical shape and the rewrite script for ``shape``.

    The function is total: every well-formed shape has a canonical form,
    possibly the shape itself with an empty script.

    Args:
        shape: Shape to simplify.

    Returns:
        Simplification: ``(canonical_shape, script)``.
    """
    result = _simplify(shape)
    if result.script:
        logger.debug(
            "simplified %r to %r via [%s]", shape, result.shape, format_script(result.script)
        )
    return result


def _simplify(shape: Shape) -> Simplification:
    if isinstance(shape, Quotient):
        return _simplify_quotient(shape)
    if isinstance(shape, Product):
        return _simplify_product(shape)
    return Simplification(shape, ())


def _continue(ops: Script, shape: Shape) -> Simplification:
    rest = _simplify(shape)
    return Simplification(rest.shape, tuple(ops) + rest.script)


def _inner_ops(left: Script, right: Script) -> Script:
    ops = ()
    if left:
        ops += (inner_left(left),)
    if right:
        ops += (inner_right(right),)
    return ops


def _simplify_quotient(shape: Quotient) -> Simplification:
    a, b = shape.numerator, shape.denominator

    # A / A = Scalar
    if a == b:
        return Simplification(SCALAR, (REDUCTION,))
    # A / Scalar = A
    if b == SCALAR:
        return _continue((SCALAR_OP,), a)
    if isinstance(a, Product):
        # (X * B) / B = X
        if a.right == b:
            return _continue((REDUCTION_RIGHT,), a.left)
        # (B * Y) / B = Y
        if a.left == b:
            return _continue((REDUCTION_LEFT,), a.right)

    numerator = _simplify(a)
    denominator = _simplify(b)
    ops = _inner_ops(numerator.script, denominator.script)
    if not ops:
        return Simplification(shape, ())
    # Operands are canonical now, so the second pass only checks the rules above
    return _continue(ops, Quotient(numerator.shape, denominator.shape))


def _simplify_product(shape: Product) -> Simplification:
    left = _simplify(shape.left)
    right = _simplify(shape.right)
    ops = _inner_ops(left.script, right.script)
    lhs, rhs = left.shape, right.shape

    # L * Scalar = L
    if rhs == SCALAR:
        return _continue(ops + (SCALAR_OP,), lhs)
    # Scalar * R = R * Scalar = R
    if lhs == SCALAR:
        return _continue(ops + (COMMUTATIVE, SCALAR_OP), rhs)
    # X/Y * Y = X
    if isinstance(lhs, Quotient) and lhs.denominator == rhs:
        return _continue(ops + (REDUCTION,), lhs.numerator)
    # Y * X/Y = X/Y * Y = X
    if isinstance(rhs, Quotient) and rhs.denominator == lhs:
        return _continue(ops + (COMMUTATIVE, REDUCTION), rhs.numerator)

    if isinstance(lhs, Product) and isinstance(rhs, Quotient):
        a, b = lhs.left, lhs.right
        # (A * B) * C/B = A * (B * C/B)
        if b == rhs.denominator:
            return _continue(ops + (ASSOCIATIVE,), Product(a, Product(b, rhs)))
        # (A * B) * C/A = (B * A) * C/A = B * (A * C/A)
        if a == rhs.denominator:
            regroup = (inner_left((COMMUTATIVE,)), ASSOCIATIVE)
            return _continue(ops + regroup, Product(b, Product(a, rhs)))

    if isinstance(lhs, Quotient) and isinstance(rhs, Product):
        # A/B * (C * D) with B in (C, D): move the product left so the rules above apply
        if lhs.denominator in (rhs.left, rhs.right):
            return _continue(ops + (COMMUTATIVE,), Product(rhs, lhs))

    return Simplification(Product(lhs, rhs), ops)
