"""Shape term model, simplifier and rewrite executor.

Components:
    shape_base: Shape node types, structural equality, rendering and
                exponent analysis
    simplify: Rewrite engine producing canonical shapes and scripts
    execute: Script execution on shapes and unit values, rewrite traces

Typical Usage:
    >>> from shapeunits.shape import Atomic, simplify, rewrite
    >>> m, s = Atomic("m"), Atomic("s")
    >>> shape, script = simplify(s * (m / s))
    >>> rewrite(s * (m / s), script) == shape == m
    True
"""

from .execute import RewriteStep, apply_op, execute, print_trace, rewrite, trace
from .shape_base import (
    SCALAR,
    Atomic,
    Product,
    Quotient,
    Scalar,
    Shape,
    depth,
    equals,
    equivalent,
    exponents,
    render,
    size,
)
from .simplify import (
    ASSOCIATIVE,
    COMMUTATIVE,
    EXTRACT_DENOMINATOR,
    EXTRACT_NUMERATOR,
    FLIP_DENOMINATOR,
    INFUSE_DENOMINATOR,
    INFUSE_NUMERATOR,
    REDUCTION,
    REDUCTION_LEFT,
    REDUCTION_RIGHT,
    SCALAR_OP,
    Op,
    OpName,
    Script,
    Simplification,
    format_script,
    inner_left,
    inner_right,
    simplify,
)

__all__ = [
    # Shape model
    "Shape",
    "Scalar",
    "Atomic",
    "Product",
    "Quotient",
    "SCALAR",
    "equals",
    "equivalent",
    "exponents",
    "render",
    "size",
    "depth",
    # Simplifier
    "simplify",
    "Simplification",
    "Op",
    "OpName",
    "Script",
    "format_script",
    "inner_left",
    "inner_right",
    "COMMUTATIVE",
    "ASSOCIATIVE",
    "REDUCTION",
    "REDUCTION_LEFT",
    "REDUCTION_RIGHT",
    "SCALAR_OP",
    "INFUSE_NUMERATOR",
    "EXTRACT_NUMERATOR",
    "INFUSE_DENOMINATOR",
    "EXTRACT_DENOMINATOR",
    "FLIP_DENOMINATOR",
    # Executor
    "apply_op",
    "rewrite",
    "execute",
    "trace",
    "print_trace",
    "RewriteStep",
]
