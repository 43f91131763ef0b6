"""Unit-shaped measurements with a proving simplifier.

shapeunits lets numeric measurements carry the shape of their physical unit
(``m``, ``m/s``, ``m/s/s``) and proves when the compound shape produced by
multiplying or dividing two measurements can be rewritten into a simpler,
equivalent one. The simplifier returns both the canonical shape and the
exact script of rewrite steps; the executor replays that script on a value,
relabeling it without touching the number.

Framework Components:
    Shape Term Model (shapeunits.shape):
        • Scalar, Atomic, Product and Quotient nodes with structural equality
        • Rendering (``m/ss``) and exponent-based algebraic equivalence

    Simplifier and Executor (shapeunits.shape):
        • simplify(shape) -> (canonical_shape, script)
        • execute(value, script), rewrite(shape, script), print_trace

    Unit Values (shapeunits.unit):
        • UnitValue algebra: + - with conversion, * / building compound shapes
        • Declared units for distance, time, angle, speed and acceleration
        • Power-of-ten and real-multiplier conversion rates
        • Angle normalization into [-M, M)
        • Approximate equality and float status queries

Usage Patterns:
    >>> from shapeunits import Meter, Second, simplify
    >>> goal = (Meter(10.0) / Second(2.0)) * Second(3.0)
    >>> print(goal)  # "15m/ss"
    >>> shape, script = simplify(goal.shape)
    >>> print(goal.request_shape(Meter))  # "15m"
"""

from .errors import (
    ConversionUnavailableError,
    IncompatibleUnitError,
    InvalidRateError,
    ShapeMismatchError,
    UnitError,
    UnreachableShapeError,
)
from .logging_config import setup_logging
from .shape import (
    SCALAR,
    Atomic,
    Op,
    OpName,
    Product,
    Quotient,
    Scalar,
    Script,
    Shape,
    Simplification,
    equivalent,
    execute,
    format_script,
    print_trace,
    render,
    rewrite,
    simplify,
)
from .unit import (
    Angle,
    ConversionTable,
    Degree,
    DegreePerSecond,
    ExponentRate,
    Hour,
    Kilometer,
    KilometerPerHour,
    Meter,
    MeterPerSecond,
    MeterPerSecondSquared,
    Millimeter,
    Millisecond,
    Minute,
    Radian,
    RadianPerSecond,
    RealRate,
    Second,
    UnitValue,
    abs_diff_eq,
    add,
    convert,
    display,
    div,
    mul,
    normalize,
    relative_eq,
    request_shape,
    sub,
    ulps_eq,
)

__version__ = "0.1.0"

__all__ = [
    # Shapes
    "Shape",
    "Scalar",
    "Atomic",
    "Product",
    "Quotient",
    "SCALAR",
    "render",
    "equivalent",
    # Simplifier and executor
    "simplify",
    "Simplification",
    "Op",
    "OpName",
    "Script",
    "format_script",
    "rewrite",
    "execute",
    "print_trace",
    # Unit values
    "UnitValue",
    "add",
    "sub",
    "mul",
    "div",
    "display",
    "request_shape",
    "convert",
    "normalize",
    "abs_diff_eq",
    "relative_eq",
    "ulps_eq",
    # Conversions
    "ExponentRate",
    "RealRate",
    "ConversionTable",
    # Declared units
    "Angle",
    "Radian",
    "Degree",
    "Meter",
    "Kilometer",
    "Millimeter",
    "Second",
    "Millisecond",
    "Minute",
    "Hour",
    "MeterPerSecond",
    "KilometerPerHour",
    "MeterPerSecondSquared",
    "DegreePerSecond",
    "RadianPerSecond",
    # Errors and logging
    "UnitError",
    "ShapeMismatchError",
    "UnreachableShapeError",
    "InvalidRateError",
    "ConversionUnavailableError",
    "IncompatibleUnitError",
    "setup_logging",
]
