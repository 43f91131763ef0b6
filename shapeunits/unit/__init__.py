"""Unit values, declared units, conversions and angle normalization.

This package provides the value-level side of the unit system. A UnitValue
pairs a numeric payload with a shape; declared unit classes fix that shape
and their conversion rates at class creation.

Architecture:
    - unit_base: UnitValue algebra and the declared-unit registry
    - unit_float: Floating-point status queries shared by all unit values
    - conversion: Exponent and real conversion rates, conversion tables
    - approx: Tolerance-based equality of unit values
    - unit_angle: Bounded angles (Radian, Degree) and normalization
    - unit_distance: Meter, Kilometer, Millimeter
    - unit_time: Second, Millisecond, Minute, Hour
    - unit_velocity: Speed, acceleration and angular velocity units

Example:
    >>> from shapeunits.unit import Meter, Second, MeterPerSecond
    >>> speed = (Meter(10.0) / Second(2.0)).request_shape(MeterPerSecond)
    >>> print(speed)  # "5m/s"
    >>> print(Meter(1.0) + Millimeter(1.0))  # "1.001m"
"""

from .approx import abs_diff_eq, relative_eq, ulps_eq
from .conversion import ConversionTable, ExponentRate, Rate, RealRate
from .unit_angle import Angle, Degree, Radian, normalize, wrap_angle
from .unit_base import (
    UnitValue,
    add,
    convert,
    display,
    div,
    mul,
    request_shape,
    sub,
    unit_for,
)
from .unit_distance import Kilometer, Length, Meter, Millimeter
from .unit_float import FloatStatus, machine_epsilon
from .unit_time import Hour, Millisecond, Minute, Second, Time
from .unit_velocity import (
    DegreePerSecond,
    KilometerPerHour,
    MeterPerSecond,
    MeterPerSecondSquared,
    RadianPerSecond,
    Velocity,
)

__all__ = [
    # Base classes
    "UnitValue",
    "FloatStatus",
    "unit_for",
    # Value algebra
    "add",
    "sub",
    "mul",
    "div",
    "display",
    "request_shape",
    "convert",
    # Conversion rates
    "ExponentRate",
    "RealRate",
    "Rate",
    "ConversionTable",
    # Approximate comparison
    "abs_diff_eq",
    "relative_eq",
    "ulps_eq",
    "machine_epsilon",
    # Angular units
    "Angle",
    "Radian",
    "Degree",
    "normalize",
    "wrap_angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Millimeter",
    "Length",
    # Time units
    "Second",
    "Millisecond",
    "Minute",
    "Hour",
    "Time",
    # Compound units
    "MeterPerSecond",
    "KilometerPerHour",
    "MeterPerSecondSquared",
    "DegreePerSecond",
    "RadianPerSecond",
    "Velocity",
]
