"""Velocity, acceleration and angular velocity unit definitions.

These are compound units: each declares its ``SHAPE`` rather than a symbol,
so that a value produced by dividing a distance by a time (and simplifying)
comes back as the matching class. Their display names are derived from the
shape, e.g. ``m/s`` and ``m/s/s``.

Classes:
    MeterPerSecond: Speed, ``Quotient(m, s)``.
    KilometerPerHour: Speed, ``Quotient(km, h)``.
    MeterPerSecondSquared: Acceleration, ``Quotient(Quotient(m, s), s)``.
    DegreePerSecond: Angular velocity, ``Quotient(°, s)``.
    RadianPerSecond: Angular velocity, ``Quotient(rad, s)``.

Type Aliases:
    Velocity: Union type for linear speed units.

Example:
    >>> speed = (Meter(10.0) / Second(2.0)).request_shape(MeterPerSecond)
    >>> print(speed.convert(KilometerPerHour))  # "18km/h"
"""

from __future__ import annotations

from math import pi

from ..shape import Quotient
from .conversion import RealRate
from .unit_angle import Degree, Radian
from .unit_base import UnitValue
from .unit_distance import Kilometer, Meter
from .unit_time import Hour, Second


class MeterPerSecond(UnitValue):
    """Speed in meters per second."""

    __slots__ = ()

    SHAPE = Quotient(Meter.SHAPE, Second.SHAPE)
    CONVERSIONS = {"km/h": RealRate(3.6)}


class KilometerPerHour(UnitValue):
    """Speed in kilometers per hour."""

    __slots__ = ()

    SHAPE = Quotient(Kilometer.SHAPE, Hour.SHAPE)
    CONVERSIONS = {"m/s": RealRate(1 / 3.6)}


class MeterPerSecondSquared(UnitValue):
    """Acceleration: a speed per second, as reported by accelerometers."""

    __slots__ = ()

    SHAPE = Quotient(MeterPerSecond.SHAPE, Second.SHAPE)


class DegreePerSecond(UnitValue):
    """Angular velocity in degrees per second, as reported by gyroscopes."""

    __slots__ = ()

    SHAPE = Quotient(Degree.SHAPE, Second.SHAPE)
    CONVERSIONS = {"rad/s": RealRate(pi / 180)}


class RadianPerSecond(UnitValue):
    """Angular velocity in radians per second."""

    __slots__ = ()

    SHAPE = Quotient(Radian.SHAPE, Second.SHAPE)
    CONVERSIONS = {"°/s": RealRate(180 / pi)}


Velocity = MeterPerSecond | KilometerPerHour  # Type alias for linear speed units
