"""Angular unit definitions and angle normalization.

This module provides bounded angular units. Every angle class declares a
modulus ``M`` (``pi`` for radians, ``180`` for degrees) defining the canonical
half-open range ``[-M, M)``. ``normalize`` maps any real input onto the single
representative of its equivalence class in that range.

These units are commonly used for:
- Orientation (pitch, roll, yaw) read from motion sensors
- Servo target positions
- Headings and bearings

Classes:
    Angle: Family base carrying the modulus and normalization.
    Radian: Angular unit in radians.
    Degree: Angular unit in degrees.

Functions:
    wrap_angle: Normalize a raw number for a given modulus.
    normalize: Normalize an angle value.

Example:
    >>> Degree(540.0).normalize()
    Degree(-180.0)
    >>> Degree(-400.0).normalize()
    Degree(-40.0)
    >>> print(Degree(90.0).convert(Radian))  # "1.5707963267948966rad"
"""

from __future__ import annotations

from math import pi
from typing import ClassVar

import numpy as np

from ..config import BASE_TYPE
from .conversion import RealRate
from .unit_base import UnitValue
from .unit_float import float_dtype


def wrap_angle(value: BASE_TYPE, modulus: float) -> BASE_TYPE:
    """Wrap ``value`` into ``[-modulus, modulus)``.

    The value is reduced modulo ``2 * modulus`` (keeping the dividend's sign),
    shifted by one period when its magnitude reaches the modulus, and a result
    within machine epsilon of ``+modulus`` is snapped to ``-modulus``. Epsilon
    is that of the value's floating dtype, float64 for integers.

    Args:
        value: Raw angle, scalar or array.
        modulus: Half the period of the angle unit.

    Returns:
        Wrapped value; NumPy scalars and arrays keep their dtype, Python
        numbers come back as ``float``.
    """
    dtype = float_dtype(value)
    eps = np.finfo(dtype).eps
    modulus = dtype.type(modulus)
    period = dtype.type(2 * modulus)

    reduced = np.fmod(np.asarray(value, dtype=dtype), period)
    shift = np.where(reduced > 0, -period, period).astype(dtype)
    wrapped = np.where(np.abs(reduced) < modulus, reduced, reduced + shift)
    wrapped = np.where(np.abs(wrapped - modulus) < eps, -modulus, wrapped).astype(dtype)

    if np.ndim(value) > 0:
        return wrapped
    if isinstance(value, np.generic):
        return dtype.type(wrapped)
    return float(wrapped)


class Angle(UnitValue):
    """Base class for bounded angular units.

    Attributes:
        MODULUS (ClassVar[float]): Half period ``M`` of the canonical range.
    """

    __slots__ = ()

    MODULUS: ClassVar[float]

    def normalize(self) -> Angle:
        """Return the equivalent angle inside ``[-MODULUS, MODULUS)``."""
        return type(self)(wrap_angle(self.value, type(self).MODULUS))


class Radian(Angle):
    """Angular unit: Radian, canonical range ``[-pi, pi)``.

    Attributes:
        SYMBOL (str): "rad".
        MODULUS (float): pi.
    """

    __slots__ = ()

    SYMBOL = "rad"
    MODULUS = pi
    CONVERSIONS = {"°": RealRate(180 / pi)}


class Degree(Angle):
    """Angular unit: Degree, canonical range ``[-180, 180)``.

    Attributes:
        SYMBOL (str): "°".
        MODULUS (float): 180.

    Example:
        >>> bearing = Degree(270.0).normalize()
        >>> print(bearing)  # "-90°"
    """

    __slots__ = ()

    SYMBOL = "°"
    MODULUS = 180.0
    CONVERSIONS = {"rad": RealRate(pi / 180)}


def normalize(angle: Angle) -> Angle:
    return angle.normalize()
