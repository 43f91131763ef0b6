"""Distance and length unit definitions.

These units are the atomic length units used by motion measurements: sensor
ranges, travelled distances and the numerators of speed and acceleration
shapes. Each unit converts directly to the others by a power of ten.

Classes:
    Meter: Base distance unit (symbol ``m``).
    Kilometer: 1000 meters (symbol ``km``).
    Millimeter: 1/1000 meter (symbol ``mm``).

Type Aliases:
    Length: Union type for all distance units.

Example:
    >>> flight_range = Kilometer(25.5)
    >>> print(flight_range)  # "25.5km"
    >>> print(flight_range.convert(Meter))  # "25500m"
    >>> print(Meter(1.0) + Millimeter(1.0))  # "1.001m"
"""

from __future__ import annotations

from .conversion import ExponentRate
from .unit_base import UnitValue


class Meter(UnitValue):
    """Distance unit: Meter.

    Attributes:
        SYMBOL (str): "m", the standard symbol for meters.
        CONVERSIONS: Kilometers are 3 decades larger, millimeters 3 smaller.

    Example:
        >>> altitude = Meter(150.5)
        >>> print(altitude)  # "150.5m"
    """

    __slots__ = ()

    SYMBOL = "m"
    CONVERSIONS = {"km": ExponentRate(-3), "mm": ExponentRate(3)}


class Kilometer(UnitValue):
    """Distance unit: Kilometer (1000 meters).

    Example:
        >>> Kilometer(1.0).convert(Meter)
        Meter(1000.0)
    """

    __slots__ = ()

    SYMBOL = "km"
    CONVERSIONS = {"m": ExponentRate(3), "mm": ExponentRate(6)}


class Millimeter(UnitValue):
    """Distance unit: Millimeter (1/1000 meter)."""

    __slots__ = ()

    SYMBOL = "mm"
    CONVERSIONS = {"m": ExponentRate(-3), "km": ExponentRate(-6)}


Length = Meter | Kilometer | Millimeter  # Type alias for any length unit
