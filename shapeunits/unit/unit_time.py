"""Time unit definitions.

This module provides the atomic time units used as denominators of rates
(speed, acceleration, angular velocity) and for elapsed durations.
Sub-second units convert by powers of ten; minutes and hours by real
multipliers.

Classes:
    Second: Base time unit (symbol ``s``).
    Millisecond: 1/1000 second (symbol ``ms``).
    Minute: 60 seconds (symbol ``min``).
    Hour: 3600 seconds (symbol ``h``).

Type Aliases:
    Time: Union type for all time units.

Example:
    >>> duration = Hour(2.5)
    >>> print(duration)  # "2.5h"
    >>> print(duration.convert(Second))  # "9000s"
"""

from __future__ import annotations

from .conversion import ExponentRate, RealRate
from .unit_base import UnitValue


class Second(UnitValue):
    """Time unit: Second.

    Attributes:
        SYMBOL (str): "s", the standard symbol for seconds.

    Example:
        >>> time_interval = Second(5.5)
        >>> print(time_interval)  # "5.5s"
    """

    __slots__ = ()

    SYMBOL = "s"
    CONVERSIONS = {
        "ms": ExponentRate(3),
        "min": RealRate(1 / 60),
        "h": RealRate(1 / 3600),
    }


class Millisecond(UnitValue):
    """Time unit: Millisecond (1/1000 second)."""

    __slots__ = ()

    SYMBOL = "ms"
    CONVERSIONS = {"s": ExponentRate(-3)}


class Minute(UnitValue):
    """Time unit: Minute (60 seconds).

    Example:
        >>> print(Minute(2.5).convert(Second))  # "150s"
    """

    __slots__ = ()

    SYMBOL = "min"
    CONVERSIONS = {"s": RealRate(60.0), "h": RealRate(1 / 60)}


class Hour(UnitValue):
    """Time unit: Hour (3600 seconds)."""

    __slots__ = ()

    SYMBOL = "h"
    CONVERSIONS = {"s": RealRate(3600.0), "min": RealRate(60.0)}


Time = Second | Millisecond | Minute | Hour  # Type alias for any time unit
