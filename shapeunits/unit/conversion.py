"""Fixed-rate conversion declarations between units.

Each declared unit class lists the units it converts to in its
``CONVERSIONS`` class attribute, keyed by target unit name. Two encodings are
supported:

- ExponentRate: a signed power of ten. A positive exponent means the target
  unit is that many decades smaller (``Kilometer -> Meter`` is ``+3``), so
  the value is multiplied; a negative exponent divides.
- RealRate: an arbitrary multiplier, ``target = source * rate``.

Rates are validated when they are created and tables when the unit class is
declared, so a zero or NaN multiplier fails long before any value uses it.
Conversions are strictly pairwise: a path that is not declared directly is
not inferred from other declarations.

Example:
    >>> class Meter(UnitValue):
    ...     SYMBOL = "m"
    ...     CONVERSIONS = {"km": ExponentRate(-3), "ft": RealRate(3.28084)}
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Integral, Real

from ..errors import ConversionUnavailableError, InvalidRateError

EXPONENT_MIN = -128
EXPONENT_MAX = 127


@dataclass(frozen=True)
class ExponentRate:
    """Conversion by a power of ten.

    Attributes:
        exponent: Signed number of decades, limited to a signed byte.
    """

    exponent: int

    def __post_init__(self):
        if isinstance(self.exponent, bool) or not isinstance(self.exponent, Integral):
            msg = f"Exponent must be an integer, got {self.exponent!r}"
            raise InvalidRateError(msg)
        if not EXPONENT_MIN <= self.exponent <= EXPONENT_MAX:
            msg = f"Exponent {self.exponent} outside [{EXPONENT_MIN}, {EXPONENT_MAX}]"
            raise InvalidRateError(msg)

    def apply(self, value):
        """Convert a raw value in the source unit into the target unit."""
        if self.exponent >= 0:
            return value * 10 ** self.exponent
        return value / 10 ** -self.exponent


@dataclass(frozen=True)
class RealRate:
    """Conversion by an arbitrary non-zero, finite multiplier.

    Attributes:
        rate: Multiplier applied to the source value.
    """

    rate: float

    def __post_init__(self):
        if isinstance(self.rate, bool) or not isinstance(self.rate, Real):
            msg = f"Rate must be a real number, got {self.rate!r}"
            raise InvalidRateError(msg)
        if math.isnan(self.rate):
            raise InvalidRateError("Rate must not be NaN")
        if self.rate == 0:
            raise InvalidRateError("Zero rate would collapse every value")
        if math.isinf(self.rate):
            raise InvalidRateError("Rate must be finite")

    def apply(self, value):
        """Convert a raw value in the source unit into the target unit."""
        return value * self.rate


Rate = ExponentRate | RealRate


class ConversionTable:
    """Declared conversions from one source unit to its target units.

    Attributes:
        source: Name of the unit the table converts from.
    """

    __slots__ = ("source", "_rates")

    def __init__(self, source: str, rates: Mapping[str, Rate] | None = None):
        """Validate and store the declared rates.

        Args:
            source: Name of the source unit.
            rates: Mapping of target unit name to rate.

        Raises:
            InvalidRateError: If a rate is not an ExponentRate or RealRate,
                or a unit declares a conversion to itself.
        """
        self.source = source
        self._rates: dict[str, Rate] = {}
        for target, rate in (rates or {}).items():
            if not isinstance(rate, (ExponentRate, RealRate)):
                msg = f"{source} -> {target}: expected ExponentRate or RealRate, got {rate!r}"
                raise InvalidRateError(msg)
            if target == source:
                msg = f"{source} declares a conversion to itself"
                raise InvalidRateError(msg)
            self._rates[target] = rate

    def rate_for(self, target: str) -> Rate:
        """Look up the declared rate to ``target``.

        Raises:
            ConversionUnavailableError: If no direct conversion is declared.
        """
        try:
            return self._rates[target]
        except KeyError:
            msg = f"No conversion declared from {self.source!r} to {target!r}"
            raise ConversionUnavailableError(msg) from None

    @property
    def targets(self) -> tuple[str, ...]:
        return tuple(sorted(self._rates))

    def __contains__(self, target: str) -> bool:
        return target in self._rates

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"ConversionTable({self.source!r}, {self._rates!r})"
