"""Exception types raised by the unit shape library.

Every failure in this package is a deterministic precondition violation:
callers fix the call site rather than retry. Each exception also derives
from the built-in type a caller would naturally expect (``ValueError``,
``TypeError``, ``LookupError``) so existing handlers keep working.
"""


class UnitError(Exception):
    """Base class for all unit library errors."""


class ShapeMismatchError(UnitError, ValueError):
    """A rewrite operation was applied to a shape it does not match."""


class UnreachableShapeError(UnitError, ValueError):
    """The requested target shape is not the simplifier's canonical shape."""

    def __init__(self, source, canonical, target):
        self.source = source
        self.canonical = canonical
        self.target = target
        super().__init__(
            f"cannot rewrite {source!r} to {target!r}: canonical shape is {canonical!r}"
        )


class InvalidRateError(UnitError, ValueError):
    """A conversion rate is zero, NaN, infinite or out of range."""


class ConversionUnavailableError(UnitError, LookupError):
    """No conversion is declared between the two units."""


class IncompatibleUnitError(UnitError, TypeError):
    """Two unit values with different, unconvertible shapes were combined."""
