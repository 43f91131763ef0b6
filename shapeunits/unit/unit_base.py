"""Unit value algebra and the declared-unit registry.

This module provides UnitValue, the immutable pairing of a numeric payload
with a shape descriptor, and the class-declaration mechanism used to define
concrete units. A unit class declares either a ``SYMBOL`` (atomic unit) or a
``SHAPE`` (compound unit) plus optional ``CONVERSIONS``; ``__init_subclass__``
builds the conversion table and registers the class under its shape, so that
rewriting a value to a declared shape gives back an instance of that class.

Arithmetic follows the shapes:

- ``a + b`` and ``a - b`` need equal shapes, after converting ``b`` into
  ``a``'s unit with ``b``'s own declared conversion when the shapes differ.
- ``a * b`` and ``a / b`` always succeed and build ``Product``/``Quotient``
  shapes; a bare number counts as a Scalar-shaped value.
- ``request_shape`` simplifies the compound shape and retags the value,
  failing loudly when the requested shape is not the canonical one.

Classes:
    UnitValue: Numeric payload tagged with a shape.

Example:
    >>> distance = Meter(10.0)
    >>> elapsed = Second(2.0)
    >>> speed = distance / elapsed
    >>> str(speed * Second(3.0))
    '15m/ss'
    >>> str((speed * Second(3.0)).request_shape(Meter))
    '15m'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Number
from typing import ClassVar

import numpy as np

from ..config import BASE_TYPE
from ..errors import (
    ConversionUnavailableError,
    IncompatibleUnitError,
    ShapeMismatchError,
    UnreachableShapeError,
)
from ..shape import SCALAR, Atomic, Product, Quotient, Shape, execute, render, simplify
from .conversion import ConversionTable, Rate
from .unit_float import FloatStatus

logger = logging.getLogger(__name__)

_UNITS_BY_SHAPE: dict[Shape, type[UnitValue]] = {}
_UNITS_BY_NAME: dict[str, type[UnitValue]] = {}


def unit_for(target: Shape | str) -> type[UnitValue] | None:
    """Find the declared unit class for a shape or unit name, if any."""
    if isinstance(target, str):
        return _UNITS_BY_NAME.get(target)
    return _UNITS_BY_SHAPE.get(target)


def _build(value: BASE_TYPE, shape: Shape) -> UnitValue:
    cls = _UNITS_BY_SHAPE.get(shape)
    if cls is None:
        return UnitValue(value, shape)
    return cls(value)


def _format_number(value: BASE_TYPE) -> str:
    if isinstance(value, (float, np.floating)) and np.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


class UnitValue(FloatStatus):
    """Immutable numeric payload tagged with a unit shape.

    Plain ``UnitValue`` instances carry compound shapes built by arithmetic.
    Subclasses declare concrete units and are constructed from the raw number
    alone, e.g. ``Meter(3.0)``.

    Attributes:
        SYMBOL (ClassVar[str]): Unit name; set for atomic units, derived from
            ``SHAPE`` for compound units.
        SHAPE (ClassVar[Shape | None]): Shape of the declared unit.
        CONVERSIONS (ClassVar[Mapping[str, Rate]]): Declared conversions keyed
            by target unit name.
        conversions (ClassVar[ConversionTable]): Validated table built from
            ``CONVERSIONS`` when the class is declared.
    """

    __slots__ = ("_value", "_shape")
    __array_priority__ = 1000
    __array_ufunc__ = None

    SYMBOL: ClassVar[str] = ""
    SHAPE: ClassVar[Shape | None] = None
    CONVERSIONS: ClassVar[Mapping[str, Rate]] = {}
    conversions: ClassVar[ConversionTable] = ConversionTable("")

    def __init_subclass__(cls, **kwargs):
        """Derive the shape and conversion table of a declared unit and register it.

        Classes that declare neither ``SYMBOL`` nor ``SHAPE`` are family bases
        (such as ``Angle``) and are not registered.

        Raises:
            InvalidRateError: If ``CONVERSIONS`` holds an invalid rate.
        """
        super().__init_subclass__(**kwargs)
        own = cls.__dict__
        if own.get("SYMBOL"):
            cls.SHAPE = Atomic(cls.SYMBOL)
        elif own.get("SHAPE") is not None:
            cls.SYMBOL = render(cls.SHAPE)
        else:
            cls.SYMBOL = ""
            cls.SHAPE = None
            cls.conversions = ConversionTable("")
            return

        cls.conversions = ConversionTable(cls.SYMBOL, own.get("CONVERSIONS", {}))
        if _UNITS_BY_SHAPE.setdefault(cls.SHAPE, cls) is not cls:
            logger.debug("%s redeclares unit %r; keeping %s", cls.__name__, cls.SYMBOL,
                         _UNITS_BY_SHAPE[cls.SHAPE].__name__)
        _UNITS_BY_NAME.setdefault(cls.SYMBOL, cls)

    def __init__(self, value: BASE_TYPE, shape: Shape | None = None):
        """Create a unit value.

        Args:
            value: Raw numeric payload.
            shape: Shape tag; required for plain ``UnitValue``, optional for
                declared units where it must equal the declared shape.

        Raises:
            TypeError: If the payload is itself a unit value or no shape is known.
            ShapeMismatchError: If ``shape`` contradicts the declared shape.
        """
        declared = type(self).SHAPE
        if shape is None:
            if declared is None:
                msg = f"{type(self).__name__} requires an explicit shape"
                raise TypeError(msg)
            shape = declared
        elif not isinstance(shape, Shape):
            msg = f"shape must be a Shape, got {shape!r}"
            raise TypeError(msg)
        elif declared is not None and shape != declared:
            msg = f"{type(self).__name__} has shape {declared!r}, not {shape!r}"
            raise ShapeMismatchError(msg)
        if isinstance(value, UnitValue):
            msg = f"cannot wrap unit value {value!r} as a payload"
            raise TypeError(msg)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_shape", shape)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> BASE_TYPE:
        return self._value

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def unit_name(self) -> str:
        return render(self._shape)

    def with_shape(self, shape: Shape) -> UnitValue:
        """Same payload under a different shape, as a declared unit when one matches."""
        return _build(self._value, shape)

    def _rebuild(self, value: BASE_TYPE) -> UnitValue:
        if type(self).SHAPE is not None:
            return type(self)(value)
        return UnitValue(value, self._shape)

    # -------------------------------- Shape rewriting --------------------------------
    def simplified(self) -> UnitValue:
        """Retag with the canonical shape of the current one."""
        return execute(self, simplify(self._shape).script)

    def request_shape(self, target: Shape | type[UnitValue]) -> UnitValue:
        """Retag the value with ``target``, which must be its canonical shape.

        Args:
            target: Expected canonical shape or declared unit class.

        Returns:
            UnitValue: Same payload tagged with the target shape.

        Raises:
            UnreachableShapeError: If simplification does not produce ``target``.
        """
        if isinstance(target, type) and issubclass(target, UnitValue):
            target_shape = target.SHAPE
        else:
            target_shape = target
        if not isinstance(target_shape, Shape):
            msg = f"target must be a Shape or declared unit, got {target!r}"
            raise TypeError(msg)

        canonical, script = simplify(self._shape)
        if canonical != target_shape:
            logger.warning("unreachable shape %r requested for %r", target_shape, self._shape)
            raise UnreachableShapeError(self._shape, canonical, target_shape)
        result = execute(self, script)
        if isinstance(target, type) and not isinstance(result, target):
            result = target(result.value)
        return result

    # -------------------------------- Conversion --------------------------------
    def convert(self, target: type[UnitValue] | str) -> UnitValue:
        """Convert to another declared unit using this unit's declared rate.

        Args:
            target: Target unit class or unit name.

        Returns:
            UnitValue: Instance of the target unit.

        Raises:
            ConversionUnavailableError: If no direct conversion is declared.
        """
        name = target if isinstance(target, str) else target.SYMBOL
        if name == self.unit_name:
            return self
        rate = type(self).conversions.rate_for(name)
        target_cls = target if isinstance(target, type) else _UNITS_BY_NAME.get(name)
        if target_cls is None:
            msg = f"{self.unit_name!r} declares a rate to {name!r}, but no such unit exists"
            raise ConversionUnavailableError(msg)
        return target_cls(rate.apply(self._value))

    def _aligned(self, other) -> BASE_TYPE:
        """Payload of ``other`` expressed in this value's unit."""
        if isinstance(other, UnitValue):
            if other.shape == self._shape:
                return other.value
            if self.unit_name in type(other).conversions:
                return other.convert(self.unit_name).value
            msg = f"cannot combine {self.unit_name!r} with {other.unit_name!r}"
            raise IncompatibleUnitError(msg)
        if self._shape == SCALAR and _is_number(other):
            return other
        msg = f"cannot combine {self.unit_name!r} with {other!r}"
        raise IncompatibleUnitError(msg)

    # -------------------------------- Arithmetic Operations --------------------------------
    def add(self, other: UnitValue) -> UnitValue:
        """Sum in this value's unit; ``other`` is converted when it declares a rate."""
        return self._rebuild(self._value + self._aligned(other))

    def sub(self, other: UnitValue) -> UnitValue:
        """Difference in this value's unit."""
        return self._rebuild(self._value - self._aligned(other))

    def mul(self, other) -> UnitValue:
        """Product value tagged ``Product(self.shape, other.shape)``."""
        other = _as_unit(other)
        return _build(self._value * other.value, Product(self._shape, other.shape))

    def div(self, other) -> UnitValue:
        """Quotient value tagged ``Quotient(self.shape, other.shape)``."""
        other = _as_unit(other)
        return _build(self._value / other.value, Quotient(self._shape, other.shape))

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        if _is_number(other):
            return _as_unit(other).add(self)
        return NotImplemented

    def __sub__(self, other):
        return self.sub(other)

    def __rsub__(self, other):
        if _is_number(other):
            return _as_unit(other).sub(self)
        return NotImplemented

    def __mul__(self, other):
        if not (isinstance(other, UnitValue) or _is_number(other)):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        if _is_number(other):
            return _as_unit(other).mul(self)
        return NotImplemented

    def __truediv__(self, other):
        if not (isinstance(other, UnitValue) or _is_number(other)):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if _is_number(other):
            return _as_unit(other).div(self)
        return NotImplemented

    def __neg__(self) -> UnitValue:
        return self._rebuild(-self._value)

    def __abs__(self) -> UnitValue:
        return self._rebuild(abs(self._value))

    def abs(self) -> UnitValue:
        return abs(self)

    # -------------------------------- Comparisons --------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, UnitValue):
            return NotImplemented
        return self._shape == other.shape and self._value == other.value

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self._shape, self._value))

    def __lt__(self, other) -> bool:
        return self._value < self._aligned(other)

    def __le__(self, other) -> bool:
        return self._value <= self._aligned(other)

    def __gt__(self, other) -> bool:
        return self._value > self._aligned(other)

    def __ge__(self, other) -> bool:
        return self._value >= self._aligned(other)

    def __float__(self) -> float:
        return float(self._value)

    def display(self) -> str:
        """Payload followed by the rendered shape, e.g. ``"10m"`` or ``"2.5"``."""
        return f"{_format_number(self._value)}{self.unit_name}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        if type(self).SHAPE is not None:
            return f"{type(self).__name__}({self._value!r})"
        return f"UnitValue({self._value!r}, {self._shape!r})"


def _is_number(value) -> bool:
    return isinstance(value, (Number, np.ndarray, np.generic)) and not isinstance(value, bool)


def _as_unit(value) -> UnitValue:
    if isinstance(value, UnitValue):
        return value
    if _is_number(value):
        return UnitValue(value, SCALAR)
    msg = f"cannot use {value!r} as a unit value"
    raise TypeError(msg)


# -------------------------------- Functional interface --------------------------------
def add(a: UnitValue, b: UnitValue) -> UnitValue:
    return a.add(b)


def sub(a: UnitValue, b: UnitValue) -> UnitValue:
    return a.sub(b)


def mul(a: UnitValue, b: UnitValue) -> UnitValue:
    return _as_unit(a).mul(b)


def div(a: UnitValue, b: UnitValue) -> UnitValue:
    return _as_unit(a).div(b)


def display(value: UnitValue) -> str:
    return value.display()


def request_shape(value: UnitValue, target: Shape | type[UnitValue]) -> UnitValue:
    return value.request_shape(target)


def convert(value: UnitValue, target: type[UnitValue] | str) -> UnitValue:
    return value.convert(target)
