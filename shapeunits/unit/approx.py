"""Approximate equality of unit values.

Floating-point payloads rarely compare bit-identical after conversions, so
this module offers three tolerance-based comparisons. All of them require the
two values to carry the same shape.

- abs_diff_eq: ``|a - b| <= epsilon``
- relative_eq: absolute check first, then ``|a - b| <= max(|a|, |b|) * max_relative``
- ulps_eq: absolute check first, then at most ``max_ulps`` representable
  floats between the two payloads

Defaults are the machine epsilon of the payloads' floating dtype and
``DEFAULT_MAX_ULPS`` from the package configuration.
"""

from __future__ import annotations

import numpy as np

from ..config import DEFAULT_MAX_ULPS
from ..errors import IncompatibleUnitError
from .unit_base import UnitValue
from .unit_float import float_dtype


def _payloads(a: UnitValue, b: UnitValue):
    if a.shape != b.shape:
        msg = f"cannot compare {a.unit_name!r} with {b.unit_name!r}"
        raise IncompatibleUnitError(msg)
    dtype = float_dtype(np.result_type(a.value, b.value))
    return np.asarray(a.value, dtype=dtype), np.asarray(b.value, dtype=dtype), dtype


def abs_diff_eq(a: UnitValue, b: UnitValue, epsilon: float | None = None) -> bool:
    """True when the payloads differ by at most ``epsilon``."""
    x, y, dtype = _payloads(a, b)
    if epsilon is None:
        epsilon = np.finfo(dtype).eps
    return bool(np.all(np.abs(x - y) <= epsilon))


def relative_eq(
    a: UnitValue,
    b: UnitValue,
    epsilon: float | None = None,
    max_relative: float | None = None,
) -> bool:
    """True when the payloads are equal within a tolerance relative to their size.

    Args:
        a: First value.
        b: Second value, same shape as ``a``.
        epsilon: Absolute tolerance used near zero.
        max_relative: Tolerance relative to the larger magnitude.

    Returns:
        bool: Whether every element pair is approximately equal.

    Raises:
        IncompatibleUnitError: If the shapes differ.
    """
    x, y, dtype = _payloads(a, b)
    eps = np.finfo(dtype).eps
    epsilon = eps if epsilon is None else epsilon
    max_relative = eps if max_relative is None else max_relative

    with np.errstate(invalid="ignore"):
        diff = np.abs(x - y)
        largest = np.maximum(np.abs(x), np.abs(y))
        close = (x == y) | (
            np.isfinite(x) & np.isfinite(y) & ((diff <= epsilon) | (diff <= largest * max_relative))
        )
    return bool(np.all(close))


def ulps_eq(
    a: UnitValue,
    b: UnitValue,
    epsilon: float | None = None,
    max_ulps: int = DEFAULT_MAX_ULPS,
) -> bool:
    """True when the payloads are at most ``max_ulps`` floats apart.

    Values of opposite sign are only equal when they are both zero or within
    ``epsilon`` of each other.

    Raises:
        IncompatibleUnitError: If the shapes differ.
    """
    x, y, dtype = _payloads(a, b)
    epsilon = np.finfo(dtype).eps if epsilon is None else epsilon

    with np.errstate(invalid="ignore"):
        near = np.abs(x - y) <= epsilon
    same_sign = np.signbit(x) == np.signbit(y)
    int_type = np.dtype(f"i{dtype.itemsize}")
    bits_x = x.view(int_type).astype(np.int64)
    bits_y = y.view(int_type).astype(np.int64)
    comparable = same_sign & ~np.isnan(x) & ~np.isnan(y)
    within = comparable & (np.abs(bits_x - bits_y) <= max_ulps)
    return bool(np.all(near | within | (x == y)))
