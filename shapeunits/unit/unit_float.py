"""Floating-point status queries for unit values.

This module provides the FloatStatus mixin, which exposes the IEEE 754
classification of a unit value's payload (NaN, infinite, normal, subnormal,
sign) without unwrapping it. The queries delegate to NumPy so they work for
Python numbers, NumPy scalars of any float width and element-wise for arrays.

Classes:
    FloatStatus: Mixin adding classification queries to unit values.

Functions:
    float_dtype: Floating dtype used to interpret a payload.
    machine_epsilon: Machine epsilon of that dtype.

Example:
    >>> Meter(float("nan")).is_nan()
    True
    >>> Meter(1e-310).is_subnormal()
    True
"""

from __future__ import annotations

import numpy as np

from ..config import BASE_TYPE


def float_dtype(value: BASE_TYPE) -> np.dtype:
    """Floating dtype used to interpret ``value``; integers map to float64."""
    dtype = np.result_type(value, 1.0)
    if not np.issubdtype(dtype, np.floating):
        return np.dtype(np.float64)
    return dtype


def machine_epsilon(value: BASE_TYPE) -> float:
    """Machine epsilon of the floating type carrying ``value``."""
    return float(np.finfo(float_dtype(value)).eps)


class FloatStatus:
    """Mixin for classifying the numeric payload of a unit value.

    Subclasses provide a ``value`` attribute holding the payload. Scalar
    payloads produce NumPy booleans, array payloads boolean arrays.
    """

    __slots__ = ()

    value: BASE_TYPE

    def is_nan(self):
        return np.isnan(self.value)

    def is_finite(self):
        return np.isfinite(self.value)

    def is_infinite(self):
        return np.isinf(self.value)

    def is_zero(self):
        return np.equal(self.value, 0)

    def is_normal(self):
        """True for finite, non-zero values at or above the smallest normal magnitude."""
        tiny = np.finfo(float_dtype(self.value)).tiny
        return np.isfinite(self.value) & (np.abs(self.value) >= tiny)

    def is_subnormal(self):
        """True for non-zero values below the smallest normal magnitude."""
        tiny = np.finfo(float_dtype(self.value)).tiny
        magnitude = np.abs(self.value)
        return (magnitude > 0) & (magnitude < tiny)

    def is_sign_positive(self):
        return ~np.signbit(self.value)

    def is_sign_negative(self):
        return np.signbit(self.value)
