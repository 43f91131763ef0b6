"""Global configuration and type definitions for the unit shape library.

This module centralizes the numeric type alias accepted as a unit payload and
the library-wide defaults used by comparisons and logging.

Type Definitions:
    BASE_TYPE: Union type of numeric payloads a unit value may carry. Python
               native numbers and NumPy arrays/scalars all support the
               ``+ - * /`` operators the unit algebra relies on.

Defaults:
    DEFAULT_MAX_ULPS: Units-in-last-place tolerance used by ``ulps_eq``.
    LOG_LEVEL_ENV: Environment variable read by ``setup_logging`` when no
                   explicit level is given.
    DEFAULT_LOG_LEVEL: Level name used when the variable is unset.

Example:
    >>> from shapeunits.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar: BASE_TYPE = 3.5
    >>> batch: BASE_TYPE = np.array([1.0, 2.0, 3.0])
"""

from numpy import ndarray

BASE_TYPE = int | float | ndarray

DEFAULT_MAX_ULPS = 4

LOG_LEVEL_ENV = "SHAPEUNITS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
