"""Modular arithmetic for cyclic quantities.
"""
from typing import Union

import numpy as np

from sidereal.utils.constants import HOURS_PER_DAY


def wrap(x: Union[float, np.ndarray], period: float) -> Union[float, np.ndarray]:
    """Reduce x into [0, period) with Euclidean modulo.

    Unlike math.fmod, the result is never negative, whatever the sign of x. np.mod is exact even for huge x, where
    x - period * floor(x / period) loses the low bits. Non-finite inputs give nan.

    Args:
        x: Value or array of values.
        period: Positive period.

    Returns: x mod period (floored), as a float for scalar input and an ndarray otherwise.

    """
    x = np.asarray(x, dtype=float)
    with np.errstate(invalid='ignore', over='ignore'):
        wrapped = np.mod(x, period)
    # A tiny negative x rounds up to exactly period.
    wrapped = np.where(wrapped >= period, 0., wrapped)
    if wrapped.ndim == 0:
        return float(wrapped)
    return wrapped


def wrap24(x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Reduce hours into [0, 24).
    """
    return wrap(x, HOURS_PER_DAY)
