"""Validation utilities.
"""
import numpy as np


def check_finite(value, name: str):
    if not np.all(np.isfinite(value)):
        raise ValueError(f'{name} must be finite, got {value}.')


def check_longitude_range(longitude, limit: float = 180.):
    """Check that the longitude(s) in degrees lie in [-limit, limit].

    Args:
        longitude: longitude or array of longitudes in degrees.
        limit: largest accepted absolute longitude.

    """
    if np.any(np.abs(longitude) > limit):
        raise ValueError(f'Longitude must be within [-{limit}, {limit}] degrees, got {longitude}.')
