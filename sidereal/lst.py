"""Julian Date to Local Sidereal Time conversion.

LST is built in three stages, each reduced into [0, 24) hours before the next one is added:

1. Greenwich mean sidereal time at the preceding 0h UT, from the polynomial in Julian centuries since J2000.0.
2. Greenwich sidereal time, advancing stage 1 by the solar hours elapsed since 0h UT at the sidereal rate.
3. Local sidereal time, shifting stage 2 by the observer longitude at 15 degrees per hour.

The input is taken to be a continuous Julian Date in UT; no UT1-UTC, nutation or precession corrections are applied.
"""
from typing import Union

import numpy as np
from astropy import units as u

from sidereal.utils import constants, validationutils
from sidereal.utils.maths import wrap24

LongitudeLike = Union[float, np.ndarray, u.Quantity]


def _julian_date(moment) -> np.ndarray:
    # Anything exposing a ``jd`` attribute, e.g. astropy.time.Time, counts as a moment.
    return np.asarray(getattr(moment, 'jd', moment), dtype=float)


def _longitude_deg(longitude: LongitudeLike) -> np.ndarray:
    if isinstance(longitude, u.Quantity):
        longitude = longitude.to_value(u.deg)
    return np.asarray(longitude, dtype=float)


def _gmst_at_0h_ut(jd0):
    t = (jd0 - constants.J2000_JD) / constants.DAYS_PER_JULIAN_CENTURY
    return wrap24(constants.GMST0_H + constants.GMST0_RATE_H_PER_CENTURY * t +
                  constants.GMST0_ACCEL_H_PER_CENTURY2 * t * t)


def local_sidereal_time(moment, longitude: LongitudeLike, strict: bool = False) -> Union[float, np.ndarray]:
    """Convert from Julian Date (UT) to local sidereal time.

    Moments and longitudes broadcast against each other like numpy arrays. NaN or infinite inputs give nan rather than
    an error, and longitudes outside [-180, 180] are treated as plain hour offsets, unless strict is set.

    Args:
        moment: Julian Date(s) in UT, or an object with a ``jd`` attribute such as astropy.time.Time.
        longitude: observer longitude in degrees, East positive. Quantities are converted to degrees.
        strict: reject non-finite inputs and longitudes outside [-180, 180] with ValueError.

    Returns: LST in hours in [0, 24). A float for scalar inputs, an ndarray otherwise.

    """
    jd = _julian_date(moment)
    lon = _longitude_deg(longitude)
    if strict:
        validationutils.check_finite(jd, 'moment')
        validationutils.check_finite(lon, 'longitude')
        validationutils.check_longitude_range(lon)

    with np.errstate(invalid='ignore', over='ignore'):
        jd0 = np.floor(jd - 0.5) + 0.5
        hours_since_0h = (jd - jd0) * constants.HOURS_PER_DAY
        gst = wrap24(_gmst_at_0h_ut(jd0) + hours_since_0h * constants.SIDEREAL_RATE)
        return wrap24(gst + lon / constants.DEGREES_PER_HOUR)
