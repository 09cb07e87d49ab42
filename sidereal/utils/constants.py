"""Astronomical constants for mean sidereal time.

The polynomial coefficients give Greenwich mean sidereal time at 0h UT as a
function of Julian centuries since J2000.0. They are fixed values and are
not meant to be configured.
"""
# J2000.0 epoch, 2000 January 1 12:00 UT
J2000_JD = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0

# GMST at 0h UT, in hours: GMST0_H + RATE * T + ACCEL * T**2
GMST0_H = 6.697374558
GMST0_RATE_H_PER_CENTURY = 2400.051336
GMST0_ACCEL_H_PER_CENTURY2 = 0.000025862

# Mean solar day / mean sidereal day
SIDEREAL_RATE = 1.002737909

HOURS_PER_DAY = 24.
# Earth's mean rotation, 360 deg / 24 h
DEGREES_PER_HOUR = 15.

