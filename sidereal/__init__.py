"""sidereal: Local Sidereal Time from Julian Dates.

The sidereal package converts a Julian Date in UT and an observer longitude
into Local Sidereal Time (LST) in hours, normalized to [0, 24).

Modules
-------
lst
    The sidereal time converter.
configmanager
    Observer sites and defaults loaded from YAML.
utils
    Constants, modular arithmetic and input validation.
scripts
    Command-line entry points.
"""
from sidereal.lst import local_sidereal_time
from sidereal.utils.maths import wrap24

__all__ = ['local_sidereal_time', 'wrap24']
