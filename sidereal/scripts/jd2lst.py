import argparse
import logging
from typing import List, Optional

import numpy as np
from astropy import units as u
from astropy.coordinates import Angle

from sidereal import configmanager
from sidereal.lst import local_sidereal_time

log = logging.getLogger(__name__)


def format_hms(hours: float) -> str:
    return Angle(hours, unit=u.hourangle).to_string(unit=u.hourangle, sep=':', precision=2, pad=True)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Local sidereal time from Julian Dates in UT.')
    parser.add_argument('jd', type=float, nargs='+', help='Julian Date(s), UT.')
    location = parser.add_mutually_exclusive_group()
    location.add_argument('--longitude', type=float, help='Observer longitude in degrees, East positive.')
    location.add_argument('--site', help=f"Configured site name. Defaults to "
                                         f"{configmanager.observer_config['default_site']}.")
    parser.add_argument('--hms', action='store_true', help='Print LST as HH:MM:SS.ss instead of decimal hours.')
    parser.add_argument('--strict', action=argparse.BooleanOptionalAction,
                        default=configmanager.observer_config.get('strict', False),
                        help='Reject non-finite Julian Dates and longitudes outside [-180, 180].')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.longitude is not None:
        longitude = args.longitude
    else:
        site = args.site or configmanager.observer_config['default_site']
        try:
            longitude = configmanager.site_longitude(site)
        except KeyError:
            parser.error(f'unknown site {site}')
        log.debug(f'Using site {site} at longitude {longitude} deg.')

    try:
        hours = local_sidereal_time(np.array(args.jd), longitude, strict=args.strict)
    except ValueError as e:
        parser.error(str(e))

    for jd, h in zip(args.jd, hours):
        print(f'{jd:.6f} {format_hms(h) if args.hms else f"{h:.6f}"}')


if __name__ == '__main__':
    main()
