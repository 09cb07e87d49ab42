from os import path

TEST_CONFIG = f'{path.dirname(__file__)}/../resources/test_config.yml'

# 2000 January 1, 12:00 UT
J2000_JD = 2451545.0
# Greenwich mean sidereal time at J2000.0, 18h41m50.55s
J2000_GMST_HOURS = 18.697374554
