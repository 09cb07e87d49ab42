"""Manages configuration

It's effectively a singleton using module imports.
"""
from os import path
from importlib import resources
import logging

import yaml

log = logging.getLogger(__name__)
SIDEREAL_CONF_PATH = path.expanduser('~/sidereal-conf.yml')


def load_yaml(p: str) -> dict:
    with open(p, 'r') as f:
        return yaml.safe_load(f)


def load_default_yaml() -> dict:
    with resources.files('sidereal').joinpath('resources/default-sidereal-conf.yml').open('r') as f:
        return yaml.safe_load(f)


if path.isfile(SIDEREAL_CONF_PATH):
    config = load_yaml(SIDEREAL_CONF_PATH)
else:
    log.info(f'{SIDEREAL_CONF_PATH} not found. Using default configuration.')
    config = load_default_yaml()

observer_config = config['observer']
sites_config = config['sites']


def site_longitude(name: str) -> float:
    """Longitude of a configured site.

    Args:
        name: site name, a key under ``sites``.

    Returns: longitude in degrees, East positive.

    """
    if name not in sites_config:
        raise KeyError(f'Unknown site {name}. Configured sites are {sorted(sites_config)}.')
    return float(sites_config[name]['longitude'])


def default_longitude() -> float:
    return site_longitude(observer_config['default_site'])
