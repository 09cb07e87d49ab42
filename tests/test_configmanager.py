import pytest
from sidereal import configmanager
from sidereal.configmanager import observer_config, sites_config, load_yaml, load_default_yaml
from tests.common import TEST_CONFIG


def test_import_config():
    assert observer_config['default_site'] in sites_config


def test_parse_yml():
    config = load_yaml(TEST_CONFIG)
    assert config['observer']['default_site'] == 'greenwich'
    assert config['sites']['us-eastern']['longitude'] == -75.0


def test_default_yml_has_ovro_lwa():
    config = load_default_yaml()
    assert config['observer']['default_site'] == 'ovro-lwa'
    assert config['observer']['strict'] is False
    assert config['sites']['ovro-lwa']['longitude'] == -118.281667


def test_site_longitude(monkeypatch):
    monkeypatch.setattr(configmanager, 'sites_config', load_yaml(TEST_CONFIG)['sites'])
    assert configmanager.site_longitude('us-eastern') == -75.0


def test_site_longitude_unknown_site(monkeypatch):
    monkeypatch.setattr(configmanager, 'sites_config', load_yaml(TEST_CONFIG)['sites'])
    with pytest.raises(KeyError):
        configmanager.site_longitude('mauna-kea')


def test_default_longitude(monkeypatch):
    config = load_yaml(TEST_CONFIG)
    monkeypatch.setattr(configmanager, 'observer_config', config['observer'])
    monkeypatch.setattr(configmanager, 'sites_config', config['sites'])
    assert configmanager.default_longitude() == 0.0


def test_site_longitude_unknown_site_names_known_sites(monkeypatch):
    monkeypatch.setattr(configmanager, 'sites_config', load_yaml(TEST_CONFIG)['sites'])
    with pytest.raises(KeyError, match='greenwich'):
        configmanager.site_longitude('mauna-kea')
