# -*- coding: utf-8 -*-
# tests/test_configs.py

import pytest
import yaml

from conftest import PRIVATE_KEY, RecordingTransport
from kraken_client import ApiAuth, RequestConfig
from kraken_client.configs.account_reader import AccountReader, get_kraken_credentials
from kraken_client.configs.config_reader import ConfigReader, get_request_config
from kraken_client.drivers.kraken.driver import get_account_name_by_id, init_KrakenClient

ENV_VARS = (
    'KRAKEN_ROOT_URL', 'KRAKEN_TIMEOUT_MS', 'KRAKEN_API_VERSION',
    'KRAKEN_API_KEY', 'KRAKEN_API_SECRET', 'KRAKEN_CONFIG_DIR',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _write_yaml(path, data):
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding='utf-8')


ACCOUNTS = {
    'accounts': {
        'kraken': {
            'main': {'public_key': 'main-pub', 'private_key': PRIVATE_KEY},
            'sub1': {'public_key': 'sub1-pub', 'private_key': PRIVATE_KEY},
            'empty': {'public_key': '', 'private_key': ''},
        }
    }
}


# ---- request config ----
def test_defaults_without_file(tmp_path):
    assert ConfigReader(str(tmp_path)).get_request_config() == RequestConfig.default()


def test_yaml_then_env(tmp_path, monkeypatch):
    _write_yaml(tmp_path / 'kraken.yaml', {'request': {'timeout': 3000, 'version': 0}})
    assert get_request_config(str(tmp_path)) == RequestConfig('https://api.kraken.com', 3000, 0)

    monkeypatch.setenv('KRAKEN_TIMEOUT_MS', '7000')
    monkeypatch.setenv('KRAKEN_ROOT_URL', 'https://futures.example')
    assert get_request_config(str(tmp_path)) == RequestConfig('https://futures.example', 7000, 0)


def test_config_dir_from_env(tmp_path, monkeypatch):
    _write_yaml(tmp_path / 'kraken.yaml', {'request': {'version': 1}})
    monkeypatch.setenv('KRAKEN_CONFIG_DIR', str(tmp_path))
    assert ConfigReader().get_request_config().version == 1


def test_shipped_kraken_yaml_matches_defaults():
    assert ConfigReader().get_request_config() == RequestConfig.default()


def test_get_config_dotted_path(tmp_path):
    _write_yaml(tmp_path / 'kraken.yaml', {'request': {'timeout': 3000}})
    reader = ConfigReader(str(tmp_path))
    assert reader.get_config('kraken.yaml', 'request.timeout') == 3000
    assert reader.get_config('kraken.yaml', 'request.missing') is None


def test_unknown_request_field_rejected(tmp_path):
    _write_yaml(tmp_path / 'kraken.yaml', {'request': {'retries': 5}})
    with pytest.raises(ValueError):
        ConfigReader(str(tmp_path)).get_request_config()


def test_invalid_yaml(tmp_path):
    (tmp_path / 'kraken.yaml').write_text('request: [unclosed', encoding='utf-8')
    with pytest.raises(yaml.YAMLError):
        ConfigReader(str(tmp_path)).get_request_config()


# ---- accounts ----
def test_credentials_from_file(tmp_path):
    _write_yaml(tmp_path / 'account.yaml', ACCOUNTS)
    reader = AccountReader(str(tmp_path))
    assert reader.list_accounts() == ['main', 'sub1', 'empty']
    assert reader.get_kraken_credentials('sub1') == ApiAuth('sub1-pub', PRIVATE_KEY)
    assert reader.is_account_valid('main') is True
    assert reader.is_account_valid('empty') is False
    assert reader.is_account_valid('nope') is False


def test_credentials_fall_back_to_env(tmp_path, monkeypatch):
    assert get_kraken_credentials('main', str(tmp_path)) is None
    monkeypatch.setenv('KRAKEN_API_KEY', 'env-pub')
    monkeypatch.setenv('KRAKEN_API_SECRET', PRIVATE_KEY)
    assert get_kraken_credentials('main', str(tmp_path)) == ApiAuth('env-pub', PRIVATE_KEY)


def test_invalid_account_yaml(tmp_path):
    (tmp_path / 'account.yaml').write_text('accounts: {kraken: [', encoding='utf-8')
    with pytest.raises(ValueError):
        AccountReader(str(tmp_path)).list_accounts()


def test_reload_picks_up_changes(tmp_path):
    reader = AccountReader(str(tmp_path))
    assert reader.list_accounts() == []
    _write_yaml(tmp_path / 'account.yaml', ACCOUNTS)
    reader.reload()
    assert 'main' in reader.list_accounts()


# ---- driver factory ----
def test_account_name_by_id(tmp_path):
    _write_yaml(tmp_path / 'account.yaml', ACCOUNTS)
    reader = AccountReader(str(tmp_path))
    assert get_account_name_by_id(1, reader) == 'sub1'
    assert get_account_name_by_id(9, reader) == 'main'
    assert get_account_name_by_id(0, AccountReader(str(tmp_path / 'missing'))) == 'main'


def test_init_client_authenticated(tmp_path):
    _write_yaml(tmp_path / 'account.yaml', ACCOUNTS)
    _write_yaml(tmp_path / 'kraken.yaml', {'request': {'root_url': 'http://localhost:9000'}})
    transport = RecordingTransport()

    client = init_KrakenClient(account_id=1, config_dir=str(tmp_path), transport=transport)
    assert client.is_upgraded()

    client.get_account_balance()
    call = transport.calls[0]
    assert call['url'] == 'http://localhost:9000/0/private/Balance'
    assert call['headers']['API-Key'] == 'sub1-pub'


def test_init_client_without_keys(tmp_path):
    client = init_KrakenClient(config_dir=str(tmp_path), transport=RecordingTransport())
    assert client.is_upgraded() is False
