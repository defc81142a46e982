import pytest

from messenger_client import config as config_module
from messenger_client.config import ClientConfig, ConfigError


def test_defaults():
    cfg = ClientConfig()
    assert cfg.base_url == 'http://localhost:8080'
    assert dict(cfg.headers) == {'Content-Type': 'application/json'}
    assert cfg.timeout == 10.0


def test_trailing_slash_is_normalised():
    cfg = ClientConfig(base_url='https://chat.example.com/api/')
    assert cfg.base_url == 'https://chat.example.com/api'
    assert cfg.url_for('/login') == 'https://chat.example.com/api/login'
    assert cfg.url_for('health') == 'https://chat.example.com/api/health'


def test_headers_are_read_only():
    source = {'Content-Type': 'application/json'}
    cfg = ClientConfig(headers=source)
    source['X-Later'] = '1'
    assert 'X-Later' not in cfg.headers
    with pytest.raises(TypeError):
        cfg.headers['X-New'] = '1'


def test_config_is_frozen():
    cfg = ClientConfig()
    with pytest.raises(AttributeError):
        cfg.base_url = 'http://elsewhere'


@pytest.mark.parametrize('url', ['localhost:8080', '', 'ftp://host'])
def test_base_url_without_http_scheme_is_rejected(url):
    with pytest.raises(ConfigError):
        ClientConfig(base_url=url)


def test_non_positive_timeout_is_rejected():
    with pytest.raises(ConfigError):
        ClientConfig(timeout=0)


@pytest.mark.parametrize('timeout', [float('nan'), float('inf'), -1])
def test_non_finite_timeout_is_rejected(timeout):
    with pytest.raises(ConfigError):
        ClientConfig(timeout=timeout)


def test_from_env(monkeypatch):
    monkeypatch.setattr(config_module, 'load_dotenv', lambda: None)
    monkeypatch.setenv('MESSENGER_API_URL', 'https://msg.example.org/')
    monkeypatch.setenv('MESSENGER_API_TIMEOUT', '2.5')
    cfg = ClientConfig.from_env()
    assert cfg.base_url == 'https://msg.example.org'
    assert cfg.timeout == 2.5


def test_from_env_defaults(monkeypatch):
    monkeypatch.setattr(config_module, 'load_dotenv', lambda: None)
    monkeypatch.delenv('MESSENGER_API_URL', raising=False)
    monkeypatch.delenv('MESSENGER_API_TIMEOUT', raising=False)
    assert ClientConfig.from_env() == ClientConfig()


def test_from_env_bad_timeout(monkeypatch):
    monkeypatch.setattr(config_module, 'load_dotenv', lambda: None)
    monkeypatch.setenv('MESSENGER_API_TIMEOUT', 'soon')
    with pytest.raises(ConfigError):
        ClientConfig.from_env()
