import pytest
from PyQt5.QtCore import QSettings

from messenger_client.session import TokenStore


@pytest.fixture
def store(tmp_path):
    settings = QSettings(str(tmp_path / 'client.ini'), QSettings.IniFormat)
    return TokenStore(settings)


def test_empty_store(store):
    assert store.get() is None


def test_set_and_get(store):
    store.set('abc.def.ghi')
    assert store.get() == 'abc.def.ghi'


def test_token_survives_new_settings_instance(tmp_path):
    path = str(tmp_path / 'client.ini')
    TokenStore(QSettings(path, QSettings.IniFormat)).set('persisted')
    assert TokenStore(QSettings(path, QSettings.IniFormat)).get() == 'persisted'


def test_clear(store):
    store.set('abc')
    store.clear()
    assert store.get() is None
    # clearing twice is harmless
    store.clear()
