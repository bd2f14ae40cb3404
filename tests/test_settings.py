"""Settings tests."""

import pytest

from shoper_api.settings import Settings


def build_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOPER_SHOP_URL", "https://sklep.shoparena.pl")
    monkeypatch.setenv("SHOPER_CLIENT_ID", "client")
    monkeypatch.setenv("SHOPER_CLIENT_SECRET", "secret")


def test_settings_reads_credentials_and_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    build_env(monkeypatch)
    monkeypatch.delenv("SHOPER_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings()

    assert settings.shop_url == "https://sklep.shoparena.pl"
    assert settings.client_id == "client"
    assert settings.client_secret == "secret"
    assert settings.timeout == 30.0
    assert settings.log_level == "INFO"


def test_settings_normalizes_log_level_and_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    build_env(monkeypatch)
    monkeypatch.setenv("SHOPER_TIMEOUT", "7.5")
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    settings = Settings()

    assert settings.timeout == 7.5
    assert settings.log_level == "DEBUG"


def test_settings_rejects_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    build_env(monkeypatch)
    monkeypatch.setenv("SHOPER_TIMEOUT", "0")

    with pytest.raises(ValueError):
        Settings()
