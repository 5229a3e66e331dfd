"""Tests for settings loading and proxy resolution."""

import pytest

from no2tg.communication import DEFAULT_FOOTER
from no2tg.config import Settings, require, resolve_proxy
from no2tg.errors import ConfigurationError


def _settings(**kwargs):
    return Settings(_env_file=None, **kwargs)


class TestSettings:
    def test_reads_original_env_names(self, monkeypatch):
        monkeypatch.setenv("NOTION_AUTH_KEY", "secret_abc")
        monkeypatch.setenv("NOTION_DATABASE_ID", "db")
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "1:x")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "@chan")
        monkeypatch.setenv("NO2TG_AUTO_CHANGE_STATUS", "true")
        monkeypatch.setenv("NO2TG_PROXY_AT_WSL_PORT", "1080")

        settings = _settings()

        assert settings.notion_auth_key == "secret_abc"
        assert settings.notion_database_id == "db"
        assert settings.telegram_bot_token == "1:x"
        assert settings.telegram_chat_id == "@chan"
        assert settings.auto_change_status is True
        assert settings.proxy_at_wsl_port == 1080

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("NO2TG_AUTO_CHANGE_STATUS", raising=False)
        monkeypatch.delenv("NO2TG_FOOTER", raising=False)
        settings = _settings()
        assert settings.auto_change_status is False
        assert settings.footer == DEFAULT_FOOTER == "频道：@AboutZY"
        assert settings.timeout == 30.0

    def test_field_names_accepted(self):
        settings = _settings(notion_auth_key="k", telegram_chat_id="1")
        assert settings.notion_auth_key == "k"


class TestRequire:
    def test_missing_named_by_env_var(self):
        settings = _settings(notion_auth_key="k", telegram_bot_token=None, telegram_chat_id=None)
        with pytest.raises(ConfigurationError, match="TELEGRAM_BOT_TOKEN, TELEGRAM_CHAT_ID"):
            require(settings, "notion_auth_key", "telegram_bot_token", "telegram_chat_id")

    def test_present(self):
        require(_settings(notion_auth_key="k"), "notion_auth_key")


class TestResolveProxy:
    def test_disabled(self):
        assert resolve_proxy(_settings(proxy=False, proxy_address="http://p:1")) is None

    def test_explicit_address(self):
        assert resolve_proxy(_settings(proxy=True, proxy_address="http://p:1")) == "http://p:1"

    def test_wsl_host(self, tmp_path):
        resolv = tmp_path / "resolv.conf"
        resolv.write_text("# generated\nnameserver 172.20.0.1\n")
        settings = _settings(proxy=True, proxy_at_wsl=True, proxy_at_wsl_port=7890)
        assert resolve_proxy(settings, resolv_conf=str(resolv)) == "http://172.20.0.1:7890"

    def test_wsl_overrides_address(self, tmp_path):
        resolv = tmp_path / "resolv.conf"
        resolv.write_text("nameserver 10.0.0.2\n")
        settings = _settings(proxy=True, proxy_address="http://p:1", proxy_at_wsl=True)
        assert resolve_proxy(settings, resolv_conf=str(resolv)) == "http://10.0.0.2:7890"

    def test_wsl_unreadable_falls_back(self, tmp_path):
        settings = _settings(proxy=True, proxy_address="http://p:1", proxy_at_wsl=True)
        assert resolve_proxy(settings, resolv_conf=str(tmp_path / "missing")) == "http://p:1"

    def test_enabled_without_address(self):
        assert resolve_proxy(_settings(proxy=True)) is None
