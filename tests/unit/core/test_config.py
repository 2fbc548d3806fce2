"""Tests for core.config environment-driven settings."""

import pytest
from pydantic import ValidationError

from core.config import ProxySettings

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any local .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PORT", raising=False)
    for name in ("PORT", "LISTING_TIMEOUT_SECONDS", "FANOUT_MAX_WORKERS", "LOG_LEVEL",
                 "GAMES_BASE_URL", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(f"GAMEPASS_PROXY_{name}", raising=False)


def test_defaults():
    settings = ProxySettings()

    assert settings.port == 3000
    assert settings.listing_timeout_seconds == 10.0
    assert settings.detail_timeout_seconds == 5.0
    assert settings.listing_page_limit == 100
    assert settings.user_agent == "Roblox/WinInet"
    assert settings.fanout_max_workers is None
    assert settings.cors_allow_origins == ["*"]
    assert settings.games_base_url == "https://games.roblox.com"
    assert settings.economy_base_url == "https://economy.roblox.com"


def test_bare_port_variable(monkeypatch):
    monkeypatch.setenv("PORT", "8080")

    assert ProxySettings().port == 8080


def test_prefixed_variables(monkeypatch):
    monkeypatch.setenv("GAMEPASS_PROXY_PORT", "9000")
    monkeypatch.setenv("GAMEPASS_PROXY_FANOUT_MAX_WORKERS", "16")
    monkeypatch.setenv("GAMEPASS_PROXY_GAMES_BASE_URL", "http://localhost:9999")

    settings = ProxySettings()

    assert settings.port == 9000
    assert settings.fanout_max_workers == 16
    assert settings.games_base_url == "http://localhost:9999"


def test_cors_origins_from_json(monkeypatch):
    monkeypatch.setenv("GAMEPASS_PROXY_CORS_ALLOW_ORIGINS", '["https://www.roblox.com"]')

    assert ProxySettings().cors_allow_origins == ["https://www.roblox.com"]


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("GAMEPASS_PROXY_LOG_LEVEL", "debug")

    assert ProxySettings().log_level == "DEBUG"


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        ProxySettings(log_level="chatty")


def test_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        ProxySettings(listing_timeout_seconds=0)
