"""Unit tests for AppSettings and sub-configs."""

import pytest

from config import AppSettings, ClientSettings, LoggingSettings

_CLIENT_VARS = (
    "API_BASE_URL",
    "REGISTER_PATH",
    "LOGIN_PATH",
    "RQID",
    "GRACE_PERIOD_MS",
    "HTTP_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for var in _CLIENT_VARS + ("ENV", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# ClientSettings
# ---------------------------------------------------------------------------


class TestClientSettings:
    def test_defaults(self, clean_env):
        s = ClientSettings()
        assert s.api_base_url == "http://localhost:8080"
        assert s.register_path == "/api/auth/register"
        assert s.login_path == "/api/auth/login"
        assert s.rqid == 123456789
        assert s.grace_period_ms == 3000
        assert s.http_timeout is None

    def test_grace_period_seconds(self, clean_env):
        clean_env.setenv("GRACE_PERIOD_MS", "1500")
        assert ClientSettings().grace_period_seconds == 1.5

    def test_urls_join_without_double_slash(self, clean_env):
        clean_env.setenv("API_BASE_URL", "https://bank.example/")
        s = ClientSettings()
        assert s.register_url == "https://bank.example/api/auth/register"
        assert s.login_url == "https://bank.example/api/auth/login"

    def test_http_timeout_loaded(self, clean_env):
        clean_env.setenv("HTTP_TIMEOUT", "2.5")
        assert ClientSettings().http_timeout == 2.5


class TestLoggingSettings:
    def test_defaults(self, clean_env):
        s = LoggingSettings()
        assert s.log_level == "INFO"
        assert s.log_format is None


# ---------------------------------------------------------------------------
# AppSettings
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "env, expected",
    [("production", True), ("development", False)],
    ids=["production", "development"],
)
def test_is_production(clean_env, env, expected):
    clean_env.setenv("ENV", env)
    assert AppSettings().is_production is expected


class TestAppSettings:
    def test_sub_configs_populated(self, clean_env):
        s = AppSettings()
        for attr in ("client", "logging"):
            assert getattr(s, attr) is not None, f"sub-config '{attr}' is None"

    def test_sub_config_reads_env(self, clean_env):
        clean_env.setenv("RQID", "42")
        assert AppSettings().client.rqid == 42
