"""
Tests for .env parsing and configuration sources.
"""

import pytest

from paypal_payments import (
    ConfigError,
    EnvironmentConfigSource,
    StaticConfigSource,
    build_environment,
)


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text(
        "\n".join(
            [
                "# PayPal sandbox application",
                "PAYPAL_MODE=sandbox",
                "PAYPAL_SANDBOX_CLIENT_ID = file-client-id",
                "PAYPAL_SANDBOX_CLIENT_SECRET=file-secret",
                "",
                "not a variable",
                "PAYPAL_LOCALE=de_DE",
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestBuildEnvironment:
    def test_file_values_are_parsed(self, env_file):
        environment = build_environment(env_file=str(env_file), base={})
        assert environment.get("PAYPAL_SANDBOX_CLIENT_ID") == "file-client-id"
        assert environment.get("PAYPAL_LOCALE") == "de_DE"
        assert environment.get("not a variable") is None

    def test_base_wins_over_file_and_overrides_win_over_all(self, env_file):
        environment = build_environment(
            env_file=str(env_file),
            base={"PAYPAL_LOCALE": "fr_FR", "PAYPAL_MODE": "live"},
            overrides={"PAYPAL_MODE": "sandbox"},
        )
        assert environment.get("PAYPAL_LOCALE") == "fr_FR"
        assert environment.get("PAYPAL_MODE") == "sandbox"

    def test_missing_file_is_ignored(self, tmp_path):
        environment = build_environment(env_file=str(tmp_path / "missing.env"), base={})
        assert dict(environment.variables) == {}

    def test_base_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("PAYPAL_CURRENCY", "EUR")
        environment = build_environment(env_file=None)
        assert environment.get("PAYPAL_CURRENCY") == "EUR"


class TestEnvironmentConfigSource:
    def test_defaults(self):
        raw = EnvironmentConfigSource(env_file=None, base={}).load()
        assert raw == {
            "mode": "sandbox",
            "sandbox": {"client_id": "", "client_secret": "", "app_id": ""},
            "live": {"client_id": "", "client_secret": "", "app_id": ""},
            "payment_action": "Sale",
            "currency": "USD",
            "notify_url": "",
            "locale": "en_US",
            "validate_ssl": True,
        }

    def test_values_from_file(self, env_file):
        raw = EnvironmentConfigSource(env_file=str(env_file), base={}).load()
        assert raw["sandbox"]["client_id"] == "file-client-id"
        assert raw["sandbox"]["client_secret"] == "file-secret"
        assert raw["locale"] == "de_DE"

    def test_live_block(self):
        raw = EnvironmentConfigSource(
            env_file=None,
            base={
                "PAYPAL_MODE": "live",
                "PAYPAL_LIVE_CLIENT_ID": "live-id",
                "PAYPAL_LIVE_CLIENT_SECRET": "live-secret",
                "PAYPAL_LIVE_APP_ID": "APP-LIVE",
            },
        ).load()
        assert raw["mode"] == "live"
        assert raw["live"] == {
            "client_id": "live-id",
            "client_secret": "live-secret",
            "app_id": "APP-LIVE",
        }

    @pytest.mark.parametrize(
        "raw_value, expected",
        [("true", True), ("1", True), ("Yes", True), ("false", False), ("OFF", False)],
    )
    def test_validate_ssl_parsing(self, raw_value, expected):
        raw = EnvironmentConfigSource(
            env_file=None, base={"PAYPAL_VALIDATE_SSL": raw_value}
        ).load()
        assert raw["validate_ssl"] is expected

    def test_invalid_validate_ssl(self):
        source = EnvironmentConfigSource(env_file=None, base={"PAYPAL_VALIDATE_SSL": "maybe"})
        with pytest.raises(ConfigError, match="PAYPAL_VALIDATE_SSL"):
            source.load()


class TestStaticConfigSource:
    def test_load_returns_independent_copy(self, sandbox_config):
        source = StaticConfigSource(sandbox_config)
        loaded = source.load()
        loaded["sandbox"]["client_id"] = "changed"
        assert source.load()["sandbox"]["client_id"] == "sandbox-client-id"
