"""
Tests for logintoken configuration loading and validation.
"""

import json
import logging
from datetime import timedelta

import pytest

from logintoken import LoginTokenConfig
from logintoken.core.config import MAX_TOKEN_EXPIRY
from logintoken.util.config import (
    get_config_value,
    load_config_file,
    parse_duration_string,
    to_duration,
)


class TestDurationParsing:
    """Test duration parsing helpers"""

    @pytest.mark.parametrize("raw, expected", [
        ("30s", timedelta(seconds=30)),
        ("15m", timedelta(minutes=15)),
        ("2h", timedelta(hours=2)),
        ("1d", timedelta(days=1)),
        ("250ms", timedelta(milliseconds=250)),
        ("10", timedelta(minutes=10)),
        (" 1.5 H ", timedelta(hours=1.5)),
    ])
    def test_parse_duration_string(self, raw, expected):
        """Test supported duration formats"""
        assert parse_duration_string(raw) == expected

    @pytest.mark.parametrize("raw", ["", "fast", "10x", "m15", "99999999999d", "1e400"])
    def test_parse_invalid_duration(self, raw):
        """Test malformed durations are rejected"""
        with pytest.raises(ValueError):
            parse_duration_string(raw)

    def test_to_duration(self):
        """Test raw values coerce to timedelta, numbers as minutes"""
        assert to_duration(5) == timedelta(minutes=5)
        assert to_duration(0.5) == timedelta(seconds=30)
        assert to_duration("45s") == timedelta(seconds=45)
        assert to_duration(timedelta(hours=1)) == timedelta(hours=1)
        with pytest.raises(ValueError):
            to_duration(True)
        with pytest.raises(ValueError):
            to_duration(10 ** 12)
        with pytest.raises(ValueError):
            to_duration(1e308)


class TestEnvironment:
    """Test environment configuration"""

    def test_get_config_value_cast(self, monkeypatch):
        """Test typed lookup and invalid values"""
        monkeypatch.setenv("LOGINTOKEN_AUTH_LOGIN_TOKEN_LENGTH", "48")
        assert get_config_value("auth_login_token_length", 32, int) == 48

        monkeypatch.setenv("LOGINTOKEN_AUTH_LOGIN_TOKEN_LENGTH", "many")
        with pytest.raises(ValueError):
            get_config_value("auth_login_token_length", 32, int)

    def test_from_env(self, monkeypatch):
        """Test config built from environment variables"""
        monkeypatch.setenv("LOGINTOKEN_AUTH_LOGIN_URL", "https://example.com/in")
        monkeypatch.setenv("LOGINTOKEN_AUTH_LOGIN_TOKEN_LENGTH", "20")
        monkeypatch.setenv("LOGINTOKEN_AUTH_LOGIN_TOKEN_EXPIRY", "2h")
        monkeypatch.setenv("LOGINTOKEN_AUTH_LOGIN_TOKEN_ALPHABET", "0123456789")

        config = LoginTokenConfig.from_env()

        assert config.login_url == "https://example.com/in"
        assert config.token_length == 20
        assert config.token_expiry == timedelta(hours=2)
        assert config.token_alphabet == "0123456789"

    def test_from_env_defaults(self, monkeypatch):
        """Test defaults apply when variables are absent"""
        for name in ("AUTH_LOGIN_URL", "AUTH_LOGIN_TOKEN_LENGTH", "AUTH_LOGIN_TOKEN_EXPIRY",
                     "AUTH_LOGIN_TOKEN_ALPHABET"):
            monkeypatch.delenv(f"LOGINTOKEN_{name}", raising=False)

        assert LoginTokenConfig.from_env() == LoginTokenConfig()


class TestConfigFiles:
    """Test file-based configuration"""

    def test_from_yaml_file(self, tmp_path):
        """Test loading a YAML config file"""
        path = tmp_path / "login.yaml"
        path.write_text(
            "auth_login_url: https://example.com/login\n"
            "auth_login_token_length: 40\n"
            "auth_login_token_expiry: 30\n",
            encoding="utf-8",
        )

        config = LoginTokenConfig.from_file(path)

        assert config.login_url == "https://example.com/login"
        assert config.token_length == 40
        assert config.token_expiry == timedelta(minutes=30)

    def test_from_json_file(self, tmp_path):
        """Test loading a JSON config file"""
        path = tmp_path / "login.json"
        path.write_text(json.dumps({"auth_login_token_expiry": "90s"}), encoding="utf-8")

        config = LoginTokenConfig.from_file(path)

        assert config.token_expiry == timedelta(seconds=90)
        assert config.token_length == 32

    def test_empty_yaml_file(self, tmp_path):
        """Test an empty YAML file yields defaults"""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path):
        """Test a missing config file"""
        with pytest.raises(FileNotFoundError):
            load_config_file(tmp_path / "absent.yaml")

    def test_unsupported_format(self, tmp_path):
        """Test unknown file extensions are rejected"""
        path = tmp_path / "login.ini"
        path.write_text("[auth]\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config_file(path)

    def test_non_mapping_file(self, tmp_path):
        """Test a file whose top level is not a mapping"""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config_file(path)

    def test_from_dict_rejects_bad_length(self):
        """Test non-numeric token length in a mapping"""
        with pytest.raises(ValueError):
            LoginTokenConfig.from_dict({"auth_login_token_length": 1.5})

    def test_from_dict_alphabet(self):
        """Test a custom alphabet is read from a mapping"""
        config = LoginTokenConfig.from_dict({"auth_login_token_alphabet": "abcdef"})

        assert config.token_alphabet == "abcdef"

    @pytest.mark.parametrize("content", [
        "auth_login_token_alphabet: null\n",
        "auth_login_url: null\n",
        "auth_login_url: 42\n",
    ])
    def test_null_or_wrong_type_values_rejected(self, tmp_path, content):
        """Test YAML nulls and non-strings fail validation with ValueError"""
        path = tmp_path / "login.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ValueError):
            LoginTokenConfig.from_file(path).validate()

    def test_huge_expiry_in_file(self, tmp_path):
        """Test an out-of-range expiry in a file raises ValueError"""
        path = tmp_path / "login.yaml"
        path.write_text("auth_login_token_expiry: 99999999999d\n", encoding="utf-8")

        with pytest.raises(ValueError):
            LoginTokenConfig.from_file(path)


class TestValidation:
    """Test configuration validation"""

    def test_defaults_are_valid(self):
        """Test default configuration validates"""
        assert LoginTokenConfig().validate() is True

    @pytest.mark.parametrize("kwargs", [
        {"token_length": 0},
        {"token_length": -4},
        {"token_expiry": timedelta(0)},
        {"token_expiry": timedelta(minutes=-1)},
        {"token_alphabet": ""},
        {"token_alphabet": "aaaa"},
        {"login_url": ""},
        {"login_url": None},
        {"token_alphabet": None},
        {"token_length": "32"},
        {"token_expiry": 15},
        {"token_expiry": MAX_TOKEN_EXPIRY + timedelta(seconds=1)},
        {"token_expiry": timedelta(days=999999999)},
    ])
    def test_degenerate_config(self, kwargs):
        """Test degenerate settings are rejected"""
        with pytest.raises(ValueError):
            LoginTokenConfig(**kwargs).validate()

    def test_short_token_warns(self, caplog):
        """Test short token lengths are accepted with a warning"""
        with caplog.at_level(logging.WARNING, logger="logintoken.core.config"):
            assert LoginTokenConfig(token_length=8).validate() is True

        assert "below the recommended" in caplog.text

    def test_max_expiry_accepted(self):
        """Test the maximum token lifetime is still valid"""
        assert LoginTokenConfig(token_expiry=MAX_TOKEN_EXPIRY).validate() is True
