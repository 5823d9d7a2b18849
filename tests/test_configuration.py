# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Tests for the connector settings system.

Tests cover:
- Settings schema validation
- Environment variable loading
- Settings file loading (JSON/YAML)
- Error reporting for invalid settings
"""

import json
import logging

from pydantic import ValidationError
import pytest

from keycloak_kafka_connector.config.manager import PACKAGE_LOGGER
from keycloak_kafka_connector.config import (
    DEFAULT_SETTINGS,
    ENV_VAR_MAPPING,
    ConnectorSettings,
    SettingsLoader,
    get_env_var_help,
    load_settings,
)
from keycloak_kafka_connector.exceptions import ConfigurationError


class TestConnectorSettings:
    """Test settings schema validation and constraints."""

    def test_defaults(self):
        """Test the default settings values."""
        settings = ConnectorSettings()
        assert settings.default_acks == "1"
        assert settings.default_login_module == "com.sun.security.auth.module.Krb5LoginModule"
        assert settings.jaas_prefix == "sasl.jaas."
        assert settings.producer_prefix == "producer."
        assert settings.bootstrap_servers_separator == ","
        assert settings.debug_mode is False

    def test_derived_keys(self):
        """Test JAAS keys derived from the JAAS prefix."""
        assert DEFAULT_SETTINGS.jaas_enabled_key == "sasl.jaas.enabled"
        assert DEFAULT_SETTINGS.jaas_options_prefix == "sasl.jaas.options."

    def test_frozen(self):
        """Test settings cannot be modified after creation."""
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.default_acks = "all"

    @pytest.mark.parametrize("acks", ["2", "none", ""])
    def test_invalid_acks(self, acks):
        """Test unsupported acks defaults are rejected."""
        with pytest.raises(ValidationError):
            ConnectorSettings(default_acks=acks)

    @pytest.mark.parametrize("prefix", ["", "producer", "jaas"])
    def test_invalid_prefix(self, prefix):
        """Test prefixes must be dotted segments."""
        with pytest.raises(ValidationError):
            ConnectorSettings(producer_prefix=prefix)

    def test_unknown_fields_rejected(self):
        """Test typos in settings are reported."""
        with pytest.raises(ValidationError):
            ConnectorSettings(default_ack="all")


class TestSettingsLoader:
    """Test settings loading from environment and files."""

    def test_no_overrides(self):
        """Test defaults are returned without overrides."""
        loader = SettingsLoader(env={})
        assert loader.load() == DEFAULT_SETTINGS
        assert loader.loaded_from_env is False
        assert loader.loaded_from_file is False

    def test_environment_overrides(self):
        """Test KKC_* variables override defaults."""
        env = {
            "KKC_DEFAULT_ACKS": "all",
            "KKC_DEFAULT_LOGIN_MODULE": "org.example.Plain",
            "KKC_PRODUCER_PREFIX": "writer.",
            "KKC_DEBUG_MODE": "yes",
            "UNRELATED": "x",
        }
        loader = SettingsLoader(env=env)
        settings = loader.load()
        assert settings.default_acks == "all"
        assert settings.default_login_module == "org.example.Plain"
        assert settings.producer_prefix == "writer."
        assert settings.debug_mode is True
        assert loader.loaded_from_env is True

    def test_invalid_environment_value(self):
        """Test invalid values raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(env={"KKC_DEFAULT_ACKS": "sometimes"})
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.context["errors"]

    def test_json_file(self, tmp_path):
        """Test loading from a JSON settings file."""
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"default_acks": "0", "jaas_prefix": "auth."}))

        loader = SettingsLoader(env={}, config_file=config_file)
        settings = loader.load()
        assert settings.default_acks == "0"
        assert settings.jaas_prefix == "auth."
        assert loader.loaded_from_file is True

    def test_yaml_file(self, tmp_path):
        """Test loading from a YAML settings file."""
        pytest.importorskip("yaml")
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("default_acks: all\nbootstrap_servers_separator: ';'\n")

        settings = load_settings(env={}, config_file=config_file)
        assert settings.default_acks == "all"
        assert settings.bootstrap_servers_separator == ";"

    def test_config_file_from_environment(self, tmp_path):
        """Test KKC_CONFIG_FILE selects the settings file."""
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"default_acks": "all"}))

        settings = load_settings(env={"KKC_CONFIG_FILE": str(config_file)})
        assert settings.default_acks == "all"

    def test_environment_wins_over_file(self, tmp_path):
        """Test environment variables override file values."""
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"default_acks": "0"}))

        settings = load_settings(env={"KKC_DEFAULT_ACKS": "all"}, config_file=config_file)
        assert settings.default_acks == "all"

    def test_missing_file_is_skipped(self, tmp_path):
        """Test a missing file falls back to defaults."""
        loader = SettingsLoader(env={}, config_file=tmp_path / "missing.json")
        assert loader.load() == DEFAULT_SETTINGS
        assert loader.loaded_from_file is False

    def test_malformed_file_is_skipped(self, tmp_path):
        """Test an unparsable file falls back to defaults."""
        config_file = tmp_path / "settings.json"
        config_file.write_text("{not json")
        assert load_settings(env={}, config_file=config_file) == DEFAULT_SETTINGS

    def test_non_mapping_file_is_skipped(self, tmp_path):
        """Test a file whose top level is not a mapping is ignored."""
        config_file = tmp_path / "settings.json"
        config_file.write_text("[1, 2]")
        assert load_settings(env={}, config_file=config_file) == DEFAULT_SETTINGS

    def test_env_var_help(self):
        """Test help text covers every environment variable."""
        help_text = get_env_var_help()
        assert set(help_text) == set(ENV_VAR_MAPPING)
        assert help_text["KKC_DEBUG_MODE"] == "Type: bool, Field: debug_mode"


class TestDebugMode:
    """Test debug mode wiring into logging."""

    @pytest.fixture()
    def package_logger(self):
        """Package logger with its level restored afterwards."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        original_level = package_logger.level
        yield package_logger
        package_logger.setLevel(original_level)

    def test_debug_mode_raises_package_logger(self, package_logger):
        """Test KKC_DEBUG_MODE lowers the package logger to DEBUG."""
        package_logger.setLevel(logging.WARNING)
        load_settings(env={"KKC_DEBUG_MODE": "true"})
        assert package_logger.level == logging.DEBUG

    def test_package_logger_untouched_by_default(self, package_logger):
        """Test the logger level is left alone without debug mode."""
        package_logger.setLevel(logging.WARNING)
        load_settings(env={})
        assert package_logger.level == logging.WARNING
