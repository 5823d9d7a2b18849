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

"""Settings loader for the Keycloak Kafka connector.

Settings are resolved once, in this order, and then frozen:
- Built-in defaults
- An optional JSON/YAML settings file
- Environment variables with the KKC_ prefix

The resulting ConnectorSettings instance is immutable and is passed
explicitly to whatever needs it.
"""

from collections.abc import Mapping
import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

try:
    import yaml
except ImportError:
    yaml = None

from ..exceptions import ConfigurationError
from .defaults import DEFAULT_SETTINGS, ENV_VAR_MAPPING, ENV_VAR_TYPES, TRUE_VALUES
from .schema import ConnectorSettings

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "KKC_CONFIG_FILE"

# Root logger of the package, raised to DEBUG in debug mode
PACKAGE_LOGGER = "keycloak_kafka_connector"


class SettingsLoader:
    """Builds a validated ConnectorSettings from a file and the environment."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        config_file: str | Path | None = None,
    ) -> None:
        self._env = os.environ if env is None else env
        if config_file is None:
            config_file = self._env.get(CONFIG_FILE_ENV_VAR)
        self._config_file = Path(config_file) if config_file else None
        self.loaded_from_env = False
        self.loaded_from_file = False

    def load(self) -> ConnectorSettings:
        """Resolve settings from all sources.

        Returns:
            Frozen, validated settings

        Raises:
            ConfigurationError: If the merged values do not validate
        """
        settings_data = DEFAULT_SETTINGS.model_dump()

        self._load_from_file(settings_data)
        self._load_from_environment(settings_data)

        try:
            settings = ConnectorSettings(**settings_data)
        except ValidationError as e:
            logger.exception("Connector settings validation failed")
            raise ConfigurationError(
                f"Invalid connector settings: {e}",
                "Connector settings are invalid",
                context={"errors": [str(error.get("msg")) for error in e.errors()]},
                recovery_suggestion="Check KKC_* environment variables and the settings file",
            ) from e

        logger.info(
            "Connector settings loaded (file=%s, env=%s)",
            self.loaded_from_file,
            self.loaded_from_env,
        )
        if settings.debug_mode:
            logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)
            logger.info("Debug mode enabled for %s", PACKAGE_LOGGER)
        return settings

    def _load_from_file(self, settings_data: dict[str, Any]) -> None:
        """Merge values from a JSON/YAML settings file, if one is configured."""
        config_path = self._config_file
        if config_path is None:
            return

        try:
            with config_path.open() as f:
                if config_path.suffix in [".yaml", ".yml"]:
                    if yaml is None:
                        logger.warning("YAML support not available, skipping %s", config_path)
                        return
                    file_config = yaml.safe_load(f)
                else:
                    file_config = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, PermissionError, OSError) as e:
            logger.warning("Failed to load settings from %s: %s", config_path, e)
            return

        if not isinstance(file_config, dict):
            logger.warning("Ignoring settings file %s: top level is not a mapping", config_path)
            return

        settings_data.update(file_config)
        self.loaded_from_file = True
        logger.info("Loaded connector settings from %s", config_path)

    def _load_from_environment(self, settings_data: dict[str, Any]) -> None:
        """Override values from KKC_* environment variables."""
        env_vars_found = []

        for env_var, field_name in ENV_VAR_MAPPING.items():
            env_value = self._env.get(env_var)
            if env_value is None:
                continue
            try:
                var_type = ENV_VAR_TYPES.get(env_var, str)
                if var_type is bool:
                    converted_value: Any = env_value.lower() in TRUE_VALUES
                else:
                    converted_value = var_type(env_value)
            except (ValueError, TypeError) as e:
                logger.warning("Invalid value for %s='%s': %s", env_var, env_value, e)
                continue

            settings_data[field_name] = converted_value
            env_vars_found.append(env_var)

        if env_vars_found:
            self.loaded_from_env = True
            logger.info(
                "Loaded %d connector settings from environment variables",
                len(env_vars_found),
            )


def load_settings(
    env: Mapping[str, str] | None = None,
    config_file: str | Path | None = None,
) -> ConnectorSettings:
    """Load connector settings once at startup."""
    return SettingsLoader(env=env, config_file=config_file).load()


def get_env_var_help() -> dict[str, str]:
    """Get help text for all supported environment variables."""
    help_text = {}

    for env_var, field_name in ENV_VAR_MAPPING.items():
        var_type = ENV_VAR_TYPES.get(env_var, str)
        help_text[env_var] = f"Type: {var_type.__name__}, Field: {field_name}"

    return help_text
