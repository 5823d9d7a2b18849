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

"""Translation of generic property bags into Kafka producer configuration.

Given a namespace prefix such as "keycloak.kafka.", the translator:
- keeps only keys naming a recognized producer option under the prefix
  (or under the more specific "<prefix>producer." sub-prefix)
- synthesizes "sasl.jaas.config" from the "<prefix>sasl.jaas.options."
  sub-tree when "<prefix>sasl.jaas.enabled" is true
- applies the acks default and turns "bootstrap.servers" into a list

All functions here are pure: inputs are never mutated and every call
builds fresh dicts.
"""

from collections.abc import Collection, Mapping
import logging
from typing import Any

from .config import DEFAULT_SETTINGS, ConnectorSettings
from .options import (
    ACKS,
    BOOTSTRAP_SERVERS,
    LOGIN_MODULE_OPTION,
    RECOGNIZED_OPTION_NAMES,
    SASL_JAAS_CONFIG,
)
from .sources import as_property_source

logger = logging.getLogger(__name__)


def filter_recognized(
    properties: Mapping[str, Any],
    names: Collection[str],
    *prefixes: str,
) -> dict[str, Any]:
    """Select entries whose key is exactly a prefix followed by a known name.

    Matching entries are re-keyed to the bare option name. When several raw
    keys map to the same option, the one seen last in iteration order wins,
    so callers list properties from general to specific.

    Args:
        properties: Flat property bag
        names: Recognized option names
        *prefixes: Candidate prefixes, compared exactly

    Returns:
        A new dict keyed by recognized option names only
    """
    selected: dict[str, Any] = {}
    for key, value in properties.items():
        name = _match_recognized(key, names, prefixes)
        if name is not None:
            selected[name] = value
    return selected


def _match_recognized(key: Any, names: Collection[str], prefixes: tuple[str, ...]) -> str | None:
    if not isinstance(key, str):
        return None
    for prefix in prefixes:
        if key.startswith(prefix):
            name = key[len(prefix):]
            if name in names:
                return name
    return None


def filter_by_prefix(
    properties: Mapping[str, Any],
    *prefixes: str,
    remove_prefix: bool = True,
) -> dict[str, Any]:
    """Select every entry whose key starts with one of the prefixes.

    The first matching prefix is stripped from the key unless remove_prefix
    is False. No match yields an empty dict.
    """
    selected: dict[str, Any] = {}
    for key, value in properties.items():
        if not isinstance(key, str):
            continue
        for prefix in prefixes:
            if key.startswith(prefix):
                selected[key[len(prefix):] if remove_prefix else key] = value
                break
    return selected


def is_enabled(value: Any) -> bool:
    """Boolean flag parsing: True or exactly the string "true" in any case."""
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value.lower() == "true"


def _format_jaas_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_jaas_config(
    properties: Mapping[str, Any],
    prefix: str,
    settings: ConnectorSettings = DEFAULT_SETTINGS,
) -> str | None:
    """Synthesize the JAAS configuration string from the options sub-tree.

    The result reads "<loginModule> required k1=v1 k2=v2;" with options in
    the property bag's insertion order.

    Returns:
        The JAAS string, or None when "<prefix>sasl.jaas.enabled" is not true
    """
    if not is_enabled(properties.get(prefix + settings.jaas_enabled_key)):
        return None

    jaas_options = filter_by_prefix(properties, prefix + settings.jaas_options_prefix)
    login_module = jaas_options.pop(LOGIN_MODULE_OPTION, None)
    if login_module is None:
        login_module = settings.default_login_module

    parts = [f"{login_module} required"]
    parts.extend(f"{key}={_format_jaas_value(value)}" for key, value in jaas_options.items())
    return " ".join(parts) + ";"


def split_servers(value: str, separator: str = ",") -> list[str]:
    """Split a delimited server list, dropping blanks."""
    return [server.strip() for server in value.split(separator) if server.strip()]


def apply_defaults(
    config: Mapping[str, Any],
    settings: ConnectorSettings = DEFAULT_SETTINGS,
) -> dict[str, Any]:
    """Apply the acks default and coerce bootstrap servers into a list.

    Idempotent: applying it to its own output changes nothing.
    """
    result = dict(config)
    result.setdefault(ACKS, settings.default_acks)

    servers = result.get(BOOTSTRAP_SERVERS)
    if isinstance(servers, str):
        result[BOOTSTRAP_SERVERS] = split_servers(servers, settings.bootstrap_servers_separator)
    elif isinstance(servers, (list, tuple)):
        result[BOOTSTRAP_SERVERS] = [str(server) for server in servers]
    return result


def translate_producer_config(
    source: Any,
    prefix: str,
    settings: ConnectorSettings = DEFAULT_SETTINGS,
) -> dict[str, Any]:
    """Translate a property source into a Kafka producer configuration.

    Args:
        source: A flat mapping, a host configuration scope or a PropertySource
        prefix: Namespace prefix, e.g. "keycloak.kafka."
        settings: Translation settings

    Returns:
        Producer configuration keyed by recognized option names only
    """
    properties = as_property_source(source).properties(prefix)

    config = filter_recognized(
        properties,
        RECOGNIZED_OPTION_NAMES,
        prefix,
        prefix + settings.producer_prefix,
    )

    jaas_config = build_jaas_config(properties, prefix, settings)
    if jaas_config is not None:
        config[SASL_JAAS_CONFIG] = jaas_config

    config = apply_defaults(config, settings)

    logger.debug("Translated producer options under '%s': %s", prefix, sorted(config))
    return config
