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

"""Kafka producer construction from translated configuration."""

from collections.abc import Callable, Mapping
import logging
import re
from typing import Any

from kafka import KafkaProducer

from .config import DEFAULT_SETTINGS, ConnectorSettings
from .exceptions import ConfigurationError
from .options import ACKS, KEY_SERIALIZER, SASL_JAAS_CONFIG, SASL_MECHANISM, VALUE_SERIALIZER
from .serializers import SerializerRegistry
from .sources import ConfigScope
from .translator import translate_producer_config

logger = logging.getLogger(__name__)

ProducerFactory = Callable[..., Any]

# Option names whose kafka-python keyword is not the snake_case spelling
_KWARG_RENAMES = {
    "ssl.key.password": "ssl_password",
    "ssl.cipher.suites": "ssl_ciphers",
}

# Options consumed here rather than passed through
_HANDLED_OPTIONS = frozenset({KEY_SERIALIZER, VALUE_SERIALIZER, SASL_JAAS_CONFIG})

_USERNAME_PASSWORD_MECHANISMS = ("PLAIN", "SCRAM-SHA-256", "SCRAM-SHA-512")

_JAAS_CONTROL_FLAGS = ("required", "requisite", "sufficient", "optional")

# key=value where value is a double-quoted string or a bare token
_JAAS_OPTION_PATTERN = re.compile(r'(\S+?)=("(?:[^"\\]|\\.)*"|\S+)')
_JAAS_ESCAPE_PATTERN = re.compile(r"\\(.)")

# Numeric options whose kafka-python default does not reveal the type
_NUMERIC_SUFFIXES = (".ms", ".bytes", ".size")
_NUMERIC_OPTIONS = frozenset(
    {
        "buffer.memory",
        "max.in.flight.requests.per.connection",
        "metrics.num.samples",
        "retries",
    },
)


def parse_jaas_config(value: str) -> tuple[str, dict[str, str]]:
    """Split a JAAS configuration string into login module and options.

    Values are either double-quoted, with backslash escapes, e.g.
    'Module required username="alice";', or bare tokens taken verbatim up to
    the next whitespace. Single quotes and backslashes in bare tokens are
    ordinary characters.

    Raises:
        ConfigurationError: If the string names no login module
    """
    text = value.strip()
    if text.endswith(";"):
        text = text[:-1].rstrip()
    if not text:
        raise ConfigurationError(
            f"Empty {SASL_JAAS_CONFIG}",
            "SASL JAAS configuration could not be parsed",
        )

    login_module = text.split(None, 1)[0]
    remainder = text[len(login_module):].lstrip()
    flag = remainder.split(None, 1)[0] if remainder else ""
    if flag in _JAAS_CONTROL_FLAGS:
        remainder = remainder[len(flag):]

    options = {}
    for match in _JAAS_OPTION_PATTERN.finditer(remainder):
        key, option_value = match.group(1), match.group(2)
        if len(option_value) >= 2 and option_value[0] == option_value[-1] == '"':
            option_value = _JAAS_ESCAPE_PATTERN.sub(r"\1", option_value[1:-1])
        options[key] = option_value
    return login_module, options


def _to_number(value: str) -> int | float:
    stripped = value.strip()
    try:
        return int(stripped)
    except ValueError:
        return float(stripped)


def _is_numeric_option(name: str, kwarg: str) -> bool:
    if name in _NUMERIC_OPTIONS or name.endswith(_NUMERIC_SUFFIXES):
        return True
    default = KafkaProducer.DEFAULT_CONFIG.get(kwarg)
    return isinstance(default, (int, float)) and not isinstance(default, bool)


def _coerce_option(name: str, kwarg: str, value: Any) -> Any:
    """Convert string values to the type kafka-python expects for kwarg."""
    if not isinstance(value, str):
        return value

    if isinstance(KafkaProducer.DEFAULT_CONFIG.get(kwarg), bool):
        return value.strip().lower() == "true"
    if name == ACKS:
        stripped = value.strip()
        return int(stripped) if stripped.lstrip("-").isdigit() else stripped
    if _is_numeric_option(name, kwarg):
        try:
            return _to_number(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Option '{name}' expects a number, got '{value}'",
                context={"option": name},
            ) from e
    return value


def to_producer_kwargs(config: Mapping[str, Any]) -> dict[str, Any]:
    """Map dotted producer option names onto KafkaProducer keyword arguments.

    Options kafka-python does not support are skipped. Serializer names and
    the JAAS string are handled by create_producer.
    """
    kwargs: dict[str, Any] = {}
    for name, value in config.items():
        if name in _HANDLED_OPTIONS:
            continue
        kwarg = _KWARG_RENAMES.get(name, name.replace(".", "_"))
        if kwarg not in KafkaProducer.DEFAULT_CONFIG:
            logger.warning("Option %s has no kafka-python equivalent, skipping", name)
            continue
        kwargs[kwarg] = _coerce_option(name, kwarg, value)

    jaas_config = config.get(SASL_JAAS_CONFIG)
    mechanism = str(config.get(SASL_MECHANISM) or "").upper()
    if jaas_config and mechanism in _USERNAME_PASSWORD_MECHANISMS:
        _, options = parse_jaas_config(str(jaas_config))
        if "username" in options:
            kwargs.setdefault("sasl_plain_username", options["username"])
        if "password" in options:
            kwargs.setdefault("sasl_plain_password", options["password"])
    return kwargs


def create_producer(
    config: Mapping[str, Any],
    registry: SerializerRegistry | None = None,
    producer_factory: ProducerFactory | None = None,
) -> Any:
    """Construct a producer from a translated configuration.

    Args:
        config: Output of translate_producer_config
        registry: Serializer registry; a default one when omitted
        producer_factory: Producer constructor; kafka.KafkaProducer when omitted

    Raises:
        ConfigurationError: If a serializer name is unknown or an option is malformed
    """
    registry = registry or SerializerRegistry()
    producer_factory = producer_factory or KafkaProducer

    key_serializer = registry.create(config.get(KEY_SERIALIZER))
    value_serializer = registry.create(config.get(VALUE_SERIALIZER))

    kwargs = to_producer_kwargs(config)
    kwargs["key_serializer"] = key_serializer
    kwargs["value_serializer"] = value_serializer

    logger.info(
        "Creating Kafka producer for %s (key=%s, value=%s)",
        kwargs.get("bootstrap_servers"),
        key_serializer.name,
        value_serializer.name,
    )
    return producer_factory(**kwargs)


def build_producer(
    properties: Mapping[Any, Any],
    prefix: str,
    settings: ConnectorSettings = DEFAULT_SETTINGS,
    registry: SerializerRegistry | None = None,
    producer_factory: ProducerFactory | None = None,
) -> Any:
    """Build a producer from a flat property bag."""
    config = translate_producer_config(properties, prefix, settings)
    return create_producer(config, registry, producer_factory)


def build_producer_from_scope(
    scope: ConfigScope,
    prefix: str,
    settings: ConnectorSettings = DEFAULT_SETTINGS,
    registry: SerializerRegistry | None = None,
    producer_factory: ProducerFactory | None = None,
) -> Any:
    """Build a producer from a host configuration scope."""
    config = translate_producer_config(scope, prefix, settings)
    return create_producer(config, registry, producer_factory)
