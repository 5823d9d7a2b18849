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

"""Keycloak Kafka connector.

Translates Keycloak-style property bags into Kafka producer configuration,
including SASL/JAAS settings, and builds kafka-python producers from them.
"""

from .client import (
    build_producer,
    build_producer_from_scope,
    create_producer,
    parse_jaas_config,
    to_producer_kwargs,
)
from .config import DEFAULT_SETTINGS, ConnectorSettings, load_settings
from .exceptions import (
    ConfigurationError,
    ConnectorError,
    SerializationError,
    SerializerNotFoundError,
)
from .serializers import JsonSerializer, Serializer, SerializerRegistry, StringSerializer
from .sources import (
    ConfigScope,
    MappingPropertySource,
    PropertySource,
    ScopedPropertySource,
    as_property_source,
)
from .translator import (
    apply_defaults,
    build_jaas_config,
    filter_by_prefix,
    filter_recognized,
    translate_producer_config,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_SETTINGS",
    "ConfigScope",
    "ConfigurationError",
    "ConnectorError",
    "ConnectorSettings",
    "JsonSerializer",
    "MappingPropertySource",
    "PropertySource",
    "ScopedPropertySource",
    "SerializationError",
    "Serializer",
    "SerializerNotFoundError",
    "SerializerRegistry",
    "StringSerializer",
    "apply_defaults",
    "as_property_source",
    "build_jaas_config",
    "build_producer",
    "build_producer_from_scope",
    "create_producer",
    "filter_by_prefix",
    "filter_recognized",
    "load_settings",
    "parse_jaas_config",
    "to_producer_kwargs",
    "translate_producer_config",
]
